"""Seance listings scraper and query tool for the CIP cinema network (cip-paris.fr)."""

__version__ = "0.1.0"
