"""Scrapers for the cip-paris.fr catalog and cinema listing pages."""
