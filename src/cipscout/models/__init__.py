"""SQLAlchemy ORM models."""

from cipscout.models.base import Base
from cipscout.models.cinema import Cinema
from cipscout.models.film import Film
from cipscout.models.seance import Seance

__all__ = ["Base", "Cinema", "Film", "Seance"]
