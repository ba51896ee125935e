"""Declarative base and shared column types."""

from datetime import datetime

from sqlalchemy import Text
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class IsoDateTime(TypeDecorator):
    """
    Timezone-aware datetime stored as ISO 8601 text with its offset.

    All stored values share one fixed offset, so text comparison and
    ordering match chronological order.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> str | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return value.isoformat()

    def process_result_value(self, value: str | None, dialect) -> datetime | None:
        if value is None:
            return None
        return datetime.fromisoformat(value)
