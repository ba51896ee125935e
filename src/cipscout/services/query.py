"""Query seances by day, time of day and version."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from cipscout.exceptions import InputError, ParseError
from cipscout.models import Cinema, Film, Seance
from cipscout.utils.dates import parse_time, resolve_date

logger = logging.getLogger(__name__)


class Version(str, Enum):
    """Canonical seance versions."""

    ORIGINAL = "VO"  # Original language, subtitled
    FRENCH = "VF"  # Dubbed in French

    @classmethod
    def from_flags(cls, vo: bool, vf: bool) -> "Version | None":
        """Map --vo/--vf flags to a filter; both or neither means no filter."""
        if vo and not vf:
            return cls.ORIGINAL
        if vf and not vo:
            return cls.FRENCH
        return None


@dataclass
class QueryOptions:
    """
    Filters for a seance query.

    When a day or a time of day is given, seances are restricted to one listing
    day: from ``day`` at ``time_of_day`` (default ``day_start``) up to the next
    day at ``day_start``. Screenings shortly after midnight therefore
    belong to the previous evening.
    """

    now: datetime
    tz: tzinfo
    day_start: time
    day: date | None = None
    time_of_day: time | None = None
    version: Version | None = None

    def after(self) -> datetime | None:
        if self.day is None and self.time_of_day is None:
            return None
        start = self.day if self.day is not None else self.now.date()
        at = self.time_of_day if self.time_of_day is not None else self.day_start
        return datetime.combine(start, at, tzinfo=self.tz)

    def before(self) -> datetime | None:
        after = self.after()
        if after is None:
            return None
        next_day = (after + timedelta(hours=24)).date()
        return datetime.combine(next_day, self.day_start, tzinfo=self.tz)


def parse_filters(
    day: str | None, time_of_day: str | None, now: datetime
) -> tuple[date | None, time | None]:
    """
    Parse user supplied "DD/MM" and "HH:MM" filters.

    Raises:
        InputError: If either value is malformed or not a real date
    """
    try:
        return (
            resolve_date(day, now) if day else None,
            parse_time(time_of_day) if time_of_day else None,
        )
    except ParseError as e:
        raise InputError(str(e)) from e


@dataclass
class QueryResult:
    """A seance together with its cinema and film."""

    cinema: Cinema
    film: Film
    seance: Seance


def _base_select() -> Select:
    return (
        select(Seance, Cinema, Film)
        .join(Cinema, Cinema.id == Seance.cinema_id)
        .join(Film, Film.id == Seance.film_id)
    )


async def query_seances(db: AsyncSession, options: QueryOptions) -> list[QueryResult]:
    """
    Return seances matching the options, earliest first.

    Seances starting at the same time are ordered by id.
    """
    stmt = _base_select()

    after = options.after()
    if after is not None:
        stmt = stmt.where(Seance.start_time >= after)
    before = options.before()
    if before is not None:
        stmt = stmt.where(Seance.start_time <= before)
    if options.version is not None:
        stmt = stmt.where(Seance.version == options.version.value)

    stmt = stmt.order_by(Seance.start_time, Seance.id)

    result = await db.execute(stmt)
    results = [
        QueryResult(cinema=cinema, film=film, seance=seance)
        for seance, cinema, film in result.all()
    ]
    logger.debug(f"Query between {after} and {before} returned {len(results)} seances")
    return results


async def get_seance(db: AsyncSession, seance_id: int) -> QueryResult | None:
    """Return one seance with its cinema and film, or None if it does not exist."""
    stmt = _base_select().where(Seance.id == seance_id)
    result = await db.execute(stmt)
    row = result.first()
    if row is None:
        return None
    seance, cinema, film = row
    return QueryResult(cinema=cinema, film=film, seance=seance)
