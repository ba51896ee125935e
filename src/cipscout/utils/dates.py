"""Date and time parsing for listings that omit the year."""

import re
from datetime import date, datetime, time, tzinfo

from cipscout.exceptions import ParseError

_DAY_MONTH_RE = re.compile(r"^(\d{1,2})/(\d{1,2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_day_month(text: str) -> tuple[int, int]:
    """
    Parse a "DD/MM" string.

    Only the shape is checked here; calendar validity depends on the year
    and is checked by resolve_date.

    Raises:
        ParseError: If the text is not two slash separated numbers
    """
    match = _DAY_MONTH_RE.match(text.strip())
    if not match:
        raise ParseError(f"date {text!r} should be in format DD/MM")
    return int(match.group(1)), int(match.group(2))


def parse_time(text: str) -> time:
    """
    Parse an "HH:MM" string.

    Raises:
        ParseError: If the text is malformed or out of range
    """
    match = _TIME_RE.match(text.strip())
    if not match:
        raise ParseError(f"time {text!r} should be in format HH:MM")
    try:
        return time(int(match.group(1)), int(match.group(2)))
    except ValueError as e:
        raise ParseError(f"time {text!r} is out of range: {e}") from e


def _build_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ParseError(f"{day:02d}/{month:02d}/{year} is not a valid date: {e}") from e


def next_occurrence(day: int, month: int, now: datetime) -> date:
    """
    Return the next calendar date matching day/month, relative to now.

    Listings only advertise upcoming screenings, so a date that looks past
    in the current year belongs to next year. A date equal to today stays
    in the current year.
    """
    today = now.date()
    candidate = _build_date(today.year, month, day)
    if candidate < today:
        return _build_date(today.year + 1, month, day)
    return candidate


def resolve_date(text: str, now: datetime) -> date:
    """Parse "DD/MM" and place it on the next matching calendar date."""
    day, month = parse_day_month(text)
    return next_occurrence(day, month, now)


def resolve_datetime(
    day: int,
    month: int,
    hour: int,
    minute: int,
    now: datetime,
    tz: tzinfo,
) -> datetime:
    """
    Build an absolute timestamp from a year-less listing date and time.

    Args:
        day: Day of month (1-31)
        month: Month (1-12)
        hour: Hour (0-23)
        minute: Minute (0-59)
        now: Reference time used to infer the year
        tz: Fixed offset of the listings

    Returns:
        Timezone-aware datetime

    Raises:
        ParseError: If the day/month is not a real date or the time is out of range
    """
    resolved = next_occurrence(day, month, now)
    try:
        at = time(hour, minute)
    except ValueError as e:
        raise ParseError(f"{hour:02d}:{minute:02d} is not a valid time: {e}") from e
    return datetime.combine(resolved, at, tzinfo=tz)
