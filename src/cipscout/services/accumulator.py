"""Run-wide collection of seances shared by the per-cinema scrape tasks."""

import asyncio
import logging

from cipscout.scrapers.models import RawSeance, SeanceRecord

logger = logging.getLogger(__name__)


class SeanceAccumulator:
    """
    Deduplicating, id-assigning store of seances for one scrape run.

    Many scraper tasks submit candidates concurrently. The duplicate check
    and the append happen under one lock with no await in between, so two
    equal candidates can never both be accepted.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._seances: list[SeanceRecord] = []
        self._keys: set[tuple] = set()

    async def add(self, candidate: RawSeance) -> SeanceRecord | None:
        """
        Accept a candidate unless an equal one was already accepted.

        Args:
            candidate: Seance extracted from a listing page

        Returns:
            The stored record with its new id, or None for a duplicate
        """
        async with self._lock:
            key = candidate.key()
            if key in self._keys:
                return None

            record = SeanceRecord(
                id=len(self._seances) + 1,
                cinema_id=candidate.cinema_id,
                film_id=candidate.film_id,
                start_time=candidate.start_time,
                version=candidate.version,
                url=candidate.url,
            )
            self._keys.add(key)
            self._seances.append(record)
            return record

    @property
    def seances(self) -> list[SeanceRecord]:
        """Accepted seances in acceptance order."""
        return list(self._seances)

    def __len__(self) -> int:
        return len(self._seances)
