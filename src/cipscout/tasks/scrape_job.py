"""Scrape job that rebuilds the store from the live site."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import httpx

from cipscout.config import Settings
from cipscout.scrapers.catalog import CatalogFetcher
from cipscout.scrapers.cip import CipScraper
from cipscout.services.accumulator import SeanceAccumulator
from cipscout.services.store import write_store

logger = logging.getLogger(__name__)


@dataclass
class ScrapeSummary:
    cinemas: int
    films: int
    seances: int


async def run_scrape(
    config: Settings,
    db_path: Path,
    now: datetime | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ScrapeSummary:
    """
    Fetch the catalog and every cinema's listing, then replace the store.

    Any fetch, parse or write error aborts the whole run; the previous
    store is left in place.

    Args:
        config: Source URLs, offset and timeout
        db_path: Store to replace
        now: Reference time for year inference (defaults to the current time)
        transport: Optional httpx transport, used by tests

    Returns:
        Counts of what was written
    """
    if now is None:
        now = config.now()

    logger.info(f"Starting scrape of {config.root_url}")

    fetcher = CatalogFetcher(config.root_url, config.cinemas_path, config.films_path)
    accumulator = SeanceAccumulator()

    async with httpx.AsyncClient(
        timeout=config.scrape_timeout,
        follow_redirects=True,
        transport=transport,
    ) as client:
        cinemas, films = await fetcher.fetch(client)

        scrapers = [
            CipScraper(cinema, films, now=now, tz=config.tz, root_url=config.root_url)
            for cinema in cinemas
        ]
        # All listings must be in before anything is written; the first
        # failure cancels the other scrapers while the client is still open
        try:
            async with asyncio.TaskGroup() as tg:
                for scraper in scrapers:
                    tg.create_task(scraper.get_seances(client, accumulator))
        except ExceptionGroup as eg:
            raise eg.exceptions[0]

    logger.info(
        f"Collected {len(accumulator)} seances from {len(cinemas)} cinemas"
    )

    await write_store(db_path, cinemas, films, accumulator.seances)

    summary = ScrapeSummary(
        cinemas=len(cinemas),
        films=len(films),
        seances=len(accumulator),
    )
    logger.info(
        f"Scrape complete: {summary.cinemas} cinemas, {summary.films} films, "
        f"{summary.seances} seances"
    )
    return summary
