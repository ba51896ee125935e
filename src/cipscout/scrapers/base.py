"""Base scraper interface for cinema listing scrapers."""

from abc import ABC, abstractmethod

import httpx

from cipscout.services.accumulator import SeanceAccumulator


class BaseScraper(ABC):
    """
    Abstract base class for cinema listing scrapers.

    Unlike a best-effort aggregator, a scrape run here is all or nothing:
    scrapers raise on any fetch or parse problem instead of returning a
    partial result.
    """

    @abstractmethod
    async def get_seances(
        self,
        client: httpx.AsyncClient,
        accumulator: SeanceAccumulator,
    ) -> int:
        """
        Fetch this cinema's listing and submit its seances.

        Args:
            client: Shared HTTP client
            accumulator: Run-wide seance collection

        Returns:
            Number of seances accepted (duplicates excluded)

        Raises:
            FetchError: If the page cannot be downloaded
            ParseError: If the page is missing an expected node
        """
