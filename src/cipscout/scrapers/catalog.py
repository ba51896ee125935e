"""Fetch the cinema and film catalogs published as JSON by cip-paris.fr."""

import asyncio
import logging
from urllib.parse import urljoin

import httpx
from pydantic import TypeAdapter, ValidationError

from cipscout.exceptions import FetchError, ParseError
from cipscout.scrapers.models import CatalogCinema, CatalogFilm

logger = logging.getLogger(__name__)

_CINEMAS = TypeAdapter(list[CatalogCinema])
_FILMS = TypeAdapter(list[CatalogFilm])


async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
    """
    GET a URL and return the body.

    Raises:
        FetchError: On transport failure or a non-success status
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise FetchError(url, str(e)) from e
    return response.text


class CatalogFetcher:
    """
    Downloads the global cinema and film lists.

    Both lists are fetched concurrently; extraction needs the complete film
    list, so callers wait for both.
    """

    def __init__(self, root_url: str, cinemas_path: str, films_path: str) -> None:
        self.cinemas_url = urljoin(root_url, cinemas_path)
        self.films_url = urljoin(root_url, films_path)

    async def fetch_cinemas(self, client: httpx.AsyncClient) -> list[CatalogCinema]:
        """Fetch cinemas and number them 1.. in catalog order."""
        body = await fetch_text(client, self.cinemas_url)
        try:
            cinemas = _CINEMAS.validate_json(body)
        except ValidationError as e:
            raise ParseError(f"Invalid cinema catalog from {self.cinemas_url}: {e}") from e

        for index, cinema in enumerate(cinemas, start=1):
            cinema.id = index

        logger.info(f"Downloaded {len(cinemas)} cinemas")
        return cinemas

    async def fetch_films(self, client: httpx.AsyncClient) -> list[CatalogFilm]:
        body = await fetch_text(client, self.films_url)
        try:
            films = _FILMS.validate_json(body)
        except ValidationError as e:
            raise ParseError(f"Invalid film catalog from {self.films_url}: {e}") from e

        logger.info(f"Downloaded {len(films)} films")
        return films

    async def fetch(
        self, client: httpx.AsyncClient
    ) -> tuple[list[CatalogCinema], list[CatalogFilm]]:
        """Fetch both catalogs concurrently."""
        try:
            async with asyncio.TaskGroup() as tg:
                cinemas = tg.create_task(self.fetch_cinemas(client))
                films = tg.create_task(self.fetch_films(client))
        except ExceptionGroup as eg:
            raise eg.exceptions[0]
        return cinemas.result(), films.result()
