"""Listing page scraper for cinemas of the CIP network (cip-paris.fr)."""

import logging
from datetime import datetime, tzinfo

import httpx
from bs4 import BeautifulSoup, Tag

from cipscout.exceptions import ExtractionError, ParseError, UnknownFilmError
from cipscout.scrapers.base import BaseScraper
from cipscout.scrapers.catalog import fetch_text
from cipscout.scrapers.models import CatalogCinema, CatalogFilm, RawSeance
from cipscout.services.accumulator import SeanceAccumulator
from cipscout.utils.dates import parse_day_month, parse_time, resolve_datetime

logger = logging.getLogger(__name__)


class CipScraper(BaseScraper):
    """
    Scraper for one CIP cinema page.

    Page structure:
    - ``.movie-results-container``: one block per film, whose ``.poster``
      link points at the film's page (matched against the film catalog)
    - ``.session-date``: one block per seance, holding ``.sessionDate``
      ("Lundi 10/06"), ``.time`` ("20:30"), ``.version`` and an optional
      reservation ``<a>``
    """

    def __init__(
        self,
        cinema: CatalogCinema,
        films: list[CatalogFilm],
        now: datetime,
        tz: tzinfo,
        root_url: str,
    ) -> None:
        """
        Args:
            cinema: Cinema whose page is scraped
            films: Full film catalog of this run
            now: Reference time used to infer listing years
            tz: Fixed offset of the listings
            root_url: Site root used to resolve the cinema page URL
        """
        self.cinema = cinema
        self.films_by_path = {film.url_path: film for film in films}
        self.now = now
        self.tz = tz
        self.root_url = root_url

    async def get_seances(
        self,
        client: httpx.AsyncClient,
        accumulator: SeanceAccumulator,
    ) -> int:
        """Fetch the cinema page and submit its seances."""
        html = await fetch_text(client, self.cinema.url(self.root_url))
        try:
            candidates = self._parse_html(html)
        except ParseError as e:
            raise ExtractionError(self.cinema.name, e) from e

        accepted = 0
        for candidate in candidates:
            if await accumulator.add(candidate) is not None:
                accepted += 1

        logger.info(
            f"{self.cinema.name}: {len(candidates)} seances found, {accepted} new"
        )
        return accepted

    def _parse_html(self, html: str) -> list[RawSeance]:
        """Parse a cinema listing page into candidate seances."""
        soup = BeautifulSoup(html, "html.parser")
        seances: list[RawSeance] = []

        for film_block in soup.find_all(class_="movie-results-container"):
            film = self._match_film(film_block)
            sessions = film_block.find_all(class_="session-date")
            logger.debug(f"{self.cinema.name}: {film.name} has {len(sessions)} sessions")

            for session in sessions:
                seances.append(self._parse_session(session, film))

        return seances

    def _match_film(self, film_block: Tag) -> CatalogFilm:
        poster = _require(film_block, "poster")
        url_path = poster.get("href")
        if not url_path:
            raise ParseError("poster link has no href")

        film = self.films_by_path.get(url_path)
        if film is None:
            raise UnknownFilmError(url_path)
        return film

    def _parse_session(self, session: Tag, film: CatalogFilm) -> RawSeance:
        # "Lundi 10/06": only the day/month part matters
        date_text = _require(session, "sessionDate").get_text().strip()
        parts = date_text.split(None, 1)
        if len(parts) != 2:
            raise ParseError(f"session date {date_text!r} has no DD/MM part")
        day, month = parse_day_month(parts[1])

        at = parse_time(_require(session, "time").get_text())
        version = _require(session, "version").get_text().strip()

        link = session.find("a")
        url = link.get("href") if link else None

        return RawSeance(
            cinema_id=self.cinema.id,
            film_id=film.id,
            start_time=resolve_datetime(day, month, at.hour, at.minute, self.now, self.tz),
            version=version,
            url=url,
        )


def _require(parent: Tag, class_name: str) -> Tag:
    """Find the first descendant with a class, or fail naming the node."""
    node = parent.find(class_=class_name)
    if node is None:
        raise ParseError(f"missing .{class_name} node")
    return node
