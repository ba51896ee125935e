"""Errors raised while ingesting and querying listings."""


class CipScoutError(Exception):
    """Base class for all cipscout errors."""


class FetchError(CipScoutError):
    """A catalog or listing page could not be downloaded."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class ParseError(CipScoutError):
    """A catalog record or listing page is missing an expected field."""


class UnknownFilmError(ParseError):
    """A listing links to a film that is absent from the film catalog."""

    def __init__(self, url_path: str) -> None:
        super().__init__(f"film {url_path!r} is not in the film catalog")
        self.url_path = url_path


class InputError(ParseError):
    """A user supplied filter value is malformed."""


class PersistenceError(CipScoutError):
    """The store could not be created or written."""


class ExtractionError(CipScoutError):
    """A cinema's listing page could not be turned into seances."""

    def __init__(self, cinema: str, cause: ParseError) -> None:
        super().__init__(f"{cinema}: {cause}")
        self.cinema = cinema
