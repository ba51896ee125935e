"""Data models for scrapers."""

from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urljoin

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cipscout.utils.text import postal_code


class CatalogCinema(BaseModel):
    """Cinema record from the /json/cinemas endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0  # Assigned after fetching, 1-based in catalog order
    name: str = Field(alias="value")
    url_path: str = Field(alias="url")
    address: str
    image_path: str = Field(alias="image1")

    def zip(self) -> str:
        return postal_code(self.address)

    def description(self) -> str:
        return f"{self.name} ({self.zip()})"

    def url(self, root_url: str) -> str:
        return urljoin(root_url, self.url_path)


class CatalogFilm(BaseModel):
    """Film record from the /json/movies endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(alias="value")
    url_path: str = Field(alias="url")
    image_path: str
    director: str = ""
    release_date: str = Field(alias="releaseDate")

    @field_validator("director", mode="before")
    @classmethod
    def default_missing_director(cls, value: str | None) -> str:
        """The source sends null for films without a known director."""
        return value or ""

    def description(self) -> str:
        return f"{self.name} ({self.release_date})"

    def url(self, root_url: str) -> str:
        return urljoin(root_url, self.url_path)


@dataclass(frozen=True)
class RawSeance:
    """
    Candidate seance extracted from a cinema listing page.

    Has no id yet: ids are assigned by the accumulator once the seance is
    known not to be a duplicate.
    """

    cinema_id: int
    film_id: int
    start_time: datetime  # Timezone-aware
    version: str  # "VO", "VF", or whatever label the page shows
    url: str | None = None  # Reservation link

    def __post_init__(self) -> None:
        """Validate that start_time is timezone-aware."""
        if self.start_time.tzinfo is None:
            raise ValueError("start_time must be timezone-aware")

    def key(self) -> tuple[int, int, datetime, str, str | None]:
        """Identity of the screening, used for deduplication."""
        return (self.cinema_id, self.film_id, self.start_time, self.version, self.url)


@dataclass(frozen=True)
class SeanceRecord:
    """A deduplicated seance with its run-wide id."""

    id: int
    cinema_id: int
    film_id: int
    start_time: datetime
    version: str
    url: str | None = None
