"""Pydantic schemas for seance data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from cipscout.schemas.cinema import CinemaResponse
from cipscout.schemas.film import FilmResponse


class SeanceResponse(BaseModel):
    """Individual seance response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_time: datetime
    version: str
    url: str | None = None


class SeanceGroupResponse(BaseModel):
    """Seances of one film at one cinema."""

    id: int
    description: str
    seances: list[SeanceResponse]


class EntityGroupResponse(BaseModel):
    """A cinema (or film) with its inner groups."""

    id: int
    description: str
    groups: list[SeanceGroupResponse]


class SeancesResponse(BaseModel):
    """Response for the seances search endpoint."""

    group_by: str
    after: datetime | None = None
    before: datetime | None = None
    total_seances: int
    groups: list[EntityGroupResponse]


class SeanceDetailResponse(BaseModel):
    """A single seance with its cinema and film."""

    seance: SeanceResponse
    cinema: CinemaResponse
    film: FilmResponse
    cinema_url: str
    film_url: str
