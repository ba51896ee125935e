"""Pydantic schemas for API responses."""

from cipscout.schemas.cinema import CinemaResponse
from cipscout.schemas.film import FilmResponse
from cipscout.schemas.seance import (
    EntityGroupResponse,
    SeanceDetailResponse,
    SeanceGroupResponse,
    SeanceResponse,
    SeancesResponse,
)

__all__ = [
    "CinemaResponse",
    "FilmResponse",
    "SeanceResponse",
    "SeanceGroupResponse",
    "EntityGroupResponse",
    "SeancesResponse",
    "SeanceDetailResponse",
]
