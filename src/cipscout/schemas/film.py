"""Pydantic schemas for film data."""

from pydantic import BaseModel, ConfigDict


class FilmResponse(BaseModel):
    """Film response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url_path: str
    image_path: str
    director: str
    release_date: str
