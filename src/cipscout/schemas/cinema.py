"""Pydantic schemas for cinema data."""

from pydantic import BaseModel, ConfigDict


class CinemaResponse(BaseModel):
    """Cinema response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url_path: str
    address: str
    image_path: str
