"""Film model for storing film metadata."""

from typing import TYPE_CHECKING
from urllib.parse import urljoin

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cipscout.models.base import Base

if TYPE_CHECKING:
    from cipscout.models.seance import Seance


class Film(Base):
    """
    Film model.

    Ids come from the source catalog. The release date is kept as the
    display string the site publishes.
    """

    __tablename__ = "film"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    url_path: Mapped[str] = mapped_column(Text, nullable=False)
    image_path: Mapped[str] = mapped_column(Text, nullable=False)
    director: Mapped[str] = mapped_column(Text, nullable=False, default="")
    release_date: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    seances: Mapped[list["Seance"]] = relationship(back_populates="film")

    def __repr__(self) -> str:
        return f"<Film(id={self.id!r}, name={self.name!r})>"

    def description(self) -> str:
        return f"{self.name} ({self.release_date})"

    def url(self, root_url: str) -> str:
        return urljoin(root_url, self.url_path)
