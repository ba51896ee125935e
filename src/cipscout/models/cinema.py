"""Cinema model for storing cinema venue information."""

from typing import TYPE_CHECKING
from urllib.parse import urljoin

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cipscout.models.base import Base
from cipscout.utils.text import postal_code

if TYPE_CHECKING:
    from cipscout.models.seance import Seance


class Cinema(Base):
    """
    Cinema venue model.

    Ids are assigned sequentially when the catalog is fetched, so they are
    only stable within one store snapshot.
    """

    __tablename__ = "cinema"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    url_path: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    image_path: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    seances: Mapped[list["Seance"]] = relationship(back_populates="cinema")

    def __repr__(self) -> str:
        return f"<Cinema(id={self.id!r}, name={self.name!r})>"

    def zip(self) -> str:
        return postal_code(self.address)

    def description(self) -> str:
        return f"{self.name} ({self.zip()})"

    def url(self, root_url: str) -> str:
        return urljoin(root_url, self.url_path)
