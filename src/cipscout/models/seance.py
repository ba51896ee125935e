"""Seance model for screening times at cinemas."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cipscout.models.base import Base, IsoDateTime

if TYPE_CHECKING:
    from cipscout.models.cinema import Cinema
    from cipscout.models.film import Film


class Seance(Base):
    """
    Screening model.

    Links a cinema, a film and an absolute start time, together with the
    version ("VO"/"VF") and an optional reservation link.
    """

    __tablename__ = "seance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    # Foreign keys
    cinema_id: Mapped[int] = mapped_column(
        ForeignKey("cinema.id"),
        nullable=False,
        index=True,
    )
    film_id: Mapped[int] = mapped_column(
        ForeignKey("film.id"),
        nullable=False,
        index=True,
    )

    # Seance details
    start_time: Mapped[datetime] = mapped_column(
        "datetime", IsoDateTime, nullable=False, index=True
    )
    version: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    cinema: Mapped["Cinema"] = relationship(back_populates="seances")
    film: Mapped["Film"] = relationship(back_populates="seances")

    def __repr__(self) -> str:
        return (
            f"<Seance(id={self.id!r}, "
            f"cinema_id={self.cinema_id!r}, "
            f"film_id={self.film_id!r}, "
            f"start_time={self.start_time})>"
        )
