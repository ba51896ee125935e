"""Write a scrape run's catalog and seances into a fresh SQLite store."""

import logging
import os
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from cipscout.database import create_engine_for, create_session_factory
from cipscout.exceptions import PersistenceError
from cipscout.models import Base, Cinema, Film, Seance
from cipscout.scrapers.models import CatalogCinema, CatalogFilm, SeanceRecord

logger = logging.getLogger(__name__)


def delete_store(db_path: Path) -> bool:
    """Delete the store file. Returns whether a file was removed."""
    if db_path.exists():
        db_path.unlink()
        logger.info(f"Deleted {db_path}")
        return True
    return False


async def write_store(
    db_path: Path,
    cinemas: list[CatalogCinema],
    films: list[CatalogFilm],
    seances: list[SeanceRecord],
) -> None:
    """
    Replace the store at db_path with the given run.

    The new store is built next to the old one and moved into place only
    once every row is committed, so readers see either the previous run or
    the complete new one.

    Raises:
        PersistenceError: If the schema, any insert or the final move fails
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = db_path.with_name(db_path.name + ".tmp")
    delete_store(tmp_path)

    engine = create_engine_for(tmp_path)
    try:
        try:
            await _populate(engine, cinemas, films, seances)
        finally:
            await engine.dispose()
        os.replace(tmp_path, db_path)
    except (SQLAlchemyError, OSError) as e:
        raise PersistenceError(f"Could not write store {db_path}: {e}") from e
    finally:
        # Left behind only when the run did not reach the swap
        delete_store(tmp_path)

    logger.info(f"Store written to {db_path}")


async def _populate(
    engine: AsyncEngine,
    cinemas: list[CatalogCinema],
    films: list[CatalogFilm],
    seances: list[SeanceRecord],
) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        async with session.begin():
            session.add_all(_cinema_rows(cinemas))
            await session.flush()
            logger.info(f"Inserted {len(cinemas)} cinemas")

            session.add_all(_film_rows(films))
            await session.flush()
            logger.info(f"Inserted {len(films)} films")

            session.add_all(_seance_rows(seances))
            await session.flush()
            logger.info(f"Inserted {len(seances)} seances")


def _cinema_rows(cinemas: list[CatalogCinema]) -> list[Cinema]:
    return [
        Cinema(
            id=c.id,
            name=c.name,
            url_path=c.url_path,
            address=c.address,
            image_path=c.image_path,
        )
        for c in cinemas
    ]


def _film_rows(films: list[CatalogFilm]) -> list[Film]:
    return [
        Film(
            id=f.id,
            name=f.name,
            url_path=f.url_path,
            image_path=f.image_path,
            director=f.director,
            release_date=f.release_date,
        )
        for f in films
    ]


def _seance_rows(seances: list[SeanceRecord]) -> list[Seance]:
    return [
        Seance(
            id=s.id,
            cinema_id=s.cinema_id,
            film_id=s.film_id,
            start_time=s.start_time,
            version=s.version,
            url=s.url,
        )
        for s in seances
    ]
