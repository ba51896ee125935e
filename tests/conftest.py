"""Shared test fixtures."""

from datetime import datetime
from pathlib import Path

import pytest
from fastapi import FastAPI

from cipscout.api.routes import health, seances
from cipscout.services.store import write_store
from factories import PARIS, make_cinema, make_film, make_seance


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app with the API routers, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(seances.router, prefix="/api")
    return app


@pytest.fixture
async def store_path(tmp_path: Path) -> Path:
    """
    Store with one cinema, one film and two seances on 2024-06-10:
    20:00 VF (with a reservation link) and 22:30 VO.
    """
    db_path = tmp_path / "cip.db"
    await write_store(
        db_path,
        [make_cinema()],
        [make_film()],
        [
            make_seance(
                id=1,
                start_time=datetime(2024, 6, 10, 20, 0, tzinfo=PARIS),
                version="VF",
                url="https://tickets.example.com/louxor/1001",
            ),
            make_seance(
                id=2,
                start_time=datetime(2024, 6, 10, 22, 30, tzinfo=PARIS),
                version="VO",
            ),
        ],
    )
    return db_path
