"""Tests for engine creation on the SQLite store."""

from pathlib import Path

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from cipscout.database import create_engine_for


async def test_read_only_engine_does_not_create_missing_store(tmp_path: Path) -> None:
    db_path = tmp_path / "absent.db"
    engine = create_engine_for(db_path, read_only=True)
    try:
        with pytest.raises(OperationalError):
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
    finally:
        await engine.dispose()

    assert not db_path.exists()


async def test_read_only_engine_reads_existing_store(store_path: Path) -> None:
    engine = create_engine_for(store_path, read_only=True)
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT COUNT(*) FROM seance"))
            assert result.scalar_one() == 2
    finally:
        await engine.dispose()
