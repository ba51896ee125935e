"""Health check endpoint."""

from fastapi import APIRouter

from cipscout import __version__
from cipscout.config import settings

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """
    Report that the API is up and whether a scrape has produced a store.

    Returns:
        Status, package version and ``present`` or ``missing`` for the store
    """
    store = "present" if settings.db_path.exists() else "missing"
    return {"status": "ok", "version": __version__, "store": store}
