"""Seances API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cipscout.config import settings
from cipscout.database import get_db
from cipscout.exceptions import InputError
from cipscout.schemas import (
    CinemaResponse,
    EntityGroupResponse,
    FilmResponse,
    SeanceDetailResponse,
    SeanceGroupResponse,
    SeanceResponse,
    SeancesResponse,
)
from cipscout.services.grouping import GroupBy, group_results
from cipscout.services.query import (
    QueryOptions,
    Version,
    get_seance,
    parse_filters,
    query_seances,
)

logger = logging.getLogger(__name__)


async def require_store() -> None:
    """Answer 503 until a scrape has produced the store."""
    if not settings.db_path.exists():
        logger.warning(f"No store at {settings.db_path}")
        raise HTTPException(
            status_code=503, detail="No database, run `cipscout scrape` first"
        )


router = APIRouter(dependencies=[Depends(require_store)])


@router.get("/seances", response_model=SeancesResponse)
async def search_seances(
    day: str | None = Query(None, description="Day to search (DD/MM)"),
    time_param: str | None = Query(None, alias="time", description="Earliest time (HH:MM)"),
    version: Version | None = Query(None, description="Only show VO or VF"),
    group: GroupBy = Query(GroupBy.CINEMA, description="Group by cinema or film"),
    db: AsyncSession = Depends(get_db),
) -> SeancesResponse:
    """
    Search seances for one listing day, grouped two levels deep.

    Without a day or a time, every seance in the store is returned.
    """
    now = settings.now()
    try:
        day_filter, time_filter = parse_filters(day, time_param, now)
    except InputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    options = QueryOptions(
        now=now,
        tz=settings.tz,
        day_start=settings.day_start,
        day=day_filter,
        time_of_day=time_filter,
        version=version,
    )
    results = await query_seances(db, options)
    grouping = group_results(results, group)

    groups = [
        EntityGroupResponse(
            id=entity_group.id,
            description=entity_group.description,
            groups=[
                SeanceGroupResponse(
                    id=seance_group.id,
                    description=seance_group.description,
                    seances=[
                        SeanceResponse.model_validate(r.seance) for r in seance_group.results
                    ],
                )
                for seance_group in entity_group.groups.values()
            ],
        )
        for entity_group in grouping.values()
    ]

    return SeancesResponse(
        group_by=group.value,
        after=options.after(),
        before=options.before(),
        total_seances=len(results),
        groups=groups,
    )


@router.get("/seances/{seance_id}", response_model=SeanceDetailResponse)
async def get_seance_detail(
    seance_id: int,
    db: AsyncSession = Depends(get_db),
) -> SeanceDetailResponse:
    """Get one seance with its cinema and film."""
    result = await get_seance(db, seance_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Seance not found")

    return SeanceDetailResponse(
        seance=SeanceResponse.model_validate(result.seance),
        cinema=CinemaResponse.model_validate(result.cinema),
        film=FilmResponse.model_validate(result.film),
        cinema_url=result.cinema.url(settings.root_url),
        film_url=result.film.url(settings.root_url),
    )
