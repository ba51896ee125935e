"""Arrange query results into cinema/film or film/cinema groups."""

from dataclasses import dataclass, field
from enum import Enum

from cipscout.services.query import QueryResult


class GroupBy(str, Enum):
    CINEMA = "cinema"
    FILM = "film"


@dataclass
class SeanceGroup:
    """Inner group: the seances of one film at one cinema, in time order."""

    id: int
    description: str
    results: list[QueryResult] = field(default_factory=list)


@dataclass
class EntityGroup:
    """Outer group: one cinema (or film) and its inner groups, keyed by id."""

    id: int
    description: str
    groups: dict[int, SeanceGroup] = field(default_factory=dict)


Grouping = dict[int, EntityGroup]


def group_results(results: list[QueryResult], group_by: GroupBy) -> Grouping:
    """
    Group results two levels deep.

    Both levels are ordered by ascending entity id; seances within an inner
    group keep the order of ``results``.

    Args:
        results: Query results, earliest first
        group_by: Entity used for the outer level

    Returns:
        Mapping of outer id to its group
    """
    outer: dict[int, EntityGroup] = {}

    for result in results:
        if group_by == GroupBy.CINEMA:
            first, second = result.cinema, result.film
        else:
            first, second = result.film, result.cinema

        entity_group = outer.get(first.id)
        if entity_group is None:
            entity_group = EntityGroup(id=first.id, description=first.description())
            outer[first.id] = entity_group

        seance_group = entity_group.groups.get(second.id)
        if seance_group is None:
            seance_group = SeanceGroup(id=second.id, description=second.description())
            entity_group.groups[second.id] = seance_group

        seance_group.results.append(result)

    for entity_group in outer.values():
        entity_group.groups = dict(sorted(entity_group.groups.items()))

    return dict(sorted(outer.items()))


def flatten(grouping: Grouping) -> list[QueryResult]:
    """Walk a grouping back into a flat list of results."""
    return [
        result
        for entity_group in grouping.values()
        for seance_group in entity_group.groups.values()
        for result in seance_group.results
    ]
