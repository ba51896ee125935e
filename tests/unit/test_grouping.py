"""Unit tests for grouping query results."""

from datetime import datetime

from cipscout.models import Cinema, Film, Seance
from cipscout.services.grouping import GroupBy, flatten, group_results
from cipscout.services.query import QueryResult
from factories import PARIS


def cinema(id: int) -> Cinema:
    return Cinema(
        id=id,
        name=f"Cinema {id}",
        url_path=f"/cinema/{id}",
        address=f"{id} rue du Temple 7500{id} Paris",
        image_path="",
    )


def film(id: int) -> Film:
    return Film(
        id=id,
        name=f"Film {id}",
        url_path=f"/film/{id}",
        image_path="",
        director="",
        release_date="2024",
    )


def result(seance_id: int, cinema_id: int, film_id: int, hour: int) -> QueryResult:
    seance = Seance(
        id=seance_id,
        cinema_id=cinema_id,
        film_id=film_id,
        start_time=datetime(2024, 6, 10, hour, 0, tzinfo=PARIS),
        version="VO",
        url=None,
    )
    return QueryResult(cinema=cinema(cinema_id), film=film(film_id), seance=seance)


# Ordered by time, with ids deliberately out of order
RESULTS = [
    result(5, cinema_id=2, film_id=3, hour=14),
    result(1, cinema_id=1, film_id=3, hour=15),
    result(2, cinema_id=2, film_id=1, hour=16),
    result(3, cinema_id=1, film_id=3, hour=18),
    result(4, cinema_id=2, film_id=3, hour=21),
]


def triples(results: list[QueryResult]) -> set[tuple[int, int, int]]:
    return {(r.cinema.id, r.film.id, r.seance.id) for r in results}


class TestGroupResults:
    def test_group_by_cinema_orders_keys_by_id(self) -> None:
        grouping = group_results(RESULTS, GroupBy.CINEMA)

        assert list(grouping) == [1, 2]
        assert list(grouping[2].groups) == [1, 3]

    def test_group_by_film_orders_keys_by_id(self) -> None:
        grouping = group_results(RESULTS, GroupBy.FILM)

        assert list(grouping) == [1, 3]
        assert list(grouping[3].groups) == [1, 2]

    def test_leaves_keep_time_order(self) -> None:
        grouping = group_results(RESULTS, GroupBy.FILM)

        leaf = grouping[3].groups[2].results
        assert [r.seance.id for r in leaf] == [5, 4]

    def test_descriptions_come_from_entities(self) -> None:
        grouping = group_results(RESULTS, GroupBy.CINEMA)

        assert grouping[1].description == "Cinema 1 (75001)"
        assert grouping[1].groups[3].description == "Film 3 (2024)"

    def test_empty_results(self) -> None:
        assert group_results([], GroupBy.CINEMA) == {}

    def test_flatten_reproduces_input_set(self) -> None:
        grouping = group_results(RESULTS, GroupBy.CINEMA)
        assert triples(flatten(grouping)) == triples(RESULTS)
        assert len(flatten(grouping)) == len(RESULTS)

    def test_both_axes_flatten_to_same_triples(self) -> None:
        by_cinema = flatten(group_results(RESULTS, GroupBy.CINEMA))
        by_film = flatten(group_results(RESULTS, GroupBy.FILM))
        assert triples(by_cinema) == triples(by_film)
