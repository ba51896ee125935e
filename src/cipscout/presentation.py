"""Console rendering of query results."""

from cipscout.services.grouping import Grouping
from cipscout.services.query import QueryResult


def format_id(id: int) -> str:
    """Bracketed id, as typed back into `cipscout seance`."""
    return f"[{id}]"


def format_grouping(grouping: Grouping, show_date: bool) -> str:
    """
    Render grouped results as indented text.

    Args:
        grouping: Output of group_results
        show_date: Prefix each time with DD/MM (used when no day was chosen)
    """
    time_format = "%d/%m %H:%M" if show_date else "%H:%M"
    lines: list[str] = []

    for entity_group in grouping.values():
        lines.append(f"{format_id(entity_group.id)} {entity_group.description}")
        lines.append("")
        for seance_group in entity_group.groups.values():
            lines.append(f"  {format_id(seance_group.id)} {seance_group.description}")
            times = "".join(
                f" {format_id(r.seance.id)} {r.seance.start_time.strftime(time_format)}"
                f" ({r.seance.version})"
                for r in seance_group.results
            )
            lines.append(f"   {times}")
            lines.append("")

    return "\n".join(lines)


def format_seance(result: QueryResult, root_url: str) -> str:
    """Render the detail view of a single seance."""
    film, cinema, seance = result.film, result.cinema, result.seance
    lines = [
        format_id(seance.id),
        f"Film:    {film.description()}",
        f"         {film.director}",
        f"         {film.url(root_url)}",
        f"Cinema:  {cinema.name}",
        f"         {cinema.address}",
        f"         {cinema.url(root_url)}",
        f"Version: {seance.version}",
        f"Date:    {seance.start_time.strftime('%b %d')}",
        f"Time:    {seance.start_time.strftime('%H:%M')}",
    ]
    if seance.url:
        lines.append(f"Reserve: {seance.url}")
    return "\n".join(lines)
