"""Command line interface: scrape cip-paris.fr and query the resulting store."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from cipscout.config import settings
from cipscout.database import create_engine_for, create_session_factory
from cipscout.exceptions import CipScoutError, InputError
from cipscout.presentation import format_grouping, format_id, format_seance
from cipscout.services.grouping import GroupBy, group_results
from cipscout.services.query import (
    QueryOptions,
    Version,
    get_seance,
    parse_filters,
    query_seances,
)
from cipscout.services.store import delete_store
from cipscout.tasks.scrape_job import run_scrape

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cipscout", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_db_path(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--db-path",
            type=Path,
            default=settings.db_path,
            help=f"Database file path (default: {settings.db_path})",
        )

    scrape = subparsers.add_parser(
        "scrape", help="Scrape cip-paris.fr and insert data into the database"
    )
    add_db_path(scrape)

    query = subparsers.add_parser("query", help="Query the database")
    add_db_path(query)
    query.add_argument("-d", "--day", help="Day to query DD/MM")
    query.add_argument("-t", "--time", help="Time to query after HH:MM")
    query.add_argument("--vf", action="store_true", help="Show VF only")
    query.add_argument("--vo", action="store_true", help="Show VO only")
    query.add_argument(
        "-g",
        "--group",
        choices=[g.value for g in GroupBy],
        default=GroupBy.CINEMA.value,
        help="Group by cinemas or films (default: cinema)",
    )

    seance = subparsers.add_parser("seance", help="Get information about a seance")
    seance.add_argument("id", type=int, help="Seance ID")
    add_db_path(seance)

    clean = subparsers.add_parser("clean", help="Delete database")
    add_db_path(clean)

    return parser


def build_query_options(args: argparse.Namespace) -> QueryOptions:
    """
    Turn query arguments into QueryOptions.

    Raises:
        InputError: If --day or --time is malformed
    """
    now = settings.now()
    day, time_of_day = parse_filters(args.day, args.time, now)
    return QueryOptions(
        now=now,
        tz=settings.tz,
        day_start=settings.day_start,
        day=day,
        time_of_day=time_of_day,
        version=Version.from_flags(vo=args.vo, vf=args.vf),
    )


async def query(args: argparse.Namespace, options: QueryOptions) -> None:
    engine = create_engine_for(args.db_path, read_only=True)
    try:
        async with create_session_factory(engine)() as db:
            results = await query_seances(db, options)
    finally:
        await engine.dispose()

    grouping = group_results(results, GroupBy(args.group))
    show_date = args.day is None and args.time is None
    print(format_grouping(grouping, show_date=show_date))


async def seance(args: argparse.Namespace) -> None:
    engine = create_engine_for(args.db_path, read_only=True)
    try:
        async with create_session_factory(engine)() as db:
            result = await get_seance(db, args.id)
    finally:
        await engine.dispose()

    if result is None:
        print(f"Seance {format_id(args.id)} not found")
        return
    print(format_seance(result, settings.root_url))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")

    if args.command == "clean":
        delete_store(args.db_path)
        return 0

    if args.command == "scrape":
        try:
            asyncio.run(run_scrape(settings, args.db_path))
        except CipScoutError as e:
            logger.error(f"Scrape failed: {e}", exc_info=True)
            return 1
        return 0

    options = None
    if args.command == "query":
        try:
            options = build_query_options(args)
        except InputError as e:
            parser.error(str(e))

    if not args.db_path.exists():
        print(f"No database at {args.db_path}, run `cipscout scrape` first", file=sys.stderr)
        return 1

    try:
        if args.command == "seance":
            asyncio.run(seance(args))
        else:
            asyncio.run(query(args, options))
    except SQLAlchemyError as e:
        logger.debug(f"Reading {args.db_path} failed: {e}")
        print(
            f"Database at {args.db_path} is unreadable, run `cipscout scrape` again",
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
