"""Tests for the command line interface."""

import asyncio
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from cipscout.cli import build_parser, build_query_options, main
from cipscout.services.query import Version
from cipscout.services.store import write_store
from factories import PARIS, make_cinema, make_film, make_seance

NOW = datetime(2024, 6, 8, 12, 0, tzinfo=PARIS)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "cip.db"
    asyncio.run(
        write_store(
            path,
            [make_cinema()],
            [make_film()],
            [
                make_seance(id=1, start_time=datetime(2024, 6, 10, 20, 0, tzinfo=PARIS), version="VF"),
                make_seance(id=2, start_time=datetime(2024, 6, 10, 22, 30, tzinfo=PARIS), version="VO"),
            ],
        )
    )
    return path


@pytest.fixture(autouse=True)
def fixed_now():
    with patch("cipscout.config.Settings.now", return_value=NOW):
        yield


class TestParser:
    def test_query_defaults(self) -> None:
        args = build_parser().parse_args(["query"])
        assert args.day is None
        assert args.time is None
        assert args.group == "cinema"
        assert not args.vo and not args.vf

    def test_rejects_unknown_group(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["query", "-g", "director"])

    def test_seance_requires_integer_id(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["seance", "abc"])

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            (["--vo"], Version.ORIGINAL),
            (["--vf"], Version.FRENCH),
            (["--vo", "--vf"], None),
            ([], None),
        ],
    )
    def test_version_flags(self, flags: list[str], expected: Version | None) -> None:
        args = build_parser().parse_args(["query", *flags])
        assert build_query_options(args).version == expected


class TestMain:
    def test_query_day_lists_both_seances(
        self, db_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["query", "--db-path", str(db_path), "-d", "10/06"]) == 0

        out = capsys.readouterr().out
        assert "[1] Le Louxor (75010)" in out
        assert out.index("[1] 20:00 (VF)") < out.index("[2] 22:30 (VO)")

    def test_query_vo_only(self, db_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "--db-path", str(db_path), "-d", "10/06", "--vo"]) == 0

        out = capsys.readouterr().out
        assert "[2] 22:30 (VO)" in out
        assert "(VF)" not in out

    def test_query_without_filters_shows_dates(
        self, db_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["query", "--db-path", str(db_path)]) == 0
        assert "[1] 10/06 20:00 (VF)" in capsys.readouterr().out

    def test_malformed_day_is_a_usage_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["query", "--db-path", str(tmp_path / "absent.db"), "-d", "2024-06-10"])

        assert exc_info.value.code == 2
        assert "DD/MM" in capsys.readouterr().err
        assert not (tmp_path / "absent.db").exists()

    def test_seance_detail(self, db_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["seance", "2", "--db-path", str(db_path)]) == 0

        out = capsys.readouterr().out
        assert "Version: VO" in out
        assert "Time:    22:30" in out

    def test_seance_not_found(self, db_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["seance", "42", "--db-path", str(db_path)]) == 0
        assert "Seance [42] not found" in capsys.readouterr().out

    def test_missing_store(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "--db-path", str(tmp_path / "absent.db")]) == 1
        assert "cipscout scrape" in capsys.readouterr().err

    def test_clean_deletes_store(self, db_path: Path) -> None:
        assert main(["clean", "--db-path", str(db_path)]) == 0
        assert not db_path.exists()

    def test_empty_store_file_is_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        db_path = tmp_path / "empty.db"
        db_path.write_bytes(b"")

        assert main(["query", "--db-path", str(db_path)]) == 1
        assert "unreadable" in capsys.readouterr().err
