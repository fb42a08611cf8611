from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from smm2wr import cli
from smm2wr.models.record import Observation


def _args(tmp_path: Path, *extra: str) -> list[str]:
    return [
        "--course-ids",
        str(tmp_path / "course-ids.json"),
        "--history",
        str(tmp_path / "world-records.json"),
        *extra,
    ]


def test_missing_course_id_file_exits_non_zero(tmp_path: Path) -> None:
    assert cli.main(_args(tmp_path, "--once")) == 1
    assert json.loads((tmp_path / "course-ids.json").read_text(encoding="utf-8")) == []


def test_invalid_course_id_exits_non_zero(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "course-ids.json").write_text(json.dumps(["7N1-MVB-WKO"]), encoding="utf-8")

    assert cli.main(_args(tmp_path, "--once")) == 1
    assert "7N1-MVB-WKO" in caplog.text
    assert not (tmp_path / "world-records.json").exists()


def test_corrupt_history_exits_non_zero(tmp_path: Path) -> None:
    (tmp_path / "course-ids.json").write_text(json.dumps(["7N1-MVB-WKF"]), encoding="utf-8")
    (tmp_path / "world-records.json").write_text("{oops", encoding="utf-8")

    assert cli.main(_args(tmp_path, "--once")) == 1
    assert (tmp_path / "world-records.json").read_text(encoding="utf-8") == "{oops"


def test_once_runs_a_single_cycle(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "course-ids.json").write_text(json.dumps(["7n1-mvb-wkf"]), encoding="utf-8")
    requested: list[tuple[str, ...]] = []

    async def fake_fetch(_self: Any, course_ids: Sequence[str]) -> list[Observation]:
        requested.append(tuple(course_ids))
        return [Observation(course_id="7N1MVBWKF", value=51234, holder_id="HOLDER001", observed_at=1)]

    monkeypatch.setattr("smm2wr.client.WorldRecordClient.fetch_world_records", fake_fetch)

    assert cli.main(_args(tmp_path, "--once")) == 0
    assert requested == [("7N1MVBWKF",)]
    assert json.loads((tmp_path / "world-records.json").read_text(encoding="utf-8")) == {
        "7N1MVBWKF": [{"value": 51234, "holderId": "HOLDER001", "observedAt": 1}]
    }


def test_unwritable_course_id_location_exits_non_zero(tmp_path: Path) -> None:
    args = [
        "--course-ids",
        str(tmp_path / "missing-dir" / "course-ids.json"),
        "--history",
        str(tmp_path / "world-records.json"),
        "--once",
    ]

    assert cli.main(args) == 1


def test_unwritable_history_location_exits_non_zero(tmp_path: Path) -> None:
    (tmp_path / "course-ids.json").write_text(json.dumps(["7N1-MVB-WKF"]), encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    args = [
        "--course-ids",
        str(tmp_path / "course-ids.json"),
        "--history",
        str(blocker / "world-records.json"),
        "--once",
    ]

    assert cli.main(args) == 1
