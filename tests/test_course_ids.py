from __future__ import annotations

import json
from pathlib import Path

import pytest

from smm2wr.course_ids import load_course_ids, normalize_course_id, normalize_course_ids
from smm2wr.exceptions import ConfigurationError


def test_display_format_is_normalized() -> None:
    assert normalize_course_id("7n1-mvb-wkf") == "7N1MVBWKF"


def test_already_normalized_id_is_kept() -> None:
    assert normalize_course_id("BCD123EFG") == "BCD123EFG"


def test_surrounding_whitespace_is_ignored() -> None:
    assert normalize_course_id("  bcd-123-efg ") == "BCD123EFG"


def test_short_id_is_rejected_with_raw_value_in_message() -> None:
    with pytest.raises(ConfigurationError, match="7N1-MVB-WK"):
        normalize_course_id("7N1-MVB-WK")


def test_long_id_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        normalize_course_id("7N1-MVB-WKFF")


@pytest.mark.parametrize("bad_char", ["I", "O", "Z"])
def test_ambiguous_letters_are_rejected(bad_char: str) -> None:
    with pytest.raises(ConfigurationError):
        normalize_course_id(f"7N1-MVB-WK{bad_char}")


def test_non_alphanumeric_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        normalize_course_id("7N1_MVB_WK")


def test_non_string_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        normalize_course_id(123456789)


def test_empty_list_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="No course IDs"):
        normalize_course_ids([])


def test_one_bad_id_rejects_the_whole_list() -> None:
    with pytest.raises(ConfigurationError, match="BAD"):
        normalize_course_ids(["7N1-MVB-WKF", "BAD"])


def test_duplicates_collapse_and_order_is_kept() -> None:
    assert normalize_course_ids(["BCD-123-EFG", "7n1-mvb-wkf", "bcd123efg"]) == ("BCD123EFG", "7N1MVBWKF")


def test_load_creates_missing_file_then_rejects_it(tmp_path: Path) -> None:
    path = tmp_path / "course-ids.json"

    with pytest.raises(ConfigurationError, match="No course IDs found"):
        load_course_ids(path)

    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_load_reads_and_normalizes(tmp_path: Path) -> None:
    path = tmp_path / "course-ids.json"
    path.write_text(json.dumps(["7N1-MVB-WKF", "BCD-123-EFG"]), encoding="utf-8")

    assert load_course_ids(path) == ("7N1MVBWKF", "BCD123EFG")


def test_load_rejects_non_array(tmp_path: Path) -> None:
    path = tmp_path / "course-ids.json"
    path.write_text(json.dumps({"ids": ["7N1-MVB-WKF"]}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="JSON array"):
        load_course_ids(path)


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "course-ids.json"
    path.write_text("[\"7N1-MVB-WKF\",", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_course_ids(path)
