"""Course ID loading and validation.

Course IDs are shown to players as ``XXX-XXX-XXX``; the API wants the
nine characters without separators, uppercased.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from smm2wr._constants import COURSE_ID_ALPHABET, COURSE_ID_LENGTH, COURSE_ID_SEPARATORS
from smm2wr.exceptions import ConfigurationError

_logger = logging.getLogger(__name__)


def normalize_course_id(raw: Any) -> str:
    """Return the API form of a display-formatted course ID.

    Raises :class:`ConfigurationError` naming *raw* when the result is not
    nine characters from the course ID alphabet.
    """
    if not isinstance(raw, str):
        raise ConfigurationError(f"Invalid course ID: {raw!r}. Course IDs must be strings.")

    normalized = "".join(ch for ch in raw if ch not in COURSE_ID_SEPARATORS).upper()
    if len(normalized) != COURSE_ID_LENGTH or not set(normalized) <= COURSE_ID_ALPHABET:
        raise ConfigurationError(
            f'Invalid course ID: "{raw}". Expected {COURSE_ID_LENGTH} characters '
            'without I, O or Z, e.g. "BCD-123-EFG".'
        )
    return normalized


def normalize_course_ids(raw_ids: Iterable[Any]) -> tuple[str, ...]:
    """Validate and normalize every configured course ID.

    Duplicates collapse onto their first occurrence; order is otherwise kept.
    """
    raw_list = list(raw_ids)
    if not raw_list:
        raise ConfigurationError("No course IDs configured. Add course IDs to track.")

    seen: dict[str, None] = {}
    for raw in raw_list:
        course_id = normalize_course_id(raw)
        if course_id in seen:
            _logger.warning("Ignoring duplicate course ID %s", raw)
            continue
        seen[course_id] = None
    return tuple(seen)


def load_course_ids(path: str | Path) -> tuple[str, ...]:
    """Load and validate the course ID list stored at *path*.

    A missing file is created holding an empty list so the operator can see
    where IDs go; the empty list is then rejected like any other.
    """
    file_path = Path(path)
    if not file_path.exists():
        _logger.info("Creating empty course ID list at %s", file_path)
        file_path.write_text(json.dumps([], indent=2), encoding="utf-8")

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Could not read course IDs from {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Course ID file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ConfigurationError(f"Course ID file {file_path} must contain a JSON array of strings.")
    if not raw:
        raise ConfigurationError(f"No course IDs found in {file_path}. Add course IDs to this file.")

    return normalize_course_ids(raw)
