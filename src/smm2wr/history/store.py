"""JSON file persistence for the world-record history."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from smm2wr.exceptions import CorruptDataError
from smm2wr.history.merge import History

_logger = logging.getLogger(__name__)

_HISTORY_ADAPTER: TypeAdapter[History] = TypeAdapter(History)


class HistoryStore:
    """Load and atomically rewrite the history file.

    The whole history is rewritten on every save. Its size grows with the
    number of record changes, not the number of polls, so this stays small.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> History:
        """Read the persisted history.

        A missing file is created holding an empty history straight away.

        Raises
        ------
        CorruptDataError
            If the file is not valid JSON or not shaped like a history.
            The file is left untouched for the operator to fix.
        """
        if not self._path.exists():
            _logger.info("No history at %s; starting empty", self._path)
            history: History = {}
            self.save(history)
            return history

        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise CorruptDataError(f"Could not read history file {self._path}: {exc}", path=str(self._path)) from exc

        try:
            history = _HISTORY_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise CorruptDataError(
                f"History file {self._path} is corrupt; fix or delete it: {exc}",
                path=str(self._path),
            ) from exc

        _logger.debug(
            "Loaded history for %d courses (%d entries) from %s",
            len(history),
            sum(len(entries) for entries in history.values()),
            self._path,
        )
        return history

    def save(self, history: History) -> None:
        """Atomically replace the history file with *history*."""
        payload = _HISTORY_ADAPTER.dump_python(history, mode="json", by_alias=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, self._path)
