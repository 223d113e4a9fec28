"""JSON-file-backed record store.

Each named collection is one file, ``<data_dir>/<collection>.json``,
holding a JSON array of flat objects. The whole file is rewritten on
every save.

Storage failures never reach the caller: a missing, empty or corrupt
file loads as an empty collection and a failed save is a logged no-op.
This can hide data loss; callers that need to know must read the log.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Callable

from storefront.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

Record = dict
Mutator = Callable[[list[Record]], list[Record]]


class JsonRecordStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # --- Public interface -----------------------------------------------------

    def path_for(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def load(self, collection: str) -> list[Record]:
        """Return the records of *collection*, or ``[]`` if unreadable."""
        try:
            return self._read(collection)
        except StorageError as exc:
            logger.error("Error loading data from %s: %s", self.path_for(collection), exc)
            return []

    def save(self, collection: str, records: list[Record]) -> None:
        """Replace *collection* with *records*. Failures are logged only."""
        try:
            self._write(collection, records)
        except StorageError as exc:
            logger.error("Error saving data to %s: %s", self.path_for(collection), exc)

    def update(self, collection: str, mutate: Mutator) -> list[Record]:
        """Load, apply *mutate*, and save while holding the collection lock.

        Two in-process writers on the same collection run one after the
        other, so neither overwrites the other's change. Exceptions
        raised by *mutate* propagate and nothing is saved.
        """
        with self._lock_for(collection):
            records = mutate(self.load(collection))
            self.save(collection, records)
            return records

    # --- File helpers ---------------------------------------------------------

    def _read(self, collection: str) -> list[Record]:
        path = self.path_for(collection)
        if not path.exists():
            logger.debug("No file for collection %r at %s", collection, path)
            return []
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(str(exc)) from exc
        if not text.strip():
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(f"expected a JSON array, got {type(data).__name__}")
        return data

    def _write(self, collection: str, records: list[Record]) -> None:
        path = self.path_for(collection)
        try:
            payload = json.dumps(records, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise StorageError(f"records are not serializable: {exc}") from exc

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{collection}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def _lock_for(self, collection: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(collection, threading.Lock())
