# app/core/store.py
"""
Single-document JSON persistence.

The whole dataset (clients, projects, quotes, ...) lives in one JSON file.
Every access goes through the one DataStore of the process, which owns an
asyncio.Lock: a transaction reads the file, lets the caller mutate the dict,
and writes the full document back atomically. Overlapping read-modify-write
sequences are therefore serialised and cannot lose each other's updates.
Only one server worker process may use a given data file.
"""
import asyncio
import copy
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional

from app.core.config import DATA_FILE, DEFAULT_BUSINESS_PROFILE
from app.core.exceptions import StorageError

logger = logging.getLogger(__name__)

COLLECTIONS = (
    "clients",
    "projects",
    "income",
    "expenses",
    "tasks",
    "leads",
    "quotes",
    "activities",
)

Dataset = Dict[str, Any]


def empty_dataset(settings: Optional[Dict[str, str]] = None) -> Dataset:
    data: Dataset = {name: [] for name in COLLECTIONS}
    data["settings"] = dict(settings if settings is not None else DEFAULT_BUSINESS_PROFILE)
    data["sequences"] = {}
    return data


def _normalize(data: Any) -> Dataset:
    if not isinstance(data, dict):
        raise StorageError("Data file does not contain a JSON object")
    for name in COLLECTIONS:
        if not isinstance(data.get(name), list):
            data[name] = []
    if not isinstance(data.get("settings"), dict):
        data["settings"] = dict(DEFAULT_BUSINESS_PROFILE)
    if not isinstance(data.get("sequences"), dict):
        data["sequences"] = {}
    return data


# --------------------------
# Collection helpers
# --------------------------
def next_id(data: Dataset, collection: str) -> int:
    """
    Next id for a collection: one past the larger of the current maximum id
    and the last id ever issued, so deleted ids are never handed out again.
    """
    current = max((record["id"] for record in data[collection]), default=0)
    last_issued = data["sequences"].get(collection, 0)
    new_id = max(current, last_issued) + 1
    data["sequences"][collection] = new_id
    return new_id


def find_by_id(data: Dataset, collection: str, record_id: Any) -> Optional[Dict[str, Any]]:
    for record in data[collection]:
        if record.get("id") == record_id:
            return record
    return None


def remove_by_id(data: Dataset, collection: str, record_id: Any) -> Optional[Dict[str, Any]]:
    record = find_by_id(data, collection, record_id)
    if record is not None:
        data[collection] = [r for r in data[collection] if r is not record]
    return record


class DataStore:
    def __init__(self, path: str, settings: Optional[Dict[str, str]] = None):
        self.path = Path(path)
        self._settings = settings
        self._lock = asyncio.Lock()

    # -----------------------
    # Blocking file access (run in a worker thread)
    # -----------------------
    def _read_sync(self) -> Dataset:
        if not self.path.exists():
            logger.info("Data file %s missing, initialising an empty dataset", self.path)
            data = empty_dataset(self._settings)
            self._write_sync(data)
            return data
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                return _normalize(json.load(fh))
        except json.JSONDecodeError as e:
            raise StorageError(f"Data file {self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read data file {self.path}: {e}") from e

    def _write_sync(self, data: Dataset) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Failed to write data file {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

    # -----------------------
    # Public API
    # -----------------------
    async def read(self) -> Dataset:
        """Snapshot of the full dataset. Mutating it has no effect on disk."""
        async with self._lock:
            return await asyncio.to_thread(self._read_sync)

    async def write(self, data: Dataset) -> None:
        """Replace the full dataset."""
        async with self._lock:
            await asyncio.to_thread(self._write_sync, copy.deepcopy(data))

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Dataset]:
        """
        Exclusive read-modify-write. The yielded dict is written back when the
        block exits normally; if the block raises, the file is left untouched.
        """
        async with self._lock:
            data = await asyncio.to_thread(self._read_sync)
            yield data
            await asyncio.to_thread(self._write_sync, data)


_store: Optional[DataStore] = None


def get_store() -> DataStore:
    """
    FastAPI dependency returning the process-wide store.
    Use with `Depends(get_store)` in routes; tests override it.
    """
    global _store
    if _store is None:
        _store = DataStore(DATA_FILE)
    return _store
