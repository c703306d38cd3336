"""
JSON-file persistence adapter for product records.

The whole record list lives in one JSON array. Every write replaces the file
atomically (temporary file + os.replace) and repositories bound to the same
path share one lock so callers can serialize read-modify-write cycles.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
import stat
import tempfile
import threading

from catalog.core.log import get_logger

logger = get_logger(__name__)

# one lock per resolved path, kept for the life of the process
_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


class StorageError(Exception):
    """Base class for persistence failures."""

    def __init__(self, message: str, path: str | os.PathLike):
        super().__init__(message)
        self.path = str(path)


class StorageReadError(StorageError):
    """Raised when the backing file is missing or unreadable."""


class StorageParseError(StorageError):
    """Raised when the file does not hold valid JSON."""


class StorageWriteError(StorageError):
    """Raised when the backing file cannot be replaced."""


def read_text(path: str | os.PathLike) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        raise StorageReadError(f"Cannot read {path}: {exc}", path) from exc


def _file_mode(target: Path) -> int:
    """Mode the replacement file should carry: the current one, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text(path: str | os.PathLike, text: str) -> None:
    target = Path(path)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, _file_mode(target))
        os.replace(tmp_path, target)
    except OSError as exc:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise StorageWriteError(f"Cannot write {path}: {exc}", path) from exc


def lock_for(path: str | os.PathLike) -> threading.RLock:
    """Return the lock shared by every user of the resolved path."""
    key = str(Path(path).resolve())
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.RLock()
        return lock


class JsonProductRepository:
    """Load/save the full product list from a single JSON file."""

    def __init__(self, path: str | os.PathLike, *, create: bool = True) -> None:
        self.path = Path(path)
        if create and not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.lock():
                if not self.path.exists():
                    self.save([])

    def lock(self) -> threading.RLock:
        return lock_for(self.path)

    def load(self) -> list[dict]:
        try:
            raw = read_text(self.path)
        except StorageReadError:
            logger.error("Error reading %s", self.path, exc_info=True)
            raise
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Invalid JSON in %s", self.path, exc_info=True)
            raise StorageParseError(f"Invalid JSON in {self.path}: {exc}", self.path) from exc
        return data

    def save(self, records: list[dict]) -> None:
        text = json.dumps(records, ensure_ascii=False, indent=2)
        try:
            write_text(self.path, text)
        except StorageWriteError:
            logger.error("Error saving %s", self.path, exc_info=True)
            raise
