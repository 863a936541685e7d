"""JSON document storage for the storefront.

Every document lives in its own ``<key>.json`` file below a base directory.
Nothing is cached between calls: each operation goes back to disk, so the
files stay the single source of truth and can be edited by hand while the
server is running.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from threading import Lock, RLock
from typing import Any, Callable, Dict, Iterator, TypeVar

from storefront.services.exceptions import CorruptDataError, StorageIOError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
DEFAULT_FILE_MODE = 0o644

T = TypeVar("T")


class JsonRecordStore:
    """Read, write and update whole JSON documents addressed by key."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)
        self._locks: Dict[str, RLock] = {}
        self._locks_guard = Lock()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key or ""):
            raise ValueError(f"Invalid document key: {key!r}")
        return self._base_dir / f"{key}.json"

    @contextmanager
    def locked(self, key: str) -> Iterator[None]:
        """Hold the per-document lock for the duration of the block."""

        with self._locks_guard:
            lock = self._locks.setdefault(key, RLock())
        with lock:
            yield

    def ensure_exists(self, key: str, default: Any) -> Path:
        """Create the document with ``default`` unless it is already there."""

        path = self.path_for(key)
        with self.locked(key):
            try:
                self._base_dir.mkdir(parents=True, exist_ok=True)
                if path.exists():
                    return path
                logger.info("Initialising document %s at %s", key, path)
                self._dump(path, default)
            except OSError as exc:
                raise StorageIOError(
                    f"Unable to initialise document '{key}'", key, cause=exc
                ) from exc
        return path

    def read(self, key: str, default: Any) -> Any:
        path = self.ensure_exists(key, default)
        with self.locked(key):
            try:
                raw = path.read_bytes()
            except OSError as exc:
                raise StorageIOError(
                    f"Unable to read document '{key}'", key, cause=exc
                ) from exc
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Document %s at %s is not valid UTF-8 JSON", key, path)
            raise CorruptDataError(
                f"Document '{key}' is corrupt", key, cause=exc
            ) from exc

    def write(self, key: str, value: Any, default: Any) -> None:
        path = self.ensure_exists(key, default)
        with self.locked(key):
            try:
                self._dump(path, value)
            except OSError as exc:
                raise StorageIOError(
                    f"Unable to write document '{key}'", key, cause=exc
                ) from exc

    def update(self, key: str, default: Any, mutate: Callable[[Any], T]) -> T:
        """Run a read-modify-write cycle on one document under its lock.

        ``mutate`` receives the parsed document, changes it in place and
        returns whatever the caller wants back; the document is then
        written in full.
        """

        with self.locked(key):
            document = self.read(key, default)
            result = mutate(document)
            self.write(key, document, default)
        return result

    def _dump(self, path: Path, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(path.parent), prefix=f".{path.stem}-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.chmod(tmp_name, self._file_mode(path))
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @staticmethod
    def _file_mode(path: Path) -> int:
        # mkstemp creates 0600 files; keep the current mode of the document.
        try:
            return path.stat().st_mode & 0o777
        except FileNotFoundError:
            return DEFAULT_FILE_MODE
