"""Durable key-value capability used to persist user feedback."""

import logging
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Protocol

from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class KeyValueStore(Protocol):
    """Anything exposing bytes get/set by string key."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class InMemoryKeyValueStore:
    """Process-local store, mainly for tests and ephemeral hosts."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)


class FileKeyValueStore:
    """Stores each key as a file inside a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not key:
            raise PersistenceError("Empty storage key")
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> bytes | None:
        """Read a value, returning None when the key was never written.

        Raises:
            PersistenceError: If the file exists but cannot be read

        """
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Unable to read {path}: {e!s}") from e

    def set(self, key: str, value: bytes) -> None:
        """Write a value atomically (temp file + rename).

        Raises:
            PersistenceError: If the directory or file cannot be written

        """
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"Unable to write {path}: {e!s}") from e
        logger.debug(f"Wrote {len(value)} bytes to {path}")
