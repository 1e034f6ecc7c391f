"""Directory-backed implementation of KeyValueStore.

Each key is one ``<key>.json`` file. Writes go to a temporary file that
is then renamed over the target, so a reader sees either the previous
value or the new one, never a half-written file.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from scanreg.domain.port.key_value_store import KeyValueStore

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore(KeyValueStore):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        if not _VALID_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
