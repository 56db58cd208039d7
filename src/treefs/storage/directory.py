"""
Directory-backed key-value store.

Each key is kept in its own file under a storage directory. Writes go to a
temporary file in the same directory and are moved into place with
``os.replace``, so a reader never observes a half-written value.
"""

import logging
import os
import re
import tempfile
from pathlib import Path

from treefs.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class DirectoryStore(KeyValueStore):
    """
    Store that maps each key to ``<root_dir>/<key>.json``.

    Params:
        root_dir: Directory holding the value files; created on first write
    """

    suffix = ".json"

    def __init__(self, root_dir: str | Path):
        self._root_dir = Path(root_dir)

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in (".", ".."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._root_dir / f"{key}{self.suffix}"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        self._root_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._root_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Stored %d characters under %s", len(value), path)

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)
