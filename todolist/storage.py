"""
TODOLIST - Local Storage
========================
String key/value storage backed by a directory, one file per key:

    <storage_dir>/<key>.json

Values are opaque strings; the task store writes its JSON snapshot here.
"""

import os
import re
import tempfile
import logging
from pathlib import Path
from typing import List, Optional

from .errors import StorageError

logger = logging.getLogger("todolist")

KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """Directory-backed key/value store of strings"""

    def __init__(self, storage_dir: str = ".todo"):
        self.storage_dir = Path(storage_dir)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage directory {self.storage_dir}: {e}") from e

    def _get_item_file(self, key: str) -> Path:
        """Get path to the file holding a key"""
        if not KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent.

        Raises UnicodeDecodeError if the file is not valid UTF-8.
        """
        file_path = self._get_item_file(key)
        if not file_path.exists():
            return None
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Cannot read {file_path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        """Write value under key; the old value stays intact if the write fails"""
        file_path = self._get_item_file(key)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{key}.", suffix=".tmp", dir=self.storage_dir
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageError(f"Cannot write {file_path}: {e}") from e

        logger.debug(f"💾 Wrote {len(value)} chars to {file_path}")

    def remove_item(self, key: str) -> None:
        file_path = self._get_item_file(key)
        try:
            file_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Cannot remove {file_path}: {e}") from e

    def keys(self) -> List[str]:
        return sorted(p.stem for p in self.storage_dir.glob("*.json"))
