"""
JSON file key-value store.
Each key is persisted as <data_dir>/<key>.json and written atomically.
"""

import json
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from ..utils.exceptions import StorageUnavailable
from ..utils.logger import get_logger
from .base import KeyValueStore

logger = get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


class JsonFileKeyValueStore(KeyValueStore):
    """File-per-key JSON persistence"""

    def __init__(self, data_dir: Union[str, Path] = "data"):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Failed to read storage key", key=key, path=str(path), error=str(e))
            raise StorageUnavailable(f"Failed to read '{key}' from {path}: {e}", key=key)

    def set(self, key: str, value: Any) -> None:
        self._atomic_write(self._path(key), value, key)

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error("Failed to delete storage key", key=key, path=str(path), error=str(e))
            raise StorageUnavailable(f"Failed to delete '{key}' at {path}: {e}", key=key)

    def _atomic_write(self, path: Path, data: Any, key: str) -> None:
        """Write JSON file atomically"""
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w", dir=str(path.parent), delete=False, encoding="utf-8", suffix=".tmp"
            ) as tf:
                temp_path = Path(tf.name)
                json.dump(data, tf, indent=2, ensure_ascii=False)
            # Atomic move/replace
            shutil.move(str(temp_path), str(path))
        except (OSError, TypeError, ValueError) as e:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
            logger.error("Failed to write storage key", key=key, path=str(path), error=str(e))
            raise StorageUnavailable(f"Failed to save '{key}' to {path}: {e}", key=key)
