"""In-process key-value store, used for tests and ephemeral runs"""

import json
from typing import Any, Dict, Optional

from ..utils.exceptions import StorageUnavailable
from .base import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """Keeps values as serialized JSON text so copies behave like the file backend"""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"Value for '{key}' is not JSON serializable: {e}", key=key)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
