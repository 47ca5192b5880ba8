"""Key-value persistence boundary shared by all stores"""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Persisted keys
USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"
ACTIVITIES_KEY = "activities"


class KeyValueStore(ABC):
    """
    Minimal string-keyed store of JSON-compatible values.

    Implementations hand out copies: mutating a value returned by get()
    never changes what is stored until set() is called with it.
    """

    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the value stored under key, or default if absent"""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present (idempotent)"""
