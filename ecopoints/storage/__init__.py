from .base import KeyValueStore
from .json_file import JsonFileKeyValueStore
from .memory import MemoryKeyValueStore

__all__ = ["KeyValueStore", "JsonFileKeyValueStore", "MemoryKeyValueStore", "create_store"]


def create_store(storage_settings) -> KeyValueStore:
    """Build the backend named by StorageSettings.backend"""
    if storage_settings.backend == "memory":
        return MemoryKeyValueStore()
    return JsonFileKeyValueStore(storage_settings.data_dir)
