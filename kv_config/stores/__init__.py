"""Configuration stores built on KV backends."""

from .factory import available_store_types, create_store
from .kv_store import KVConfigStore
from .sync import SyncConfigStore


__all__ = ["KVConfigStore", "SyncConfigStore", "available_store_types", "create_store"]
