"""kv-config - nested configuration documents from KV store prefixes"""

from ._version import version as __version__
from .backends import Backend, ConsulBackend, InMemoryAsyncBackend, KeyValue, KeyValueList
from .key_mapping import KeyMapper, build_tree, flatten_tree, normalize_prefix
from .stores import KVConfigStore, SyncConfigStore, available_store_types, create_store


__all__ = [
    "Backend",
    "ConsulBackend",
    "InMemoryAsyncBackend",
    "KVConfigStore",
    "KeyMapper",
    "KeyValue",
    "KeyValueList",
    "SyncConfigStore",
    "__version__",
    "available_store_types",
    "build_tree",
    "create_store",
    "flatten_tree",
    "normalize_prefix",
]
