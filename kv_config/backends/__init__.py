"""Backend contracts and implementations."""

from .consul import ConsulBackend
from .in_memory import InMemoryAsyncBackend
from .nats import NatsBackend
from .postgres import PostgresBackend
from .protocol import Backend, KeyValue, KeyValueList
from .redis import RedisBackend


__all__ = [
    "Backend",
    "ConsulBackend",
    "InMemoryAsyncBackend",
    "KeyValue",
    "KeyValueList",
    "NatsBackend",
    "PostgresBackend",
    "RedisBackend",
]
