"""Store factory keyed by backend type name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kv_config.backends import (
    Backend,
    ConsulBackend,
    InMemoryAsyncBackend,
    NatsBackend,
    PostgresBackend,
    RedisBackend,
)

from .kv_store import KVConfigStore


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


logger = logging.getLogger(__name__)

# Options consumed by the store itself; the rest belong to the backend.
STORE_OPTIONS = frozenset({"prefix", "delimiter"})

_BACKENDS: dict[str, Callable[..., Backend]] = {
    "consul": ConsulBackend,
    "memory": InMemoryAsyncBackend,
    "nats": NatsBackend,
    "postgres": PostgresBackend,
    "redis": RedisBackend,
}


def available_store_types() -> list[str]:
    """Return the registered store type names in sorted order."""
    return sorted(_BACKENDS)


def create_store(store_type: str, configuration: Mapping[str, Any] | None = None) -> KVConfigStore:
    """Create a configuration store for ``store_type`` from a flat option mapping.

    ``prefix`` and ``delimiter`` configure the store; every other option is
    passed unchanged to the backend constructor.
    """
    try:
        backend_factory = _BACKENDS[store_type]
    except KeyError:
        msg = f"unknown store type {store_type!r}; expected one of {', '.join(available_store_types())}"
        raise ValueError(msg) from None

    configuration = dict(configuration or {})
    backend_options = {key: value for key, value in configuration.items() if key not in STORE_OPTIONS}
    logger.debug("creating %s store with backend options %s", store_type, sorted(backend_options))
    return KVConfigStore.from_config(backend_factory(**backend_options), configuration)
