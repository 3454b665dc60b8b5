"""Minimal example for SyncConfigStore using a Redis-compatible backend."""

from kv_config.backends.redis import RedisBackend
from kv_config.stores.kv_store import KVConfigStore
from kv_config.stores.sync import SyncConfigStore


def main() -> None:
    """Read a ``:``-delimited prefix from Redis/Dragonfly without an event loop."""
    backend = RedisBackend(url="redis://redis:6379/0")
    with SyncConfigStore(KVConfigStore(backend, prefix="app", delimiter=":")) as store:
        document = store.get_document()
        print(f"{document=}")


if __name__ == "__main__":
    main()
