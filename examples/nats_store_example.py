"""Minimal example for KVConfigStore using a NATS JetStream KV bucket."""

import asyncio

from kv_config.backends.nats import NatsBackend
from kv_config.stores.kv_store import KVConfigStore


async def main() -> None:
    """Read a ``.``-delimited prefix from an existing JetStream KV bucket."""
    backend = NatsBackend(url="nats://nats:4222", bucket="kv_config")
    async with KVConfigStore(backend, prefix="app", delimiter=".") as store:
        print("config:", await store.get_document())


if __name__ == "__main__":
    asyncio.run(main())
