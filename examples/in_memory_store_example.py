"""Minimal example for KVConfigStore using the in-memory backend."""

import asyncio

from kv_config.backends.in_memory import InMemoryAsyncBackend
from kv_config.stores.kv_store import KVConfigStore


async def main() -> None:
    """Build a nested document from a handful of flat keys."""
    backend = InMemoryAsyncBackend(
        {
            "config/": None,
            "config/db/host": "localhost",
            "config/db/port": "5432",
            "config/debug": "true",
        }
    )
    async with KVConfigStore(backend, prefix="config") as store:
        print("document:", await store.get_document())
        print("raw:", await store.get())


if __name__ == "__main__":
    asyncio.run(main())
