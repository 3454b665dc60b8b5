"""Minimal example for KVConfigStore using a Consul agent."""

import asyncio

from kv_config.stores.factory import create_store


async def main() -> None:
    """Read everything under ``config/`` from a local Consul agent."""
    store = create_store("consul", {"host": "consul", "port": 8500, "prefix": "config"})
    try:
        print("config:", (await store.get()).decode())
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
