"""In-memory backend implementation."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, override

from .protocol import Backend, KeyValue, KeyValueList


if TYPE_CHECKING:
    from collections.abc import Mapping


class InMemoryAsyncBackend(Backend):
    """Simple in-memory backend for local development and tests."""

    def __init__(self, data: Mapping[str, str | None] | None = None) -> None:
        super().__init__()
        self._store: dict[str, str | None] = dict(data or {})
        self._lock = asyncio.Lock()
        self.closed = False

    async def put(self, key: str, value: str | None) -> None:
        """Store raw value for key."""
        async with self._lock:
            self._store[key] = value

    async def delete(self, key: str) -> None:
        """Delete key if present."""
        async with self._lock:
            _ = self._store.pop(key, None)

    @override
    async def get_values(self, prefix: str) -> KeyValueList:
        """List all entries beginning with prefix in key order."""
        async with self._lock:
            matching = [KeyValue(key, value) for key, value in self._store.items() if key.startswith(prefix)]
        return KeyValueList.from_entries(sorted(matching, key=lambda entry: entry.key))

    @override
    async def close(self) -> None:
        """Release backend resources."""
        self.closed = True
