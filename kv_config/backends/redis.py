"""Redis-compatible backend implementation."""

from __future__ import annotations

import re
from inspect import isawaitable
from typing import Any, override


try:
    import redis.asyncio as redis_async
except ImportError:  # pragma: no cover - exercised when dependency is absent
    redis_async = None

from .protocol import Backend, KeyValue, KeyValueList


_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def _match_pattern(prefix: str) -> str:
    return _GLOB_SPECIAL.sub(r"\\\1", prefix) + "*"


def _normalize_string(value: str | bytes | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return value


class RedisBackend(Backend):
    """Redis-compatible async backend using ``redis.asyncio`` client APIs."""

    def __init__(self, url: str = "redis://localhost:6379/0", *, client: Any | None = None) -> None:
        """Create a backend from URL or an injected async client.

        Parameters
        ----------
        url
            Redis connection URL used when ``client`` is not provided.
        client
            Optional injected client with ``scan_iter/mget/aclose`` API.
        """
        super().__init__()
        self._url = url
        if client is not None:
            self._client = client
            return

        if redis_async is None:
            msg = "redis dependency is required for RedisBackend; install with `uv add redis`"
            raise RuntimeError(msg)

        self._client = redis_async.from_url(url, decode_responses=True)

    @override
    async def get_values(self, prefix: str) -> KeyValueList:
        """List all entries beginning with prefix in key order."""
        keys: list[str] = []
        async for key in self._client.scan_iter(match=_match_pattern(prefix)):
            normalized = _normalize_string(key)
            if normalized is not None and normalized.startswith(prefix):
                keys.append(normalized)
        if not keys:
            return KeyValueList.absent()

        keys.sort()
        values = await self._client.mget(keys)
        return KeyValueList.from_entries(
            [KeyValue(key, _normalize_string(value)) for key, value in zip(keys, values, strict=True)]
        )

    @override
    async def close(self) -> None:
        """Release backend resources."""
        close_method = getattr(self._client, "aclose", None)
        if close_method is None:
            close_method = getattr(self._client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable
