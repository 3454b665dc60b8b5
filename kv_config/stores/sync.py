"""Blocking facade over an async configuration store."""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any, Self, TypeVar


if TYPE_CHECKING:
    from collections.abc import Coroutine
    from concurrent.futures import Future
    from types import TracebackType

    from .kv_store import KVConfigStore


_T = TypeVar("_T")


class _AsyncLoopBridge:
    """Bridge sync calls to async store operations on a dedicated loop."""

    def __init__(self) -> None:
        super().__init__()
        self._loop_ready = threading.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread = threading.Thread(target=self._run, name="kv-config-sync-store", daemon=True)
        self._thread.start()
        _ = self._loop_ready.wait()

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._loop_ready.set()
        loop.run_forever()
        loop.close()

    def run(self, coroutine: Coroutine[Any, Any, _T]) -> _T:
        if self._loop is None:
            msg = "sync store async loop not initialized"
            raise RuntimeError(msg)
        future: Future[_T] = asyncio.run_coroutine_threadsafe(coroutine, self._loop)
        return future.result()

    @property
    def closed(self) -> bool:
        return self._loop is None

    def close(self) -> None:
        if self._loop is None:
            return
        _ = self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._loop = None


class SyncConfigStore:
    """Synchronous API over :class:`KVConfigStore` for non-async callers.

    Calls are safe from inside a running event loop because the store runs on
    its own loop thread.
    """

    def __init__(self, store: KVConfigStore) -> None:
        super().__init__()
        self._store = store
        self._bridge = _AsyncLoopBridge()

    @property
    def store(self) -> KVConfigStore:
        return self._store

    def get(self) -> bytes:
        """Return the encoded configuration document."""
        return self._bridge.run(self._store.get())

    def get_document(self) -> dict[str, Any]:
        """Return the nested configuration document."""
        return self._bridge.run(self._store.get_document())

    def close(self) -> None:
        """Close store and bridge resources; later calls do nothing."""
        if self._bridge.closed:
            return
        self._bridge.run(self._store.close())
        self._bridge.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
