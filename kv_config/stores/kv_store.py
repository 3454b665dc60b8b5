"""Configuration store producing nested JSON documents from a KV backend."""

from __future__ import annotations

import json
import logging
from functools import partial
from typing import TYPE_CHECKING, Any, Self

from kv_config.key_mapping import KeyMapper, build_tree


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from kv_config.backends import Backend


logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = b"{}"

_compact_json = partial(json.dumps, separators=(",", ":"), ensure_ascii=False)


class KVConfigStore:
    """Read a key prefix from a backend as one nested configuration document.

    Every call to :meth:`get` issues a single listing request and completes
    exactly once: with the encoded document, with ``b"{}"`` when the prefix does
    not exist, or by re-raising the backend error as it was raised.
    """

    def __init__(
        self,
        backend: Backend,
        *,
        prefix: str | None = None,
        delimiter: str = "/",
        json_encoder: Callable[[Any], str] = _compact_json,
    ) -> None:
        super().__init__()
        self._backend = backend
        self._mapper = KeyMapper(prefix=prefix, delimiter=delimiter)
        self._json_encoder = json_encoder

    @classmethod
    def from_config(cls, backend: Backend, configuration: Mapping[str, Any]) -> Self:
        """Create a store reading ``prefix`` and ``delimiter`` from a config mapping."""
        return cls(backend, prefix=configuration.get("prefix"), delimiter=configuration.get("delimiter", "/"))

    @property
    def prefix(self) -> str:
        return self._mapper.prefix

    @property
    def delimiter(self) -> str:
        return self._mapper.delimiter

    async def get_document(self) -> dict[str, Any]:
        """Fetch the prefix and return the nested document without encoding it."""
        values = await self._backend.get_values(self.prefix)
        if not values.present:
            logger.debug("prefix %r is absent, returning an empty document", self.prefix)
            return {}

        logger.debug("building document from %d entries under %r", len(values), self.prefix)
        return build_tree(values, len(self.prefix), self.delimiter)

    async def get(self) -> bytes:
        """Fetch the prefix and return the document as UTF-8 encoded JSON."""
        document = await self.get_document()
        if not document:
            return EMPTY_DOCUMENT
        return self._json_encoder(document).encode()

    async def close(self) -> None:
        """Release the backend; completes even when the backend fails to close."""
        try:
            await self._backend.close()
        except Exception:
            logger.warning("failed to close %s", type(self._backend).__name__, exc_info=True)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()
