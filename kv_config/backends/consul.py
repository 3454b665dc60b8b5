"""Consul KV backend implementation over the HTTP API."""

from __future__ import annotations

import base64
import logging
from typing import Any, override
from urllib.parse import quote

import httpx

from .protocol import Backend, KeyValue, KeyValueList


logger = logging.getLogger(__name__)

_TOKEN_HEADER = "X-Consul-Token"


def _decode_value(raw: str | None) -> str | None:
    if raw is None:
        return None
    return base64.b64decode(raw).decode(errors="replace")


class ConsulBackend(Backend):
    """Consul KV backend reading recursive listings from ``/v1/kv``."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8500,
        *,
        ssl: bool = False,
        acl_token: str | None = None,
        dc: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a backend for a Consul agent or an injected HTTP client.

        Parameters
        ----------
        host, port
            Consul agent address used when ``client`` is not provided.
        ssl
            Use ``https`` instead of ``http``.
        acl_token
            ACL token sent with every request.
        dc
            Datacenter to query; the agent's own datacenter when None.
        timeout
            Request timeout in seconds handed to ``httpx``.
        client
            Optional injected ``httpx.AsyncClient``; its base URL is used as is.
        """
        super().__init__()
        self._dc = dc
        headers = {_TOKEN_HEADER: acl_token} if acl_token else {}
        if client is not None:
            client.headers.update(headers)
            self._client = client
            return

        scheme = "https" if ssl else "http"
        self._client = httpx.AsyncClient(base_url=f"{scheme}://{host}:{port}", headers=headers, timeout=timeout)

    @override
    async def get_values(self, prefix: str) -> KeyValueList:
        """List all entries beginning with prefix; a missing prefix is absent."""
        params: dict[str, Any] = {"recurse": "true"}
        if self._dc is not None:
            params["dc"] = self._dc

        response = await self._client.get(f"/v1/kv/{quote(prefix, safe='/')}", params=params)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("consul prefix %r does not exist", prefix)
            return KeyValueList.absent()
        _ = response.raise_for_status()

        return KeyValueList(
            entries=[KeyValue(item["Key"], _decode_value(item.get("Value"))) for item in response.json() or []],
            present=True,
        )

    @override
    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
