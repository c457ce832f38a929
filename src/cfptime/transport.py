from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from . import __version__
from .config import ClientConfig
from .core import Endpoint
from .errors import TransportError

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "application/json",
    "User-Agent": f"cfptime/{__version__}",
}


class SyncTransport:
    """Blocking transport backed by httpx.Client."""

    def __init__(self, cfg: Optional[ClientConfig] = None, *, client: Optional[httpx.Client] = None):
        self._cfg = cfg or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._cfg.timeout_s, follow_redirects=True)

    def fetch(self, endpoint: Endpoint) -> Any:
        url = self._cfg.base_url + endpoint.path
        try:
            r = self._client.get(url, headers=HEADERS)
        except httpx.RequestError as e:
            logger.debug("GET %s failed: %s", url, e)
            raise TransportError(f"GET {url} failed: {e}") from e
        return endpoint.parse(r)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SyncTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncTransport:
    """Transport backed by httpx.AsyncClient; fetch() returns a coroutine."""

    def __init__(self, cfg: Optional[ClientConfig] = None, *, client: Optional[httpx.AsyncClient] = None):
        self._cfg = cfg or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._cfg.timeout_s, follow_redirects=True)

    async def fetch(self, endpoint: Endpoint) -> Any:
        url = self._cfg.base_url + endpoint.path
        try:
            r = await self._client.get(url, headers=HEADERS)
        except httpx.RequestError as e:
            logger.debug("GET %s failed: %s", url, e)
            raise TransportError(f"GET {url} failed: {e}") from e
        return endpoint.parse(r)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
