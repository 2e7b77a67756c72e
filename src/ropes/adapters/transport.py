"""
JSON Transports

The loader fetches payloads through a Transport. Failures are never caught
here: they propagate to whoever awaits the fetch.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from ..app.config import TransportConfig

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Abstract base class for JSON transports."""

    @abstractmethod
    async def fetch_json(self, url: str) -> Any:
        """Fetch `url` and return the decoded JSON payload."""
        pass

    async def aclose(self) -> None:
        """Release any held resources."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


class HttpxTransport(Transport):
    """
    HTTP transport on a shared httpx.AsyncClient.

    Non-2xx responses raise httpx.HTTPStatusError. The timeout defaults to
    None, so a stalled request waits indefinitely unless one is configured.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json", **(headers or {})},
            timeout=timeout,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def fetch_json(self, url: str) -> Any:
        logger.debug(f"GET {url}")
        response = await self._client.get(url)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class FileTransport(Transport):
    """
    Reads JSON documents from a directory, for static fixtures.

    `fetch_json("json/contact.js")` reads `<root>/json/contact.js`. Paths
    that escape the root raise ValueError.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def _path_for(self, url: str) -> Path:
        path = (self.root / url.lstrip("/")).resolve()
        if path != self.root and self.root not in path.parents:
            raise ValueError(f"{url} resolves outside {self.root}")
        return path

    async def fetch_json(self, url: str) -> Any:
        path = self._path_for(url)
        logger.debug(f"Reading {path}")
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return json.loads(text)


def transport_from_config(config: "TransportConfig") -> Transport:
    """FileTransport when a json root is configured, HttpxTransport otherwise."""
    if config.json_root:
        return FileTransport(config.json_root)
    return HttpxTransport(config.base_url, headers=config.headers, timeout=config.timeout)
