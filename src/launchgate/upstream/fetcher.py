"""HTTP fetch-with-cache capability for the upstream REST source."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

import httpx
from cachetools import TTLCache

from ..logging import get_logger

logger = get_logger(__name__)


class UpstreamUnavailableError(Exception):
    """Raised when the upstream REST source cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Fetcher(Protocol):
    """Anything that can GET a JSON document from the upstream source."""

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """
        Fetch and decode a JSON document.

        Raises:
            UpstreamUnavailableError: If the upstream source fails
        """
        ...


def _cache_key(path: str, params: Mapping[str, Any] | None) -> tuple:
    items = tuple(sorted((str(k), str(v)) for k, v in (params or {}).items()))
    return (path, items)


class CachedFetcher:
    """
    GET JSON documents through an ``httpx.AsyncClient`` and keep successful
    responses in a TTL cache keyed by path and query parameters.

    The client is owned by the caller (typically the application lifespan).
    Failed responses are never cached.
    """

    def __init__(self, client: httpx.AsyncClient, ttl: int = 300, maxsize: int = 256):
        self._client = client
        self._cache: TTLCache[tuple, Any] = TTLCache(maxsize=maxsize, ttl=ttl)

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        key = _cache_key(path, params)
        if key in self._cache:
            logger.debug("Upstream cache hit", path=path, params=dict(params or {}))
            return self._cache[key]

        try:
            response = await self._client.get(path, params=dict(params or {}))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Upstream returned an error status",
                path=path,
                status_code=e.response.status_code,
            )
            raise UpstreamUnavailableError(
                f"Upstream request to {path} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Upstream request failed", path=path, error=str(e))
            raise UpstreamUnavailableError(f"Upstream request to {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(f"Upstream returned invalid JSON for {path}") from e

        self._cache[key] = data
        return data

    def clear(self) -> None:
        """Drop every cached response."""
        self._cache.clear()
