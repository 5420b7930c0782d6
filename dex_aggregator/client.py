"""HTTP client for the PokeAPI, the aggregator's only I/O seam."""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Optional

import httpx
from cachetools import LRUCache

from dex_aggregator.config import ApiConfig, CacheConfig
from dex_aggregator.errors import UpstreamError

logger = logging.getLogger(__name__)

LIST_PATH = "/pokemon?limit={limit}&offset={offset}"
DETAIL_PATH = "/pokemon/{id}/"
SPECIES_PATH = "/pokemon-species/{id}/"


class PokeApiClient:
    """Thin async JSON client over ``httpx.AsyncClient``.

    Accepts either paths relative to the configured base URL
    (``/pokemon/1``) or the absolute resource URLs upstream embeds in its
    payloads. Successful payloads are kept in a read-through cache keyed by
    absolute URL; failures are never cached. Callers always receive their
    own copy, so mutating a result never reaches the cache.
    """

    def __init__(
        self,
        api: Optional[ApiConfig] = None,
        cache: Optional[CacheConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        api = api or ApiConfig()
        cache = cache or CacheConfig()
        self._base_url = api.base_url.rstrip("/")
        self._timeout = api.timeout
        self._user_agent = api.user_agent
        self._rate_limit = api.rate_limit_ms / 1000.0
        self._transport = transport
        self._cache: Optional[LRUCache] = LRUCache(maxsize=cache.maxsize) if cache.enabled else None
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            )
        return self._client

    def resolve_url(self, url: str) -> str:
        """Return the absolute form of ``url``."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}/{url.lstrip('/')}"

    async def _throttle(self) -> None:
        if self._rate_limit > 0:
            await asyncio.sleep(self._rate_limit)

    async def get_json(self, url: str) -> Any:
        """GET a JSON resource. Any failure raises UpstreamError."""
        return await self._fetch(url, allow_missing=False)

    async def get_json_or_none(self, url: str) -> Any:
        """Like get_json, but a 404 returns None instead of raising."""
        return await self._fetch(url, allow_missing=True)

    async def _fetch(self, url: str, allow_missing: bool) -> Any:
        absolute = self.resolve_url(url)
        if self._cache is not None and absolute in self._cache:
            logger.debug("Cache hit: %s", absolute)
            return copy.deepcopy(self._cache[absolute])

        client = self._get_client()
        await self._throttle()
        logger.debug("GET %s", absolute)
        try:
            resp = await client.get(absolute)
        except httpx.HTTPError as exc:
            raise UpstreamError(absolute, f"Request failed: {exc}") from exc

        if allow_missing and resp.status_code == 404:
            logger.info("Not found upstream: %s", absolute)
            return None

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(
                absolute, f"HTTP {resp.status_code}", status_code=resp.status_code
            ) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise UpstreamError(absolute, "Malformed JSON", status_code=resp.status_code) from exc

        if self._cache is not None:
            self._cache[absolute] = copy.deepcopy(payload)
        return payload

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
