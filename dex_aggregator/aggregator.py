"""Aggregator facade: the two entry points consumers call."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Union

import httpx

from dex_aggregator.client import PokeApiClient
from dex_aggregator.config import AppConfig
from dex_aggregator.description import DescriptionPicker
from dex_aggregator.detail import DetailFetcher
from dex_aggregator.listing import ListFetcher
from dex_aggregator.localization import LocalizationResolver
from dex_aggregator.models import CatalogEntry, DetailRecord
from dex_aggregator.navigation import NavigationResolver
from dex_aggregator.type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class Aggregator:
    """Stateless data-assembly service over the PokeAPI.

    Wires the fetchers and resolvers together around one shared HTTP
    client::

        async with Aggregator(config) as agg:
            page = await agg.list_page(1)
            record = await agg.detail(25)

    Both entry points are plain coroutines: cancelling the task awaiting
    them cancels every request still in flight for that call.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config or AppConfig()
        self._client = PokeApiClient(self._config.api, self._config.cache, transport=transport)

        if rng is None:
            rng = random.Random(self._config.random_seed)
        localization = LocalizationResolver(self._config.locale)
        types = TypeResolver(self._client, localization)

        self._lists = ListFetcher(self._client, localization, types, self._config.listing)
        self._details = DetailFetcher(
            self._client,
            localization,
            types,
            NavigationResolver(self._client),
            DescriptionPicker(self._client, self._config.locale, rng),
        )

    async def list_page(self, page: int) -> List[CatalogEntry]:
        """Catalog entries for a 1-indexed page, in upstream order."""
        return await self._lists.fetch_page(page)

    async def detail(self, identifier: Union[int, str]) -> Optional[DetailRecord]:
        """Full record for one entry, or None if upstream does not have it."""
        return await self._details.fetch(identifier)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "Aggregator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
