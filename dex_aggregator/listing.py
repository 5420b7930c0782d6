"""Catalog page assembly."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from dex_aggregator.client import LIST_PATH, SPECIES_PATH, PokeApiClient
from dex_aggregator.concurrency import join_all
from dex_aggregator.config import ListingConfig
from dex_aggregator.errors import DataShapeViolation
from dex_aggregator.formatting import id_from_resource_url, official_artwork
from dex_aggregator.localization import LocalizationResolver
from dex_aggregator.models import CatalogEntry
from dex_aggregator.type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class ListFetcher:
    """Build a page of CatalogEntry from the paginated index.

    In ``cumulative`` mode page N requests the first ``N * page_size``
    entries from offset 0, so every page repeats the prefix before it. In
    ``offset`` mode only the slice belonging to page N is requested.
    Every entry on the page is assembled concurrently; a single failing
    entry fails the whole page.
    """

    def __init__(
        self,
        client: PokeApiClient,
        localization: LocalizationResolver,
        types: TypeResolver,
        listing: Optional[ListingConfig] = None,
    ) -> None:
        self._client = client
        self._localization = localization
        self._types = types
        self._listing = listing or ListingConfig()

    def window(self, page: int) -> Tuple[int, int]:
        """Return ``(limit, offset)`` for a 1-indexed page."""
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")
        size = self._listing.page_size
        if self._listing.pagination == "offset":
            return size, (page - 1) * size
        return size * page, 0

    async def fetch_page(self, page: int) -> List[CatalogEntry]:
        limit, offset = self.window(page)
        index = await self._client.get_json(LIST_PATH.format(limit=limit, offset=offset))
        refs = index.get("results") or []
        entries = await join_all(*(self._entry(ref) for ref in refs))
        logger.info("Page %d: %d entries (limit=%d, offset=%d)", page, len(entries), limit, offset)
        return entries

    async def _entry(self, ref: Dict[str, Any]) -> CatalogEntry:
        try:
            url = ref["url"]
        except (KeyError, TypeError) as exc:
            raise DataShapeViolation(f"Malformed listing result: {ref!r}") from exc

        raw = await self._client.get_json(url)
        entry_id = raw.get("id")
        expected = id_from_resource_url(url)
        if entry_id != expected:
            raise DataShapeViolation(
                f"Resource {url} reports id {entry_id}, expected {expected}"
            )

        name, types = await join_all(
            self._localized_name(entry_id),
            self._types.tags(raw.get("types", [])),
        )
        return CatalogEntry(
            id=entry_id,
            name=name,
            image=official_artwork(raw.get("sprites") or {}),
            types=types,
        )

    async def _localized_name(self, entry_id: int) -> str:
        species = await self._client.get_json(SPECIES_PATH.format(id=entry_id))
        return self._localization.name(species)
