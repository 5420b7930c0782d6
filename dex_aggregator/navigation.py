"""Previous/next lookup against the master index."""

from __future__ import annotations

from typing import Any, Dict, Optional

from dex_aggregator.client import LIST_PATH, PokeApiClient
from dex_aggregator.concurrency import join_all
from dex_aggregator.models import Navigation


class NavigationResolver:
    def __init__(self, client: PokeApiClient) -> None:
        self._client = client

    async def resolve(self, entry_id: int) -> Navigation:
        """Names of the entries adjacent to ``entry_id``.

        Opens a one-item window on the index at offset ``entry_id - 1`` and
        follows whichever cursor links upstream returns. A missing cursor
        (first or last entry) yields ``None`` for that side.
        """
        window = await self._client.get_json(LIST_PATH.format(limit=1, offset=entry_id - 1))
        next_name, previous_name = await join_all(
            self._first_name_at(window.get("next")),
            self._first_name_at(window.get("previous")),
        )
        return Navigation(next=next_name, previous=previous_name)

    async def _first_name_at(self, cursor: Optional[str]) -> Optional[str]:
        if not cursor:
            return None
        page: Dict[str, Any] = await self._client.get_json(cursor)
        results = page.get("results") or []
        if not results:
            return None
        return results[0].get("name")
