"""Resolve an entry's type references into localized tags."""

from __future__ import annotations

from typing import Any, Dict, List

from dex_aggregator.client import PokeApiClient
from dex_aggregator.concurrency import join_all
from dex_aggregator.localization import LocalizationResolver
from dex_aggregator.models import ResolvedType, TypeTag


class TypeResolver:
    """Fetch each type's category record and read its label and damage relations.

    One category fetch per type, all in parallel, upstream order preserved.
    """

    def __init__(self, client: PokeApiClient, localization: LocalizationResolver) -> None:
        self._client = client
        self._localization = localization

    async def resolve(self, raw_types: List[Dict[str, Any]]) -> List[ResolvedType]:
        """``raw_types`` is the ``types`` array of a pokemon record."""
        return await join_all(*(self._resolve_one(entry["type"]) for entry in raw_types))

    async def tags(self, raw_types: List[Dict[str, Any]]) -> List[TypeTag]:
        return [resolved.tag for resolved in await self.resolve(raw_types)]

    async def _resolve_one(self, ref: Dict[str, Any]) -> ResolvedType:
        record = await self._client.get_json(ref["url"])
        return ResolvedType(
            tag=TypeTag(en=ref["name"], localized=self._localization.name(record)),
            damage_relations=record.get("damage_relations", {}),
        )
