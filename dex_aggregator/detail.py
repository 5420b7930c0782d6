"""Detail record assembly."""

from __future__ import annotations

import logging
from typing import Optional, Union

from dex_aggregator.client import DETAIL_PATH, SPECIES_PATH, PokeApiClient
from dex_aggregator.concurrency import join_all
from dex_aggregator.description import DescriptionPicker
from dex_aggregator.errors import DataShapeViolation
from dex_aggregator.formatting import (
    format_abilities,
    format_sprites,
    format_stats,
    official_artwork,
    to_metric,
)
from dex_aggregator.localization import LocalizationResolver
from dex_aggregator.models import DetailRecord
from dex_aggregator.navigation import NavigationResolver
from dex_aggregator.type_resolver import TypeResolver

logger = logging.getLogger(__name__)


def coerce_id(identifier: Union[int, str]) -> int:
    """Accept ``25`` or ``"25"``; anything else raises ValueError."""
    entry_id = int(str(identifier).strip())
    if entry_id < 1:
        raise ValueError(f"Identifiers are positive integers, got {identifier!r}")
    return entry_id


class DetailFetcher:
    def __init__(
        self,
        client: PokeApiClient,
        localization: LocalizationResolver,
        types: TypeResolver,
        navigation: NavigationResolver,
        descriptions: DescriptionPicker,
    ) -> None:
        self._client = client
        self._localization = localization
        self._types = types
        self._navigation = navigation
        self._descriptions = descriptions

    async def fetch(self, identifier: Union[int, str]) -> Optional[DetailRecord]:
        """Assemble the full record, or return None when upstream has no such entry."""
        entry_id = coerce_id(identifier)
        raw = await self._client.get_json_or_none(DETAIL_PATH.format(id=entry_id))
        if not raw:
            logger.info("Entry %d not available", entry_id)
            return None

        try:
            entry_id = raw["id"]
            raw_sprites = raw["sprites"]
            weight = to_metric(raw["weight"])
            height = to_metric(raw["height"])
        except (KeyError, TypeError) as exc:
            raise DataShapeViolation(f"Malformed detail record for {entry_id}: {exc}") from exc

        # Shape checks happen before the fan-out.
        stats = format_stats(raw.get("stats", []))
        abilities = format_abilities(raw.get("abilities", []))

        species, resolved_types, navigation = await join_all(
            self._client.get_json(SPECIES_PATH.format(id=entry_id)),
            self._types.resolve(raw.get("types", [])),
            self._navigation.resolve(entry_id),
        )

        record = DetailRecord(
            id=entry_id,
            name=self._localization.name(species),
            image=official_artwork(raw_sprites),
            types=[t.tag for t in resolved_types],
            weight=weight,
            height=height,
            stats=stats,
            abilities=abilities,
            next=navigation.next,
            previous=navigation.previous,
            damage_relations=[t.damage_relations for t in resolved_types],
            sprites=format_sprites(raw_sprites),
            description=self._descriptions.pick_from(species),
        )
        logger.info("Detail %d assembled (%s)", entry_id, record.name)
        return record
