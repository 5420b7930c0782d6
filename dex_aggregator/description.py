"""Random localized flavor-text selection."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from dex_aggregator.client import SPECIES_PATH, PokeApiClient
from dex_aggregator.config import LocaleConfig
from dex_aggregator.errors import DataShapeViolation, LocalizationMissing
from dex_aggregator.formatting import normalize_flavor_text

logger = logging.getLogger(__name__)


class DescriptionPicker:
    """Pick one flavor text in the target locale, uniformly at random.

    Pass a seeded ``random.Random`` for reproducible picks.
    """

    def __init__(
        self,
        client: PokeApiClient,
        locale: Optional[LocaleConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._client = client
        self._locale = locale or LocaleConfig()
        self._rng = rng or random.Random()

    async def pick(self, entry_id: int) -> str:
        species = await self._client.get_json(SPECIES_PATH.format(id=entry_id))
        return self.pick_from(species)

    def pick_from(self, species: Dict[str, Any]) -> str:
        return self._rng.choice(self.candidates(species))

    def candidates(self, species: Dict[str, Any]) -> List[str]:
        """Normalized flavor texts in the target locale (or the source locale as fallback)."""
        entries = species.get("flavor_text_entries") or []
        found = _in_locale(entries, self._locale.target_locale)
        if found:
            return found

        what = f"description of '{species.get('name', species.get('id', '?'))}'"
        if self._locale.fallback == "source":
            found = _in_locale(entries, self._locale.source_locale)
            if found:
                logger.warning(
                    "No '%s' %s, using '%s' flavor text",
                    self._locale.target_locale, what, self._locale.source_locale,
                )
                return found

        raise LocalizationMissing(self._locale.target_locale, what)


def _in_locale(entries: List[Dict[str, Any]], locale: str) -> List[str]:
    texts = []
    for entry in entries:
        try:
            if entry["language"]["name"] == locale:
                texts.append(normalize_flavor_text(entry["flavor_text"]))
        except (KeyError, TypeError) as exc:
            raise DataShapeViolation(f"Malformed flavor text entry: {entry!r}") from exc
    return texts
