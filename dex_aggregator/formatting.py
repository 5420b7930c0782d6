"""Pure reshaping helpers for raw PokeAPI payloads."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from dex_aggregator.errors import DataShapeViolation
from dex_aggregator.models import Stat

# Upstream stat key -> display name, in canonical order.
CANONICAL_STATS = (
    ("hp", "Hit Points"),
    ("attack", "Attack"),
    ("defense", "Defense"),
    ("special-attack", "Special Attack"),
    ("special-defense", "Special Defense"),
    ("speed", "Speed"),
)

MAX_ABILITIES = 2

_LINE_BREAKS = re.compile(r"[\r\n\f]")


def format_stats(raw_stats: List[Dict[str, Any]]) -> List[Stat]:
    """Return the six canonical stats in fixed order, matched by stat key.

    Upstream order is ignored. Anything other than exactly one entry per
    canonical key raises DataShapeViolation.
    """
    if len(raw_stats) != len(CANONICAL_STATS):
        raise DataShapeViolation(
            f"Expected {len(CANONICAL_STATS)} stats, got {len(raw_stats)}"
        )

    by_key: Dict[str, int] = {}
    for entry in raw_stats:
        try:
            key = entry["stat"]["name"]
            value = int(entry["base_stat"])
        except (KeyError, TypeError, ValueError) as exc:
            raise DataShapeViolation(f"Malformed stat entry: {entry!r}") from exc
        if key in by_key:
            raise DataShapeViolation(f"Duplicate stat '{key}'")
        by_key[key] = value

    missing = [key for key, _ in CANONICAL_STATS if key not in by_key]
    if missing:
        raise DataShapeViolation(f"Missing stats: {', '.join(missing)}")

    return [Stat(name=label, base_stat=by_key[key]) for key, label in CANONICAL_STATS]


def format_abilities(raw_abilities: List[Dict[str, Any]]) -> List[str]:
    """First two abilities in upstream order, hyphens turned into spaces.

    Duplicates are kept: the cap is positional.
    """
    return [
        entry["ability"]["name"].replace("-", " ")
        for entry in raw_abilities[:MAX_ABILITIES]
    ]


def format_sprites(raw_sprites: Dict[str, Any]) -> List[str]:
    """Scalar sprite URLs only; nested maps and nulls are dropped."""
    return [value for value in raw_sprites.values() if isinstance(value, str)]


def official_artwork(raw_sprites: Dict[str, Any]) -> Optional[str]:
    other = raw_sprites.get("other") or {}
    artwork = other.get("official-artwork") or {}
    return artwork.get("front_default")


def normalize_flavor_text(text: str) -> str:
    return _LINE_BREAKS.sub(" ", text)


def to_metric(raw_units: int) -> float:
    """Decimetres -> metres and hectograms -> kilograms."""
    return raw_units / 10


def display_number(entry_id: int) -> str:
    """``25`` -> ``#025``."""
    return f"#{entry_id:03d}"


def id_from_resource_url(url: str) -> int:
    """Trailing numeric id of a resource URL such as ``.../pokemon/25/``."""
    tail = url.rstrip("/").rsplit("/", 1)[-1]
    try:
        return int(tail)
    except ValueError as exc:
        raise DataShapeViolation(f"No numeric id in resource URL '{url}'") from exc
