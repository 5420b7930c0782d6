"""View models produced by the aggregator.

Everything here is a plain dataclass built fresh per request; nothing is
persisted. Consumers (the CLI, a web front end) only ever see these shapes,
never the raw upstream payloads.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TypeTag:
    """A category name in source form and in the target locale."""

    en: str  # e.g. "grass"
    localized: str  # e.g. "풀"


@dataclass
class ResolvedType:
    """A type tag together with the category record's damage relations."""

    tag: TypeTag
    damage_relations: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Stat:
    name: str  # "Hit Points", "Attack", ...
    base_stat: int


@dataclass
class Navigation:
    """Display names of the adjacent entries in the master index."""

    next: Optional[str] = None
    previous: Optional[str] = None


@dataclass
class CatalogEntry:
    """Summary shown in the list view."""

    id: int
    name: str
    image: Optional[str]
    types: List[TypeTag] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DetailRecord:
    """Full view model for one entry.

    ``weight`` is in kilograms and ``height`` in metres; ``stats`` always
    holds the six canonical stats in fixed order.
    """

    id: int
    name: str
    image: Optional[str]
    types: List[TypeTag]
    weight: float
    height: float
    stats: List[Stat]
    abilities: List[str]
    next: Optional[str]
    previous: Optional[str]
    damage_relations: List[Dict[str, Any]]
    sprites: List[str]
    description: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
