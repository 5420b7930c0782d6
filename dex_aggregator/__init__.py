"""Data-assembly layer joining PokeAPI resources into catalog and detail view models."""

from dex_aggregator.aggregator import Aggregator
from dex_aggregator.models import CatalogEntry, DetailRecord, Stat, TypeTag

__all__ = ["Aggregator", "CatalogEntry", "DetailRecord", "Stat", "TypeTag"]
