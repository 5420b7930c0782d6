"""Tests for type tag resolution."""

import pytest

from dex_aggregator.client import PokeApiClient
from dex_aggregator.errors import LocalizationMissing, UpstreamError
from dex_aggregator.localization import LocalizationResolver
from dex_aggregator.models import TypeTag
from dex_aggregator.type_resolver import TypeResolver

from fakes import type_ref


@pytest.fixture
async def resolver(api):
    client = PokeApiClient()
    yield TypeResolver(client, LocalizationResolver())
    await client.close()


async def test_tags_preserve_upstream_order(resolver):
    tags = await resolver.tags([type_ref(4, 1), type_ref(12, 2)])
    assert tags == [TypeTag(en="poison", localized="독"), TypeTag(en="grass", localized="풀")]


async def test_resolve_carries_damage_relations(resolver):
    resolved = await resolver.resolve([type_ref(12, 1), type_ref(10, 2)])
    assert [r.damage_relations["double_damage_from"][0]["name"] for r in resolved] == [
        "weak-to-grass",
        "weak-to-fire",
    ]


async def test_no_types(resolver):
    assert await resolver.tags([]) == []


async def test_missing_label_fails(resolver, dex):
    dex.types[10]["names"] = [n for n in dex.types[10]["names"] if n["language"]["name"] != "ko"]
    with pytest.raises(LocalizationMissing):
        await resolver.tags([type_ref(12, 1), type_ref(10, 2)])


async def test_upstream_failure_fails(resolver, dex):
    del dex.types[4]
    with pytest.raises(UpstreamError):
        await resolver.tags([type_ref(4, 1)])
