"""Tests for detail record assembly."""

import random

import pytest

from dex_aggregator.detail import coerce_id
from dex_aggregator.errors import DataShapeViolation, LocalizationMissing, UpstreamError
from dex_aggregator.models import DetailRecord, Stat, TypeTag

from fakes import species_payload

KO_CANDIDATES = {"태어나서부터 얼마 동안은", "등에 씨앗이 있다.", "햇빛을 받아서  자란다."}


@pytest.mark.parametrize("entry_id", [1, 2, 25, 40])
async def test_id_round_trips(aggregator, entry_id):
    record = await aggregator.detail(entry_id)
    assert record.id == entry_id


async def test_string_identifier_is_coerced(aggregator):
    record = await aggregator.detail(" 25 ")
    assert record.id == 25


async def test_full_record(aggregator):
    record = await aggregator.detail(1)
    assert isinstance(record, DetailRecord)
    assert record.name == "몬1"
    assert record.image == "https://img.example/art/1.png"
    assert record.types == [TypeTag(en="grass", localized="풀"), TypeTag(en="poison", localized="독")]
    assert record.stats == [
        Stat("Hit Points", 40),
        Stat("Attack", 41),
        Stat("Defense", 42),
        Stat("Special Attack", 43),
        Stat("Special Defense", 44),
        Stat("Speed", 45),
    ]
    assert record.abilities == ["over grow", "chlorophyll"]
    assert record.next == "mon-2"
    assert record.previous is None
    assert record.description in KO_CANDIDATES


@pytest.mark.parametrize("entry_id", [1, 7, 33])
async def test_unit_conversion(aggregator, dex, entry_id):
    raw = dex.pokemon[entry_id]
    record = await aggregator.detail(entry_id)
    assert record.weight == raw["weight"] / 10
    assert record.height == raw["height"] / 10


@pytest.mark.parametrize("seed", range(3))
async def test_stats_canonical_despite_upstream_order(aggregator, dex, seed):
    random.Random(seed).shuffle(dex.pokemon[12]["stats"])
    record = await aggregator.detail(12)
    assert [s.name for s in record.stats] == [
        "Hit Points", "Attack", "Defense", "Special Attack", "Special Defense", "Speed",
    ]
    assert [s.base_stat for s in record.stats] == [40, 41, 42, 43, 44, 45]


async def test_bad_stats_fail_before_fan_out(aggregator, dex):
    dex.pokemon[3]["stats"] = dex.pokemon[3]["stats"][:5]
    with pytest.raises(DataShapeViolation):
        await aggregator.detail(3)
    assert dex.requests == ["https://pokeapi.co/api/v2/pokemon/3/"]


async def test_abilities_and_sprites(aggregator):
    record = await aggregator.detail(9)
    assert len(record.abilities) <= 2
    assert all("-" not in a for a in record.abilities)
    assert record.sprites
    assert all(isinstance(s, str) for s in record.sprites)


async def test_navigation_boundaries(aggregator, dex):
    first = await aggregator.detail(1)
    last = await aggregator.detail(max(dex.pokemon))
    assert first.previous is None
    assert last.next is None
    assert last.previous == "mon-39"


async def test_one_damage_relation_per_type(aggregator, dex):
    record = await aggregator.detail(1)
    assert record.damage_relations == [
        dex.types[12]["damage_relations"],
        dex.types[4]["damage_relations"],
    ]


async def test_shared_fetches(aggregator, dex):
    await aggregator.detail(2)
    assert dex.count_requests("/pokemon-species/2/") == 1
    assert dex.count_requests("/type/12/") == 1


async def test_mutating_a_record_does_not_leak_into_the_next(aggregator):
    first = await aggregator.detail(2)
    first.damage_relations[0]["double_damage_from"].append({"name": "changed"})
    first.damage_relations[0]["half_damage_from"] = ["changed"]

    second = await aggregator.detail(3)
    assert second.damage_relations[0]["double_damage_from"] == [{"name": "weak-to-grass"}]
    assert second.damage_relations[0]["half_damage_from"] == []


async def test_detail_reuses_payload_fetched_by_listing(aggregator, dex):
    await aggregator.list_page(1)
    assert dex.count_requests("/pokemon/2/") == 1
    record = await aggregator.detail(2)
    assert record.id == 2
    assert dex.count_requests("/pokemon/2/") == 1


async def test_not_found_returns_none(aggregator, dex):
    assert await aggregator.detail(999) is None
    assert len(dex.requests) == 1


async def test_no_localized_description_fails(aggregator, dex):
    species = species_payload(4)
    species["flavor_text_entries"] = [
        e for e in species["flavor_text_entries"] if e["language"]["name"] != "ko"
    ]
    dex.species[4] = species
    with pytest.raises(LocalizationMissing):
        await aggregator.detail(4)


async def test_navigation_failure_fails_detail(aggregator, dex):
    dex.failures["/pokemon?"] = 500
    with pytest.raises(UpstreamError) as info:
        await aggregator.detail(5)
    assert info.value.status_code == 500


def test_coerce_id():
    assert coerce_id(7) == 7
    assert coerce_id("7") == 7
    with pytest.raises(ValueError):
        coerce_id("pikachu")
    with pytest.raises(ValueError):
        coerce_id(0)


async def test_invalid_identifier(aggregator, dex):
    with pytest.raises(ValueError):
        await aggregator.detail("pikachu")
    assert dex.requests == []
