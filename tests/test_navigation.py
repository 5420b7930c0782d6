"""Tests for previous/next navigation."""

import pytest

from dex_aggregator.client import PokeApiClient
from dex_aggregator.models import Navigation
from dex_aggregator.navigation import NavigationResolver


@pytest.fixture
async def navigation(api):
    client = PokeApiClient()
    yield NavigationResolver(client)
    await client.close()


async def test_middle_entry(navigation):
    assert await navigation.resolve(10) == Navigation(next="mon-11", previous="mon-9")


async def test_first_entry_has_no_previous(navigation):
    nav = await navigation.resolve(1)
    assert nav.previous is None
    assert nav.next == "mon-2"


async def test_last_entry_has_no_next(navigation, dex):
    nav = await navigation.resolve(max(dex.pokemon))
    assert nav.next is None
    assert nav.previous == "mon-39"


async def test_requests_one_item_window(navigation, dex):
    await navigation.resolve(10)
    assert "limit=1&offset=9" in dex.requests[0]
    # window + next cursor + previous cursor
    assert dex.count_requests("/pokemon?") == 3


async def test_single_entry_index(navigation, dex):
    dex.pokemon = {1: dex.pokemon[1]}
    assert await navigation.resolve(1) == Navigation(next=None, previous=None)
    assert len(dex.requests) == 1
