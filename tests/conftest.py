"""Shared fixtures: an in-memory PokeAPI served through respx."""

from __future__ import annotations

import pytest
import respx

from dex_aggregator.aggregator import Aggregator
from dex_aggregator.config import AppConfig

from fakes import FakeDex


@pytest.fixture
def dex():
    return FakeDex(count=40)


@pytest.fixture
def api(dex):
    with respx.mock(assert_all_called=False) as mock:
        yield mock.route(host="pokeapi.co").mock(side_effect=dex.handle)


@pytest.fixture
def config():
    return AppConfig(random_seed=7)


@pytest.fixture
async def aggregator(api, config):
    agg = Aggregator(config)
    yield agg
    await agg.close()
