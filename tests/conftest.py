"""
Shared fixtures: a controllable clock, an in-memory store, the mock rate source
and a factory for engines wired to them.
"""

from datetime import UTC, datetime, timedelta

import pytest

from application.services import ConversionEngine, HistoryStore, PreferencesStore
from infrastructure.cache.rate_cache import RateCache
from infrastructure.persistence.base import InMemoryKeyValueStore
from infrastructure.providers.mock import MockRateSource


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def rate_source(clock):
    return MockRateSource(clock=clock)


@pytest.fixture
def make_engine(rate_source, store, clock):
    def factory(**overrides) -> ConversionEngine:
        options = {
            "rate_source": rate_source,
            "cache": RateCache(clock=clock),
            "history_store": HistoryStore(store),
            "preferences_store": PreferencesStore(store),
            "debounce_seconds": 0.01,
            "clock": clock,
        }
        options.update(overrides)
        return ConversionEngine(**options)

    return factory


@pytest.fixture
def engine(make_engine):
    return make_engine()
