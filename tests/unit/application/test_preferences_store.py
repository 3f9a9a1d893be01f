# nosec B101

import json
from unittest.mock import AsyncMock

import pytest

from application.services.preferences_store import PREFERENCES_KEY, PreferencesStore
from domain.exceptions.currency import StorageError
from domain.models.currency import UserPreferences
from infrastructure.persistence.base import InMemoryKeyValueStore


def test_default_preferences():
    preferences = UserPreferences()

    assert preferences.default_from == "EUR"
    assert preferences.default_to == "PLN"
    assert preferences.decimal_places == 2
    assert preferences.auto_refresh_interval == 300


@pytest.mark.asyncio
async def test_save_then_load():
    store = InMemoryKeyValueStore()
    prefs_store = PreferencesStore(store)

    await prefs_store.save(UserPreferences(default_from="USD", default_to="JPY", decimal_places=3))
    loaded = await prefs_store.load()

    assert loaded == UserPreferences(default_from="USD", default_to="JPY", decimal_places=3)
    assert json.loads(store.data[PREFERENCES_KEY])["default_to"] == "JPY"


@pytest.mark.asyncio
async def test_load_missing_returns_given_default():
    fallback = UserPreferences(default_from="GBP")

    assert await PreferencesStore(InMemoryKeyValueStore()).load(fallback) == fallback


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [b"not json", b'{"unknown_field": 1}', b"[1, 2]"])
async def test_load_undecodable_returns_default(payload):
    store = InMemoryKeyValueStore({PREFERENCES_KEY: payload})

    assert await PreferencesStore(store).load() == UserPreferences()


@pytest.mark.asyncio
async def test_storage_errors_fall_back_and_do_not_raise():
    store = AsyncMock()
    store.get.side_effect = StorageError("redis down")
    store.set.side_effect = StorageError("redis down")
    prefs_store = PreferencesStore(store)

    await prefs_store.save(UserPreferences())
    assert await prefs_store.load() == UserPreferences()
