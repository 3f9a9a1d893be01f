import json
import logging
from dataclasses import asdict

from domain.exceptions.currency import StorageError
from domain.models.currency import UserPreferences
from infrastructure.persistence.base import KeyValueStore

logger = logging.getLogger(__name__)

PREFERENCES_KEY = "UserPreferences"


class PreferencesStore:
    def __init__(self, store: KeyValueStore):
        self.store = store

    async def load(self, default: UserPreferences | None = None) -> UserPreferences:
        fallback = default or UserPreferences()
        try:
            data = await self.store.get(PREFERENCES_KEY)
        except StorageError as e:
            logger.error(f"Could not load user preferences: {e}")
            return fallback

        if data is None:
            return fallback

        try:
            return UserPreferences(**json.loads(data))
        except (ValueError, TypeError) as e:
            logger.warning(f"Ignoring undecodable user preferences: {e}")
            return fallback

    async def save(self, preferences: UserPreferences) -> None:
        try:
            await self.store.set(PREFERENCES_KEY, json.dumps(asdict(preferences)).encode("utf-8"))
        except StorageError as e:
            logger.error(f"Could not persist user preferences: {e}")
