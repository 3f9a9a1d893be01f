from redis import asyncio as redis

from config.settings import Settings

from .base import InMemoryKeyValueStore, KeyValueStore
from .database import Database
from .redis_store import RedisKeyValueStore
from .sql_store import SQLKeyValueStore

__all__ = [
	'Database',
	'InMemoryKeyValueStore',
	'KeyValueStore',
	'RedisKeyValueStore',
	'SQLKeyValueStore',
	'create_store',
]


async def create_store(settings: Settings) -> KeyValueStore:
	if settings.STORAGE_BACKEND == 'redis':
		return RedisKeyValueStore(redis.Redis.from_url(settings.REDIS_URL))
	if settings.STORAGE_BACKEND == 'sqlite':
		database = Database(settings.DATABASE_URL)
		await database.create_tables()
		return SQLKeyValueStore(database)
	return InMemoryKeyValueStore()
