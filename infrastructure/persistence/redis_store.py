import logging

from redis import asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import StorageError

logger = logging.getLogger(__name__)

_transient = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
    retry=retry_if_exception_type((RedisConnectionError, RedisTimeoutError)),
    reraise=True,
)


class RedisKeyValueStore:
    def __init__(self, redis_client: redis.Redis, prefix: str = "converter:"):
        self.redis = redis_client
        self.prefix = prefix

    def _make_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @_transient
    async def _get(self, key: str):
        return await self.redis.get(self._make_key(key))

    @_transient
    async def _set(self, key: str, value: bytes) -> None:
        await self.redis.set(self._make_key(key), value)

    async def get(self, key: str) -> bytes | None:
        try:
            data = await self._get(key)
        except RedisError as e:
            raise StorageError(f"Redis read failed for {key}: {e}") from e

        if data is None:
            return None
        return data.encode("utf-8") if isinstance(data, str) else data

    async def set(self, key: str, value: bytes) -> None:
        try:
            await self._set(key, value)
        except RedisError as e:
            raise StorageError(f"Redis write failed for {key}: {e}") from e
        logger.debug(f"Stored {len(value)} bytes under {self._make_key(key)}")

    async def close(self) -> None:
        await self.redis.aclose()
