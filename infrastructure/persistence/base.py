from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Byte-oriented key-value storage. Implementations raise StorageError."""

    async def get(self, key: str) -> bytes | None:
        ...

    async def set(self, key: str, value: bytes) -> None:
        ...

    async def close(self) -> None:
        ...


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, bytes] | None = None):
        self.data: dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self.data[key] = value

    async def close(self) -> None:
        return None
