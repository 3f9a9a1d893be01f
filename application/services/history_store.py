import json
import logging
from datetime import datetime

from domain.exceptions.currency import StorageError
from domain.models.currency import HistoryEntry
from infrastructure.persistence.base import KeyValueStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "ConversionHistory"


def _entry_to_dict(entry: HistoryEntry) -> dict:
    return {
        "id": entry.id,
        "from_code": entry.from_code,
        "to_code": entry.to_code,
        "from_amount": entry.from_amount,
        "to_amount": entry.to_amount,
        "rate": entry.rate,
        "timestamp": entry.timestamp.isoformat(),
    }


def _entry_from_dict(data: dict) -> HistoryEntry:
    return HistoryEntry(
        id=data["id"],
        from_code=data["from_code"],
        to_code=data["to_code"],
        from_amount=float(data["from_amount"]),
        to_amount=float(data["to_amount"]),
        rate=float(data["rate"]),
        timestamp=datetime.fromisoformat(data["timestamp"]),
    )


class HistoryStore:
    """Append-only conversion log, capped with FIFO eviction.

    The whole log is written back to the store after every mutation. Storage
    failures are logged and never propagate to the caller.
    """

    def __init__(self, store: KeyValueStore, limit: int = 50):
        self.store = store
        self.limit = limit
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def recent(self) -> list[HistoryEntry]:
        return list(reversed(self._entries))

    async def load(self) -> list[HistoryEntry]:
        try:
            data = await self.store.get(HISTORY_KEY)
        except StorageError as e:
            logger.error(f"Could not load conversion history: {e}")
            return self.entries()

        if data is None:
            return self.entries()

        try:
            loaded = [_entry_from_dict(item) for item in json.loads(data)]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding undecodable conversion history: {e}")
            loaded = []

        self._entries = loaded[-self.limit:] if self.limit else []
        logger.info(f"Restored {len(self._entries)} history entries")
        return self.entries()

    async def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)
        overflow = len(self._entries) - self.limit
        if overflow > 0:
            del self._entries[:overflow]
        await self.save()

    async def clear(self) -> None:
        self._entries.clear()
        await self.save()

    async def save(self) -> None:
        payload = json.dumps([_entry_to_dict(e) for e in self._entries]).encode("utf-8")
        try:
            await self.store.set(HISTORY_KEY, payload)
        except StorageError as e:
            logger.error(f"Could not persist conversion history: {e}")
