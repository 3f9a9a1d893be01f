import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from domain.models.currency import RateTable

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class RateCache:
    """In-process rate tables keyed by base currency.

    Freshness is checked when a table is read; expired tables stay in place
    until the next put for the same base overwrites them.
    """

    def __init__(self, validity: timedelta = timedelta(minutes=5),
                 clock: Callable[[], datetime] = utc_now):
        self.validity = validity
        self._clock = clock
        self._tables: dict[str, RateTable] = {}

    def get(self, base_code: str) -> RateTable | None:
        table = self._tables.get(base_code)
        if table is None:
            logger.debug(f"Rate cache MISS for {base_code}")
            return None

        age = self._clock() - table.fetched_at
        if age >= self.validity:
            logger.debug(f"Rate cache EXPIRED for {base_code} (age {age.total_seconds():.0f}s)")
            return None

        logger.debug(f"Rate cache HIT for {base_code}")
        return table

    def put(self, table: RateTable) -> None:
        self._tables[table.base_code] = table

    def clear(self) -> None:
        self._tables.clear()

    def cached_bases(self) -> list[tuple[str, datetime]]:
        return [(base, table.fetched_at) for base, table in self._tables.items()]
