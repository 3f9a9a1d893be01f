"""
Mock rate source for offline development and tests.
Serves a fixed EUR-based table and can be switched into failure mode.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime

from domain.exceptions.currency import NetworkError
from domain.models.currency import RateTable
from infrastructure.cache.rate_cache import utc_now


class MockRateSource:
    DEFAULT_RATES = {
        "USD": 1.1234,
        "PLN": 4.5678,
        "GBP": 0.8765,
        "JPY": 130.45,
    }

    def __init__(
        self,
        rates: dict[str, float] | None = None,
        base_code: str = "EUR",
        delay: float = 0.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rates = dict(self.DEFAULT_RATES if rates is None else rates)
        self.base_code = base_code
        self.delay = delay
        self.should_fail = False
        self.error: Exception | None = None
        self.fetch_count = 0
        self._clock = clock

    @property
    def name(self) -> str:
        return "mock"

    async def fetch_rates(self, base_code: str) -> RateTable:
        self.fetch_count += 1
        error, should_fail = self.error, self.should_fail
        if self.delay:
            await asyncio.sleep(self.delay)

        if error is not None:
            raise error
        if should_fail:
            raise NetworkError("Mock error")

        return RateTable(base_code=base_code, rates=dict(self.rates), fetched_at=self._clock())

    async def close(self) -> None:
        return None
