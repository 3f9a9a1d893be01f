import logging
from collections.abc import Callable
from datetime import datetime

import httpx
from pydantic import ValidationError

from domain.exceptions.currency import ApiError, NetworkError
from domain.models.currency import RateTable
from infrastructure.cache.rate_cache import utc_now
from infrastructure.providers.schemas import (
    OpenExchangeErrorResponse,
    OpenExchangeResponse,
    build_rate_table,
)

logger = logging.getLogger(__name__)


class OpenExchangeProvider:
    BASE_URL = "https://openexchangerates.org/api"

    def __init__(
        self,
        app_id: str,
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
        base_code: str = "USD",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.app_id = app_id
        self.base_code = base_code
        self._clock = clock
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "openexchange"

    async def _request(self, endpoint: str, params: dict) -> dict:
        params["app_id"] = self.app_id
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            response = await self._client.get(url, params=params)
        except httpx.RequestError as e:
            raise NetworkError(f"OpenExchange request failed: {e.__class__.__name__}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError("Failed to parse response") from e

        # Errors come back as a JSON body alongside the 4xx status
        if isinstance(data, dict) and data.get("error"):
            try:
                error = OpenExchangeErrorResponse.model_validate(data)
                message = error.description or error.message
            except ValidationError:
                message = "Unknown error"
            raise ApiError(f"OpenExchange API error: {message}")

        if response.status_code >= 400:
            raise ApiError(f"OpenExchange HTTP error {response.status_code}: {response.text[:200]}")

        return data

    async def fetch_rates(self, base_code: str) -> RateTable:
        data = await self._request("latest.json", {"base": base_code})

        try:
            payload = OpenExchangeResponse.model_validate(data)
        except ValidationError as e:
            raise ApiError("Failed to parse response") from e

        table = build_rate_table(payload.base or base_code, payload.rates, self._clock(), self.name)
        logger.info(f"Fetched {len(table.rates)} rates from {self.name} for base {table.base_code}")
        return table

    async def close(self) -> None:
        await self._client.aclose()
