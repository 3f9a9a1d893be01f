import logging
from collections.abc import Callable
from datetime import datetime

import httpx
from pydantic import ValidationError

from domain.exceptions.currency import ApiError, NetworkError
from domain.models.currency import RateTable
from infrastructure.cache.rate_cache import utc_now
from infrastructure.providers.schemas import ExchangeRateResponse, build_rate_table

logger = logging.getLogger(__name__)


class FixerIOProvider:
	"""Fixer.io latest-rates client. The free plan only serves EUR as base."""

	BASE_URL = 'http://data.fixer.io/api'

	def __init__(
		self,
		api_key: str,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		base_url: str | None = None,
		base_code: str = 'EUR',
		clock: Callable[[], datetime] = utc_now,
	):
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.base_code = base_code
		self._clock = clock
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'fixerio'

	async def _request(self, endpoint: str, params: dict) -> dict:
		params['access_key'] = self.api_key
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			raise ApiError(
				f'Fixer.io HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise NetworkError(f'Fixer.io request failed: {e.__class__.__name__}') from e

		try:
			return response.json()
		except ValueError as e:
			raise ApiError('Failed to parse response') from e

	async def fetch_rates(self, base_code: str) -> RateTable:
		data = await self._request('latest', {'base': base_code})

		try:
			payload = ExchangeRateResponse.model_validate(data)
		except ValidationError as e:
			raise ApiError('Failed to parse response') from e

		if not payload.success:
			info = 'API request failed'
			if payload.error is not None:
				info = payload.error.info or payload.error.type or info
			raise ApiError(info)

		if payload.rates is None:
			raise ApiError('Response contained no rates')

		table = build_rate_table(payload.base or base_code, payload.rates, self._clock(), self.name)
		logger.info(f'Fetched {len(table.rates)} rates from {self.name} for base {table.base_code}')
		return table

	async def close(self) -> None:
		await self._client.aclose()
