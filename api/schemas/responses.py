from datetime import datetime

from pydantic import BaseModel, Field

from application.services.formatting import format_rate
from domain.models.currency import Currency, EngineState, HistoryEntry


class CurrencyResponse(BaseModel):
	code: str = Field(..., description='ISO 4217 currency code')
	name: str = Field(..., description='Display name')
	flag: str = Field('', description='Flag or symbol')

	@classmethod
	def from_currency(cls, currency: Currency) -> 'CurrencyResponse':
		return cls(code=currency.code, name=currency.name, flag=currency.flag)


class CurrencyListResponse(BaseModel):
	currencies: list[CurrencyResponse]


class EngineStateResponse(BaseModel):
	from_currency: CurrencyResponse
	to_currency: CurrencyResponse
	amount: float | None = Field(None, description='Amount of the last successful conversion')
	converted_amount: float | None = None
	exchange_rate: float | None = None
	formatted_rate: str | None = None
	is_loading: bool = False
	error_message: str | None = None
	last_updated: datetime | None = None

	@classmethod
	def from_state(cls, state: EngineState) -> 'EngineStateResponse':
		return cls(
			from_currency=CurrencyResponse.from_currency(state.from_currency),
			to_currency=CurrencyResponse.from_currency(state.to_currency),
			amount=state.last_result.from_amount if state.last_result else None,
			converted_amount=state.converted_amount,
			exchange_rate=state.exchange_rate,
			formatted_rate=format_rate(state.exchange_rate) if state.exchange_rate is not None else None,
			is_loading=state.is_loading,
			error_message=state.error_message,
			last_updated=state.last_updated,
		)


class HistoryEntryResponse(BaseModel):
	id: str
	from_currency: str
	to_currency: str
	from_amount: float
	to_amount: float
	rate: float
	timestamp: datetime

	@classmethod
	def from_entry(cls, entry: HistoryEntry) -> 'HistoryEntryResponse':
		return cls(
			id=entry.id,
			from_currency=entry.from_code,
			to_currency=entry.to_code,
			from_amount=entry.from_amount,
			to_amount=entry.to_amount,
			rate=entry.rate,
			timestamp=entry.timestamp,
		)


class HistoryResponse(BaseModel):
	entries: list[HistoryEntryResponse] = Field(description='Most recent first')


class ValidationResponse(BaseModel):
	is_valid: bool
	error_message: str | None = None


class FormattedRateResponse(BaseModel):
	rate: float
	formatted: str


class CachedTableResponse(BaseModel):
	base_code: str
	fetched_at: datetime


class CacheInfoResponse(BaseModel):
	tables: list[CachedTableResponse] = Field(description='Cached tables, including expired ones')
