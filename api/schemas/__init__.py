from .requests import ConvertRequest, SelectCurrencyRequest, ValidateAmountRequest
from .responses import (
	CachedTableResponse,
	CacheInfoResponse,
	CurrencyListResponse,
	CurrencyResponse,
	EngineStateResponse,
	FormattedRateResponse,
	HistoryEntryResponse,
	HistoryResponse,
	ValidationResponse,
)

__all__ = [
	'ConvertRequest',
	'SelectCurrencyRequest',
	'ValidateAmountRequest',
	'CachedTableResponse',
	'CacheInfoResponse',
	'CurrencyListResponse',
	'CurrencyResponse',
	'EngineStateResponse',
	'FormattedRateResponse',
	'HistoryEntryResponse',
	'HistoryResponse',
	'ValidationResponse',
]
