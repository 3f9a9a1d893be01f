from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_engine
from api.schemas import (
	CachedTableResponse,
	CacheInfoResponse,
	ConvertRequest,
	EngineStateResponse,
	FormattedRateResponse,
	HistoryEntryResponse,
	HistoryResponse,
	SelectCurrencyRequest,
	ValidateAmountRequest,
	ValidationResponse,
)
from application.services import ConversionEngine

router = APIRouter(prefix='/api', tags=['converter'])

Engine = Annotated[ConversionEngine, Depends(get_engine)]
Wait = Annotated[bool, Query(description='Block until the debounced conversion has finished')]


async def _respond(engine: ConversionEngine, wait: bool) -> EngineStateResponse:
	if wait:
		await engine.wait_idle()
	return EngineStateResponse.from_state(engine.state)


@router.get('/state', response_model=EngineStateResponse, summary='Current converter state')
async def get_state(engine: Engine) -> EngineStateResponse:
	return EngineStateResponse.from_state(engine.state)


@router.post(
	'/convert',
	response_model=EngineStateResponse,
	status_code=status.HTTP_202_ACCEPTED,
	summary='Request a conversion of the given amount',
)
async def convert(request: ConvertRequest, engine: Engine, wait: Wait = False) -> EngineStateResponse:
	engine.convert(request.amount)
	return await _respond(engine, wait)


@router.put('/currencies/from', response_model=EngineStateResponse, summary='Select source currency')
async def set_from_currency(
	request: SelectCurrencyRequest, engine: Engine, wait: Wait = False
) -> EngineStateResponse:
	engine.set_from_currency(request.code)
	return await _respond(engine, wait)


@router.put('/currencies/to', response_model=EngineStateResponse, summary='Select target currency')
async def set_to_currency(
	request: SelectCurrencyRequest, engine: Engine, wait: Wait = False
) -> EngineStateResponse:
	engine.set_to_currency(request.code)
	return await _respond(engine, wait)


@router.post('/currencies/swap', response_model=EngineStateResponse, summary='Swap currencies')
async def swap_currencies(engine: Engine, wait: Wait = False) -> EngineStateResponse:
	engine.swap_currencies()
	return await _respond(engine, wait)


@router.post('/refresh', response_model=EngineStateResponse, summary='Refresh the displayed rate')
async def refresh_rates(engine: Engine, wait: Wait = False) -> EngineStateResponse:
	engine.refresh_rates()
	return await _respond(engine, wait)


@router.get('/history', response_model=HistoryResponse, summary='Conversion history')
async def get_history(engine: Engine) -> HistoryResponse:
	return HistoryResponse(entries=[HistoryEntryResponse.from_entry(e) for e in engine.history()])


@router.delete('/history', status_code=status.HTTP_204_NO_CONTENT, summary='Clear conversion history')
async def clear_history(engine: Engine) -> None:
	await engine.clear_history()


@router.post('/validate', response_model=ValidationResponse, summary='Validate a typed amount')
async def validate_amount(request: ValidateAmountRequest, engine: Engine) -> ValidationResponse:
	result = engine.validate_amount(request.text)
	return ValidationResponse(is_valid=result.is_valid, error_message=result.error_message)


@router.get('/format/rate', response_model=FormattedRateResponse, summary='Format a rate for display')
async def format_rate(
	rate: Annotated[float, Query(gt=0)], engine: Engine
) -> FormattedRateResponse:
	return FormattedRateResponse(rate=rate, formatted=engine.format_rate(rate))


@router.get('/cache', response_model=CacheInfoResponse, summary='Cached rate tables')
async def get_cache_info(engine: Engine) -> CacheInfoResponse:
	return CacheInfoResponse(tables=[
		CachedTableResponse(base_code=base, fetched_at=fetched_at)
		for base, fetched_at in engine.cache_info()
	])


@router.delete('/cache', status_code=status.HTTP_204_NO_CONTENT, summary='Drop all cached rate tables')
async def clear_cache(engine: Engine) -> None:
	engine.clear_cache()
