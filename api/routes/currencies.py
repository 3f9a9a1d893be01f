from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from api.dependencies import get_catalog
from api.schemas import CurrencyListResponse, CurrencyResponse
from domain.catalog import CurrencyCatalog
from domain.exceptions.currency import InvalidCurrencyCodeError

router = APIRouter(prefix='/api/currencies', tags=['currencies'])

Catalog = Annotated[CurrencyCatalog, Depends(get_catalog)]


@router.get('', response_model=CurrencyListResponse, summary='List or search supported currencies')
async def list_currencies(
	catalog: Catalog,
	query: Annotated[str | None, Query(description='Substring of code or name')] = None,
	popular: Annotated[bool, Query(description='Only the curated popular subset')] = False,
) -> CurrencyListResponse:
	if popular:
		currencies = catalog.popular()
	elif query is not None:
		currencies = catalog.search(query)
	else:
		currencies = catalog.all_currencies()
	return CurrencyListResponse(currencies=[CurrencyResponse.from_currency(c) for c in currencies])


@router.get('/{code}', response_model=CurrencyResponse, summary='Look up a currency by code')
async def get_currency(
	code: Annotated[str, Path(min_length=3, max_length=5)],
	catalog: Catalog,
) -> CurrencyResponse:
	currency = catalog.find(code.upper())
	if currency is None:
		raise InvalidCurrencyCodeError(f'Currency {code} is not supported')
	return CurrencyResponse.from_currency(currency)
