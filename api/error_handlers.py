import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import CurrencyException, InvalidCurrencyCodeError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidCurrencyCodeError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyCodeError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(CurrencyException)
	async def currency_error_handler(request: Request, exc: CurrencyException):
		logger.warning(f'Currency error: {exc}')
		return JSONResponse(status_code=400, content={'detail': str(exc)})
