import logging
from datetime import datetime

from pydantic import BaseModel, Field

from domain.models.currency import RateTable

logger = logging.getLogger(__name__)


class APIErrorInfo(BaseModel):
    code: int
    type: str = ""
    info: str | None = None


class ExchangeRateResponse(BaseModel):
    """Fixer-style payload: ``success`` flag plus either rates or an error block."""

    success: bool
    timestamp: int | None = None
    base: str | None = None
    date: str | None = None
    rates: dict[str, float] | None = None
    error: APIErrorInfo | None = None


class OpenExchangeResponse(BaseModel):
    timestamp: int | None = None
    base: str | None = None
    rates: dict[str, float] = Field(default_factory=dict)


class OpenExchangeErrorResponse(BaseModel):
    error: bool
    status: int
    message: str = ""
    description: str | None = None


def build_rate_table(base_code: str, rates: dict[str, float], fetched_at: datetime,
                     source: str) -> RateTable:
    usable = {}
    for code, value in rates.items():
        if value > 0:
            usable[code] = value
        else:
            logger.warning(f"{source} returned non-positive rate {value} for {code}, dropping it")
    return RateTable(base_code=base_code, rates=usable, fetched_at=fetched_at)
