from typing import Protocol, runtime_checkable

from domain.models.currency import RateTable


@runtime_checkable
class RateSource(Protocol):
    """Anything that can produce a rate table for the base currency it serves.

    Implementations raise NetworkError on transport failures and ApiError when
    the provider rejects the request or answers with something undecodable.
    """

    base_code: str

    @property
    def name(self) -> str:
        ...

    async def fetch_rates(self, base_code: str) -> RateTable:
        ...

    async def close(self) -> None:
        ...
