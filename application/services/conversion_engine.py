import asyncio
import logging
import math
import uuid
from collections.abc import Callable, Coroutine
from dataclasses import replace
from datetime import datetime, timedelta

from application.services.formatting import format_amount, format_rate, validate_amount
from application.services.history_store import HistoryStore
from application.services.preferences_store import PreferencesStore
from config.settings import Settings
from domain.catalog import CurrencyCatalog, default_catalog
from domain.exceptions.currency import (
    CurrencyException,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    NoDataAvailableError,
    RateNotFoundError,
)
from domain.models.currency import (
    ConversionResult,
    Currency,
    EngineState,
    HistoryEntry,
    UserPreferences,
    ValidationResult,
)
from infrastructure.cache.rate_cache import RateCache, utc_now
from infrastructure.persistence.base import KeyValueStore
from infrastructure.providers.base import RateSource

logger = logging.getLogger(__name__)

StateObserver = Callable[[EngineState], None]

REFERENCE_AMOUNT = 1.0


class ConversionEngine:
    """Owns the converter state and turns amount requests into published results.

    All mutations run on the event loop that calls into the engine, and every
    mutation replaces the immutable EngineState snapshot and notifies
    observers. convert() is debounced: each call cancels the pending execution
    and only the latest amount is converted. Each call also takes a sequence
    number, and results belonging to a superseded request are dropped.

    Rates always come from the rate source's fixed base; cross rates are
    derived by dividing through that base (amount -> base -> target).
    """

    def __init__(
        self,
        rate_source: RateSource,
        cache: RateCache,
        history_store: HistoryStore,
        preferences_store: PreferencesStore,
        catalog: CurrencyCatalog = default_catalog,
        debounce_seconds: float = 0.3,
        history_min_amount: float = 0.01,
        default_preferences: UserPreferences | None = None,
        restore_preferences: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rate_source = rate_source
        self.cache = cache
        self.history_store = history_store
        self.preferences_store = preferences_store
        self.catalog = catalog
        self.debounce_seconds = debounce_seconds
        self.history_min_amount = history_min_amount
        self.restore_preferences = restore_preferences
        self._clock = clock

        self._preferences = default_preferences or UserPreferences()
        self._state = EngineState(
            selected_from=self._currency_or_placeholder(self._preferences.default_from),
            selected_to=self._currency_or_placeholder(self._preferences.default_to),
        )
        self._observers: list[StateObserver] = []
        self._request_seq = 0
        self._pending_amount: float | None = None
        self._debounce_task: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def preferences(self) -> UserPreferences:
        return self._preferences

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for observer in list(self._observers):
            try:
                observer(self._state)
            except Exception:
                logger.exception("State observer raised")

    async def start(self) -> None:
        await self.history_store.load()

        if not self.restore_preferences:
            return

        saved = await self.preferences_store.load(self._preferences)
        from_currency = self.catalog.find(saved.default_from)
        to_currency = self.catalog.find(saved.default_to)
        if from_currency is None or to_currency is None:
            logger.warning(f"Saved preferences reference unknown currencies: {saved}")
            return

        self._preferences = saved
        self._update(selected_from=from_currency, selected_to=to_currency)

    async def wait_idle(self) -> None:
        """Wait for the pending debounced conversion and any in-flight work."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def close(self) -> None:
        if self._debounce_task is not None:
            self._debounce_task.cancel()
            self._debounce_task = None
        await self.wait_idle()
        await self.rate_source.close()

    def set_from_currency(self, currency: Currency | str) -> None:
        self._select(currency, "selected_from")

    def set_to_currency(self, currency: Currency | str) -> None:
        self._select(currency, "selected_to")

    def swap_currencies(self) -> None:
        current = self._state
        self._update(selected_from=current.selected_to, selected_to=current.selected_from)
        self._persist_preferences()
        self.convert(REFERENCE_AMOUNT)

    def _select(self, currency: Currency | str, field_name: str) -> None:
        resolved = self.catalog.find(currency) if isinstance(currency, str) else currency
        if resolved is None:
            self._update(last_error=InvalidCurrencyCodeError())
            return

        pending_amount = self._pending_amount
        had_result = self._state.last_result is not None
        self._update(**{field_name: resolved})
        self._persist_preferences()

        # A request still debouncing or fetching would resolve for the old pair
        if pending_amount is not None:
            self.convert(pending_amount)
        elif had_result:
            self.convert(REFERENCE_AMOUNT)

    def _persist_preferences(self) -> None:
        self._preferences = replace(
            self._preferences,
            default_from=self._state.selected_from.code,
            default_to=self._state.selected_to.code,
        )
        self._spawn(self.preferences_store.save(self._preferences))

    def convert(self, amount: float) -> None:
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            amount = math.nan

        if not math.isfinite(amount) or amount <= 0:
            self._update(last_error=InvalidAmountError())
            return

        self._request_seq += 1
        self._pending_amount = amount
        if self._debounce_task is not None:
            self._debounce_task.cancel()
        self._debounce_task = self._spawn(self._debounced(self._request_seq, amount))

    def refresh_rates(self) -> None:
        self.convert(REFERENCE_AMOUNT)

    def clear_cache(self) -> None:
        self.cache.clear()

    async def _debounced(self, seq: int, amount: float) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Past this point a newer convert() supersedes instead of cancelling
        self._debounce_task = None
        await self._perform_conversion(seq, amount)

    async def _perform_conversion(self, seq: int, amount: float) -> None:
        from_currency = self._state.selected_from
        to_currency = self._state.selected_to
        self._update(is_loading=True, last_error=None)

        try:
            result = await self._compute(amount, from_currency, to_currency)
        except CurrencyException as e:
            failure = e
            logger.warning(f"Conversion {from_currency.code}->{to_currency.code} failed: {e}")
        except Exception:
            failure = CurrencyException()
            logger.exception(f"Unexpected error converting {from_currency.code}->{to_currency.code}")
        else:
            failure = None

        if seq != self._request_seq:
            logger.debug(f"Discarding result of superseded request #{seq}")
            return

        self._pending_amount = None

        if failure is not None:
            self._update(last_result=None, last_error=failure, is_loading=False)
            return

        self._update(last_result=result, last_updated=result.computed_at, is_loading=False)
        logger.info(
            f"Converted {amount} {from_currency.code} -> {result.to_amount} {to_currency.code} "
            f"at {result.rate}"
        )

        if amount >= self.history_min_amount:
            await self.history_store.append(HistoryEntry(
                id=str(uuid.uuid4()),
                from_code=from_currency.code,
                to_code=to_currency.code,
                from_amount=result.from_amount,
                to_amount=result.to_amount,
                rate=result.rate,
                timestamp=result.computed_at,
            ))

    async def _compute(self, amount: float, from_currency: Currency,
                       to_currency: Currency) -> ConversionResult:
        base_code = self.rate_source.base_code
        table = self.cache.get(base_code)
        if table is None:
            table = await self.rate_source.fetch_rates(base_code)
            if not table.rates:
                raise NoDataAvailableError()
            self.cache.put(table)

        from_rate = table.rate_for(from_currency.code)
        to_rate = table.rate_for(to_currency.code)
        if from_rate is None or to_rate is None:
            raise RateNotFoundError()

        amount_in_base = amount / from_rate
        return ConversionResult(
            from_currency=from_currency,
            to_currency=to_currency,
            from_amount=amount,
            to_amount=amount_in_base * to_rate,
            rate=to_rate / from_rate,
            computed_at=self._clock(),
        )

    def history(self) -> list[HistoryEntry]:
        return self.history_store.recent()

    async def clear_history(self) -> None:
        await self.history_store.clear()

    def validate_amount(self, text: str) -> ValidationResult:
        return validate_amount(text)

    def format_rate(self, rate: float) -> str:
        return format_rate(rate)

    def format_amount(self, amount: float, currency: Currency) -> str:
        return format_amount(amount, currency, self._preferences.decimal_places)

    def cache_info(self) -> list[tuple[str, datetime]]:
        return self.cache.cached_bases()

    def _currency_or_placeholder(self, code: str) -> Currency:
        return self.catalog.find(code) or Currency(code=code, name=code)

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


def build_engine(settings: Settings, rate_source: RateSource, store: KeyValueStore,
                 clock: Callable[[], datetime] = utc_now) -> ConversionEngine:
    return ConversionEngine(
        rate_source=rate_source,
        cache=RateCache(validity=timedelta(seconds=settings.CACHE_VALIDITY_SECONDS), clock=clock),
        history_store=HistoryStore(store, limit=settings.HISTORY_LIMIT),
        preferences_store=PreferencesStore(store),
        debounce_seconds=settings.DEBOUNCE_SECONDS,
        history_min_amount=settings.HISTORY_MIN_AMOUNT,
        default_preferences=UserPreferences(default_from=settings.DEFAULT_FROM, default_to=settings.DEFAULT_TO),
        restore_preferences=settings.RESTORE_PREFERENCES,
        clock=clock,
    )
