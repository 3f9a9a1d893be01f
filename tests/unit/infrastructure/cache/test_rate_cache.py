# nosec B101

from datetime import timedelta

from domain.models.currency import RateTable
from infrastructure.cache.rate_cache import RateCache


def make_table(clock, base="EUR", rates=None):
    return RateTable(base_code=base, rates=rates or {"USD": 1.1234, "PLN": 4.5678}, fetched_at=clock())


# ============================================================================
# TEST: get() - freshness
# ============================================================================

def test_get_within_window_returns_same_table(clock):
    cache = RateCache(clock=clock)
    table = make_table(clock)
    cache.put(table)

    clock.advance(299)

    assert cache.get("EUR") is table


def test_get_at_window_boundary_is_absent(clock):
    cache = RateCache(clock=clock)
    cache.put(make_table(clock))

    clock.advance(300)

    assert cache.get("EUR") is None


def test_get_unknown_base_is_absent(clock):
    cache = RateCache(clock=clock)
    cache.put(make_table(clock))

    assert cache.get("USD") is None


def test_expired_entry_is_not_purged(clock):
    cache = RateCache(clock=clock)
    cache.put(make_table(clock))

    clock.advance(600)
    assert cache.get("EUR") is None

    assert [base for base, _ in cache.cached_bases()] == ["EUR"]


def test_custom_validity_window(clock):
    cache = RateCache(validity=timedelta(seconds=10), clock=clock)
    cache.put(make_table(clock))

    clock.advance(9)
    assert cache.get("EUR") is not None
    clock.advance(1)
    assert cache.get("EUR") is None


def test_default_validity_is_five_minutes():
    assert RateCache().validity == timedelta(minutes=5)


# ============================================================================
# TEST: put() / clear()
# ============================================================================

def test_put_overwrites_existing_base(clock):
    cache = RateCache(clock=clock)
    cache.put(make_table(clock, rates={"USD": 1.0}))
    clock.advance(400)
    fresh = make_table(clock, rates={"USD": 1.2})

    cache.put(fresh)

    assert cache.get("EUR") is fresh
    assert len(cache.cached_bases()) == 1


def test_tables_are_keyed_by_base(clock):
    cache = RateCache(clock=clock)
    eur = make_table(clock, base="EUR")
    usd = make_table(clock, base="USD", rates={"EUR": 0.89})
    cache.put(eur)
    cache.put(usd)

    assert cache.get("EUR") is eur
    assert cache.get("USD") is usd


def test_clear_removes_everything(clock):
    cache = RateCache(clock=clock)
    cache.put(make_table(clock, base="EUR"))
    cache.put(make_table(clock, base="USD"))

    cache.clear()

    assert cache.get("EUR") is None
    assert cache.cached_bases() == []
