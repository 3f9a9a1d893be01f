# nosec B101

from domain.catalog import CurrencyCatalog, default_catalog
from domain.models.currency import Currency


def test_all_currencies_has_at_least_fifty():
    currencies = default_catalog.all_currencies()

    assert len(currencies) >= 50
    codes = {c.code for c in currencies}
    assert {"USD", "EUR", "GBP", "JPY", "PLN"} <= codes


def test_all_currencies_codes_are_unique_three_letter():
    codes = [c.code for c in default_catalog]

    assert len(codes) == len(set(codes))
    assert all(len(code) == 3 and code.isupper() for code in codes)


def test_all_currencies_keeps_insertion_order():
    catalog = CurrencyCatalog([Currency("PLN", "Polish Zloty"), Currency("AUD", "Australian Dollar")])

    assert [c.code for c in catalog.all_currencies()] == ["PLN", "AUD"]


def test_find_by_code():
    currency = default_catalog.find("USD")

    assert currency is not None
    assert currency.code == "USD"
    assert currency.name == "United States Dollar"
    assert currency.flag == "🇺🇸"


def test_find_is_case_sensitive_and_exact():
    assert default_catalog.find("usd") is None
    assert default_catalog.find("INVALID") is None
    assert default_catalog.find("") is None


def test_search_matches_names_case_insensitively():
    results = default_catalog.search("dollar")

    assert results
    assert any(c.code == "USD" for c in results)
    assert all("dollar" in c.name.lower() or "dollar" in c.code.lower() for c in results)


def test_search_matches_codes():
    assert [c.code for c in default_catalog.search("pln")] == ["PLN"]


def test_search_empty_query_returns_nothing():
    assert default_catalog.search("") == []
    assert default_catalog.search("   ") == []


def test_popular_is_curated_subset():
    popular = default_catalog.popular()

    assert [c.code for c in popular][:4] == ["USD", "EUR", "GBP", "JPY"]
    assert all(c in default_catalog.all_currencies() for c in popular)


def test_popular_skips_codes_missing_from_catalog():
    catalog = CurrencyCatalog([Currency("EUR", "Euro")], popular_codes=["USD", "EUR"])

    assert [c.code for c in catalog.popular()] == ["EUR"]


def test_contains_and_len():
    assert "EUR" in default_catalog
    assert "XXX" not in default_catalog
    assert len(default_catalog) == len(default_catalog.all_currencies())
