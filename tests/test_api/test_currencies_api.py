from fastapi.testclient import TestClient

from api.main import app
from domain.catalog import POPULAR_CODES, default_catalog

client = TestClient(app)


def test_list_all_currencies():
    response = client.get("/api/currencies")

    assert response.status_code == 200
    codes = [c["code"] for c in response.json()["currencies"]]
    assert len(codes) == len(default_catalog)
    assert "PLN" in codes


def test_list_popular_currencies():
    response = client.get("/api/currencies", params={"popular": True})

    codes = [c["code"] for c in response.json()["currencies"]]
    assert codes == list(POPULAR_CODES)


def test_search_matches_name_case_insensitively():
    response = client.get("/api/currencies", params={"query": "zloty"})

    assert response.json()["currencies"] == [{"code": "PLN", "name": "Polish Zloty", "flag": "🇵🇱"}]


def test_blank_search_returns_nothing():
    response = client.get("/api/currencies", params={"query": "  "})

    assert response.json()["currencies"] == []


def test_get_currency_by_code():
    response = client.get("/api/currencies/gbp")

    assert response.status_code == 200
    assert response.json()["name"] == "British Pound Sterling"


def test_unknown_currency_is_404():
    response = client.get("/api/currencies/XYZ")

    assert response.status_code == 404
    assert response.json()["detail"] == "Currency XYZ is not supported"
