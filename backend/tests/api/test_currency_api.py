from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_app_settings
from app.api.main import app
from app.domain.symbol_universe import SymbolUniverse
from app.settings import Settings


client = TestClient(app)


def write_csv(root: Path, symbol: str, rows: list[tuple[int, str]]) -> None:
    lines = ["timestamp,symbol,price"] + [f"{ts},{symbol},{price}" for ts, price in rows]
    (root / f"{symbol}_values.csv").write_text("\n".join(lines) + "\n", encoding="utf-8")


# 2022-01-01 04:00 / 08:00 UTC
JAN1_04 = 1641009600000
JAN1_08 = 1641024000000
# 2022-01-02 04:00 UTC
JAN2_04 = 1641096000000


@pytest.fixture
def storage(tmp_path: Path):
    write_csv(tmp_path, "BTC", [(JAN1_04, "2"), (JAN1_08, "10")])
    write_csv(tmp_path, "ETH", [(JAN1_04, "1"), (JAN1_08, "10"), (JAN2_04, "4")])
    write_csv(tmp_path, "LTC", [(JAN1_04, "3"), (JAN1_08, "10")])

    settings = Settings(storage_path=tmp_path, symbols=SymbolUniverse.parse("BTC,ETH,LTC"))
    app.dependency_overrides[get_app_settings] = lambda: settings
    yield tmp_path
    app.dependency_overrides.clear()


def test_get_statistics(storage):
    r = client.get("/currency/BTC/statistics")
    assert r.status_code == 200, r.text
    body = r.json()

    assert body["min"]["price"] == "2"
    assert body["min"]["currency"] == "BTC"
    assert body["max"]["price"] == "10"
    assert body["oldest"]["time"].startswith("2022-01-01T04:00:00")
    assert body["newest"]["time"].startswith("2022-01-01T08:00:00")


def test_get_statistics_for_day_without_data(storage):
    r = client.get("/currency/BTC/statistics", params={"day": "2022-01-02"})
    assert r.status_code == 200, r.text
    assert r.json() == {"min": None, "max": None, "oldest": None, "newest": None}


def test_get_statistics_for_day_with_data(storage):
    r = client.get("/currency/ETH/statistics", params={"day": "2022-01-01"})
    assert r.status_code == 200, r.text
    body = r.json()

    assert body["min"]["price"] == "1"
    assert body["max"]["price"] == "10"
    assert body["oldest"]["time"].startswith("2022-01-01T04:00:00")
    # l'observation du 2 janvier est exclue
    assert body["newest"]["time"].startswith("2022-01-01T08:00:00")


def test_get_statistics_invalid_symbol(storage):
    r = client.get("/currency/NOT_A_CURRENCY/statistics")
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid crypto currency symbol"


def test_sorted_by_normalized_range(storage):
    r = client.get("/currency/sorted-by-normalized-range")
    assert r.status_code == 200, r.text
    # ETH sur toute la période: min 1, max 10
    assert r.json() == ["ETH", "BTC", "LTC"]


def test_highest_normalized_range_for_date(storage):
    r = client.get("/currency/highest-normalized-range/2022-01-01")
    assert r.status_code == 200, r.text
    assert r.text == "ETH"
    assert r.headers["content-type"].startswith("text/plain")


def test_highest_normalized_range_for_date_not_found(storage):
    r = client.get("/currency/highest-normalized-range/2023-01-01")
    assert r.status_code == 404


def test_highest_normalized_range_invalid_date(storage):
    r = client.get("/currency/highest-normalized-range/not-a-date")
    assert r.status_code == 422


def test_source_unavailable_is_500(storage):
    (storage / "LTC_values.csv").unlink()

    r = client.get("/currency/sorted-by-normalized-range")
    assert r.status_code == 500
    assert r.json()["detail"] == "Price data unavailable"


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
