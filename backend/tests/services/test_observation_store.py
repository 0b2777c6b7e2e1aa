import datetime as dt
from decimal import Decimal

import pytest

from app.domain.observation import Observation
from app.repositories.in_memory_observation_source import InMemoryObservationSource
from app.repositories.observation_source import ObservationSource, ObservationSourceUnavailable
from app.services.observation_store import ObservationStore


def obs(day: int, hour: int, price: str, symbol: str = "BTC") -> Observation:
    return Observation(
        timestamp=dt.datetime(2022, 1, day, hour, tzinfo=dt.timezone.utc),
        symbol=symbol,
        price=Decimal(price),
    )


def make_store(*items: Observation) -> ObservationStore:
    source = InMemoryObservationSource()
    for o in items:
        source.add(o)
    return ObservationStore(source)


def test_unfiltered_extrema():
    store = make_store(obs(1, 4, "46813.21"), obs(18, 9, "33276.59"), obs(31, 20, "38415.79"), obs(1, 10, "47722.66"))

    assert store.minimum("BTC").price == Decimal("33276.59")
    assert store.maximum("BTC").price == Decimal("47722.66")
    assert store.oldest("BTC").timestamp == dt.datetime(2022, 1, 1, 4, tzinfo=dt.timezone.utc)
    assert store.newest("BTC").timestamp == dt.datetime(2022, 1, 31, 20, tzinfo=dt.timezone.utc)


def test_day_filtered_extrema():
    store = make_store(obs(1, 4, "46813.21"), obs(1, 7, "46979.61"), obs(1, 10, "47143.98"), obs(2, 4, "10"))
    day = dt.date(2022, 1, 1)

    assert store.minimum("BTC", day).price == Decimal("46813.21")
    assert store.maximum("BTC", day).price == Decimal("47143.98")
    assert store.oldest("BTC", day).timestamp.hour == 4
    assert store.newest("BTC", day).timestamp.hour == 10


def test_no_data_is_none_not_error():
    store = make_store(obs(1, 4, "1"))

    assert store.minimum("ETH") is None
    assert store.maximum("BTC", dt.date(2022, 1, 5)) is None
    assert store.oldest("BTC", dt.date(2022, 1, 5)) is None
    assert store.newest("ETH") is None


class _BrokenSource(ObservationSource):
    def load(self, symbol):
        raise ObservationSourceUnavailable("boom")

    def load_for_day(self, symbol, day):
        raise ObservationSourceUnavailable("boom")


def test_source_errors_propagate():
    store = ObservationStore(_BrokenSource())
    with pytest.raises(ObservationSourceUnavailable):
        store.minimum("BTC")
    with pytest.raises(ObservationSourceUnavailable):
        store.newest("BTC", dt.date(2022, 1, 1))
