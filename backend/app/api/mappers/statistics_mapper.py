from __future__ import annotations

from app.api.schemas.statistics import ObservationOut, StatisticsOut
from app.domain.observation import Observation
from app.domain.statistics import SymbolStatistics


def observation_to_out(o: Observation | None) -> ObservationOut | None:
    if o is None:
        return None
    return ObservationOut(time=o.timestamp, currency=o.symbol, price=str(o.price))


def statistics_to_out(stats: SymbolStatistics) -> StatisticsOut:
    return StatisticsOut(
        min=observation_to_out(stats.minimum),
        max=observation_to_out(stats.maximum),
        oldest=observation_to_out(stats.oldest),
        newest=observation_to_out(stats.newest),
    )
