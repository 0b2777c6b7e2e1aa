from __future__ import annotations

import datetime as dt

from app.domain.observation import Observation
from app.engine.extrema import find_maximum, find_minimum, find_newest, find_oldest
from app.repositories.observation_source import ObservationSource


class ObservationStore:
    """
    Extrêmes d'un symbole, calculés à chaque appel (pas de cache).
    `day` restreint au jour calendaire UTC. Les erreurs de la source remontent telles quelles.
    """

    def __init__(self, source: ObservationSource) -> None:
        self._source = source

    def minimum(self, symbol: str, day: dt.date | None = None) -> Observation | None:
        return find_minimum(self._observations(symbol, day))

    def maximum(self, symbol: str, day: dt.date | None = None) -> Observation | None:
        return find_maximum(self._observations(symbol, day))

    def oldest(self, symbol: str, day: dt.date | None = None) -> Observation | None:
        return find_oldest(self._observations(symbol, day))

    def newest(self, symbol: str, day: dt.date | None = None) -> Observation | None:
        return find_newest(self._observations(symbol, day))

    def _observations(self, symbol: str, day: dt.date | None) -> list[Observation]:
        if day is None:
            return self._source.load(symbol)
        return self._source.load_for_day(symbol, day)
