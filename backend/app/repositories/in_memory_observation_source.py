from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt

from app.domain.observation import Observation
from app.engine.extrema import on_day
from app.repositories.observation_source import ObservationSource


@dataclass
class InMemoryObservationSource(ObservationSource):
    """
    Source en mémoire.
    - Déterministe (ordre d'ajout conservé)
    - Facile à tester
    """
    _items: dict[str, list[Observation]] = field(default_factory=dict)

    def add(self, observation: Observation) -> None:
        self._items.setdefault(observation.symbol, []).append(observation)

    def load(self, symbol: str) -> list[Observation]:
        return list(self._items.get(symbol, []))

    def load_for_day(self, symbol: str, day: dt.date) -> list[Observation]:
        return on_day(self._items.get(symbol, []), day)
