from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod

from app.domain.observation import Observation


class ObservationSourceUnavailable(RuntimeError):
    """Les données d'un symbole ne peuvent pas être lues ou parsées."""


class ObservationSource(ABC):
    @abstractmethod
    def load(self, symbol: str) -> list[Observation]: ...

    @abstractmethod
    def load_for_day(self, symbol: str, day: dt.date) -> list[Observation]: ...
