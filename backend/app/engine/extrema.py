from __future__ import annotations

import datetime as dt
from typing import Iterable, Sequence

from app.domain.observation import Observation


# min()/max() gardent le premier élément rencontré en cas d'égalité:
# le résultat dépend donc uniquement de l'ordre de la source.

def find_minimum(observations: Sequence[Observation]) -> Observation | None:
    return min(observations, key=lambda o: o.price, default=None)


def find_maximum(observations: Sequence[Observation]) -> Observation | None:
    return max(observations, key=lambda o: o.price, default=None)


def find_oldest(observations: Sequence[Observation]) -> Observation | None:
    return min(observations, key=lambda o: o.timestamp, default=None)


def find_newest(observations: Sequence[Observation]) -> Observation | None:
    return max(observations, key=lambda o: o.timestamp, default=None)


def on_day(observations: Iterable[Observation], day: dt.date) -> list[Observation]:
    """Observations dont la date UTC vaut `day`."""
    return [o for o in observations if o.day == day]
