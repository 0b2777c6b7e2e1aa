from __future__ import annotations

import datetime as dt
from pydantic import BaseModel


class ObservationOut(BaseModel):
    time: dt.datetime
    currency: str
    price: str


class StatisticsOut(BaseModel):
    min: ObservationOut | None = None
    max: ObservationOut | None = None
    oldest: ObservationOut | None = None
    newest: ObservationOut | None = None
