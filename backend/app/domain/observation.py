from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


@dataclass(frozen=True, slots=True)
class Observation:
    timestamp: dt.datetime     # UTC timestamp
    symbol: str
    price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, dt.datetime):
            raise ValueError("observation.timestamp must be a datetime")
        if self.timestamp.tzinfo is None:
            raise ValueError("observation.timestamp must be timezone-aware (UTC)")
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise ValueError("observation.symbol must be non-empty")
        if not isinstance(self.price, Decimal):
            raise ValueError("observation.price must be a Decimal")

    @property
    def day(self) -> dt.date:
        """Jour calendaire UTC de l'observation."""
        return self.timestamp.astimezone(dt.timezone.utc).date()

    @classmethod
    def from_epoch_millis(cls, millis: int, symbol: str, price: Decimal) -> "Observation":
        ts = _EPOCH + dt.timedelta(milliseconds=millis)
        return cls(timestamp=ts, symbol=symbol, price=price)
