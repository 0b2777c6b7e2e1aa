from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from app.domain.observation import Observation
from app.domain.price import normalize_price
from app.repositories.observation_source import ObservationSource, ObservationSourceUnavailable


log = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class PriceObservationRow(Base):
    __tablename__ = "price_observations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    symbol: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    observed_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(24, 10), nullable=False)


class SqlObservationSource(ObservationSource):
    """
    Table remplie de l'extérieur: ce repo ne fait que des SELECT.
    Ordre de lecture = ordre d'insertion (id).
    """

    def __init__(self, *, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def load(self, symbol: str) -> list[Observation]:
        stmt = (
            select(PriceObservationRow)
            .where(PriceObservationRow.symbol == symbol)
            .order_by(PriceObservationRow.id)
        )
        return self._fetch(stmt, symbol)

    def load_for_day(self, symbol: str, day: dt.date) -> list[Observation]:
        start = dt.datetime.combine(day, dt.time.min, tzinfo=dt.timezone.utc)
        end = start + dt.timedelta(days=1)
        stmt = (
            select(PriceObservationRow)
            .where(PriceObservationRow.symbol == symbol)
            .where(PriceObservationRow.observed_at >= start)
            .where(PriceObservationRow.observed_at < end)
            .order_by(PriceObservationRow.id)
        )
        return self._fetch(stmt, symbol)

    # -------- internals --------
    def _fetch(self, stmt, symbol: str) -> list[Observation]:
        try:
            with self._session_factory() as s:
                rows = s.execute(stmt).scalars().all()
                out = [self._to_domain(r) for r in rows]
        except SQLAlchemyError as e:
            raise ObservationSourceUnavailable(f"cannot read price data for '{symbol}': {e}") from e
        except (ValueError, TypeError) as e:
            raise ObservationSourceUnavailable(f"price_observations: invalid row for '{symbol}': {e}") from e

        log.debug("loaded %d observations for %s from database", len(out), symbol)
        return out

    @staticmethod
    def _to_domain(r: PriceObservationRow) -> Observation:
        observed_at = r.observed_at
        if observed_at.tzinfo is None:
            # sqlite renvoie des datetimes naïfs: on suppose UTC
            observed_at = observed_at.replace(tzinfo=dt.timezone.utc)

        return Observation(
            timestamp=observed_at,
            symbol=r.symbol,
            price=normalize_price(Decimal(r.price)),
        )
