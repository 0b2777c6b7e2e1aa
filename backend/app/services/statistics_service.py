from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal

from app.domain.statistics import SymbolStatistics
from app.domain.symbol_universe import SymbolUniverse
from app.engine.normalized_range import normalized_range
from app.services.observation_store import ObservationStore


log = logging.getLogger(__name__)


class StatisticsService:
    def __init__(self, *, symbols: SymbolUniverse, store: ObservationStore) -> None:
        self._symbols = symbols
        self._store = store

    def get_statistics(self, symbol: str, day: dt.date | None = None) -> SymbolStatistics:
        """
        Chaque champ est calculé indépendamment: l'absence de l'un ne bloque pas les autres.
        Le symbole est supposé déjà validé par l'appelant.
        """
        return SymbolStatistics(
            minimum=self._store.minimum(symbol, day),
            maximum=self._store.maximum(symbol, day),
            oldest=self._store.oldest(symbol, day),
            newest=self._store.newest(symbol, day),
        )

    def normalized_range(self, symbol: str, day: dt.date | None = None) -> Decimal | None:
        return normalized_range(
            minimum=self._store.minimum(symbol, day),
            maximum=self._store.maximum(symbol, day),
        )

    def rank_symbols_by_normalized_range(self) -> list[str]:
        """
        Symboles triés par normalized range décroissant.
        Symboles sans range défini exclus. Égalités: ordre de configuration (tri stable).
        """
        ranges = self._defined_ranges(day=None)
        ranked = sorted(ranges, key=lambda item: item[1], reverse=True)
        return [symbol for symbol, _ in ranked]

    def top_symbol_for_day(self, day: dt.date) -> str | None:
        """
        Symbole au plus grand normalized range sur le jour UTC `day`.
        Égalités: le premier dans l'ordre de configuration gagne. None si aucun range défini.
        """
        best: tuple[str, Decimal] | None = None
        for symbol, value in self._defined_ranges(day=day):
            if best is None or value > best[1]:
                best = (symbol, value)

        if best is None:
            log.info("no normalized range available for %s", day.isoformat())
            return None
        return best[0]

    def _defined_ranges(self, *, day: dt.date | None) -> list[tuple[str, Decimal]]:
        out: list[tuple[str, Decimal]] = []
        for symbol in self._symbols:
            value = self.normalized_range(symbol, day)
            if value is None:
                continue
            out.append((symbol, value))
        return out
