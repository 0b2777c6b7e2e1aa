from __future__ import annotations

import csv
import datetime as dt
import logging
from pathlib import Path

from app.domain.observation import Observation
from app.domain.price import parse_price
from app.engine.extrema import on_day
from app.repositories.observation_source import ObservationSource, ObservationSourceUnavailable


log = logging.getLogger(__name__)

CSV_HEADER = ("timestamp", "symbol", "price")


class CsvObservationSource(ObservationSource):
    """
    Un fichier CSV par symbole: {storage_path}/{SYMBOL}_values.csv
      timestamp,symbol,price
      1641009600000,BTC,46813.21
    timestamp = millisecondes depuis epoch (UTC).
    """

    def __init__(self, *, storage_path: Path) -> None:
        self._root = storage_path

    def path_for(self, symbol: str) -> Path:
        return self._root / f"{symbol}_values.csv"

    def load(self, symbol: str) -> list[Observation]:
        return self._read_all(symbol)

    def load_for_day(self, symbol: str, day: dt.date) -> list[Observation]:
        return on_day(self._read_all(symbol), day)

    # -------- internals --------
    def _read_all(self, symbol: str) -> list[Observation]:
        path = self.path_for(symbol)
        out: list[Observation] = []
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as f:
                reader = csv.DictReader(f)
                missing = [c for c in CSV_HEADER if c not in (reader.fieldnames or [])]
                if missing:
                    raise ObservationSourceUnavailable(f"{path.name}: missing column(s) {', '.join(missing)}")

                # DictReader saute déjà les lignes vides
                for row in reader:
                    try:
                        out.append(self._from_row(row))
                    except (ValueError, TypeError, OverflowError) as e:
                        raise ObservationSourceUnavailable(
                            f"{path.name}: invalid record at line {reader.line_num}: {e}"
                        ) from e
        except OSError as e:
            raise ObservationSourceUnavailable(f"cannot read price data for '{symbol}': {e}") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise ObservationSourceUnavailable(f"{path.name}: malformed csv: {e}") from e

        log.debug("loaded %d observations from %s", len(out), path)
        return out

    @staticmethod
    def _from_row(row: dict) -> Observation:
        raw_ts = _req_str(row, "timestamp").strip()
        try:
            millis = int(raw_ts)
        except ValueError as exc:
            raise ValueError(f"invalid timestamp {raw_ts!r}") from exc

        return Observation.from_epoch_millis(
            millis,
            symbol=_req_str(row, "symbol").strip(),
            price=parse_price(_req_str(row, "price")),
        )


def _req_str(d: dict, key: str) -> str:
    v = d.get(key)
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"missing/invalid '{key}'")
    return v
