from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from app.domain.symbol_universe import SymbolUniverse


DEFAULT_SYMBOLS = "BTC,DOGE,ETH,LTC,XRP"

# app/settings.py -> app/ -> backend/
_BACKEND_DIR = Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class Settings:
    storage_path: Path
    symbols: SymbolUniverse
    database_url: str | None = None


def _resolve_storage_path(raw: str | None) -> Path:
    if raw and raw.strip():
        p = Path(raw.strip()).expanduser()
        if not p.is_absolute():
            p = _BACKEND_DIR / p
        return p
    # default: backend/data/prices
    return _BACKEND_DIR / "data" / "prices"


def get_settings() -> Settings:
    # lecture seule: on ne crée pas le dossier, les fichiers sont fournis de l'extérieur
    storage_path = _resolve_storage_path(os.getenv("CRYPTOREC_STORAGE_PATH"))

    raw_symbols = os.getenv("CRYPTOREC_SYMBOLS")
    if not raw_symbols or not raw_symbols.strip():
        raw_symbols = DEFAULT_SYMBOLS
    symbols = SymbolUniverse.parse(raw_symbols)

    db_url = os.getenv("CRYPTOREC_DATABASE_URL")
    database_url = db_url.strip() if db_url and db_url.strip() else None

    return Settings(storage_path=storage_path, symbols=symbols, database_url=database_url)
