from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from app.db import get_session_factory
from app.settings import Settings, get_settings
from app.repositories.observation_source import ObservationSource
from app.repositories.csv_observation_source import CsvObservationSource
from app.repositories.sql_observation_source import SqlObservationSource
from app.services.observation_store import ObservationStore
from app.services.statistics_service import StatisticsService


@lru_cache
def get_app_settings() -> Settings:
    return get_settings()


def get_observation_source(settings: Settings = Depends(get_app_settings)) -> ObservationSource:
    # If CRYPTOREC_DATABASE_URL is set -> use SQL source (Postgres/SQLite)
    if settings.database_url is not None:
        return SqlObservationSource(session_factory=get_session_factory(settings.database_url))
    return CsvObservationSource(storage_path=settings.storage_path)


def get_statistics_service(
    settings: Settings = Depends(get_app_settings),
    source: ObservationSource = Depends(get_observation_source),
) -> StatisticsService:
    return StatisticsService(symbols=settings.symbols, store=ObservationStore(source))


def valid_currency(currency: str, settings: Settings = Depends(get_app_settings)) -> str:
    """FastAPI dependency: le symbole doit appartenir à l'univers configuré."""
    if currency not in settings.symbols:
        raise HTTPException(status_code=400, detail="Invalid crypto currency symbol")
    return currency
