from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from app.api.deps import get_statistics_service, valid_currency
from app.api.mappers.statistics_mapper import statistics_to_out
from app.api.schemas.statistics import StatisticsOut
from app.repositories.observation_source import ObservationSourceUnavailable
from app.services.statistics_service import StatisticsService


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/currency", tags=["Currency API"])


@router.get(
    "/{currency}/statistics",
    response_model=StatisticsOut,
    summary="Find currency statistics by currency symbol",
    responses={400: {"description": "Invalid crypto currency symbol"}},
)
def get_currency_statistics(
    currency: str = Depends(valid_currency),
    day: dt.date | None = Query(default=None, description="UTC day (YYYY-MM-DD), default: all data"),
    service: StatisticsService = Depends(get_statistics_service),
) -> StatisticsOut:
    try:
        stats = service.get_statistics(currency, day)
    except ObservationSourceUnavailable as e:
        logger.exception("Failed to compute statistics for %s: %s", currency, e)
        raise HTTPException(status_code=500, detail="Price data unavailable")
    return statistics_to_out(stats)


@router.get(
    "/sorted-by-normalized-range",
    response_model=list[str],
    summary="Find currencies sorted descending by normalized range",
)
def get_currencies_sorted_by_normalized_range(
    service: StatisticsService = Depends(get_statistics_service),
) -> list[str]:
    try:
        return service.rank_symbols_by_normalized_range()
    except ObservationSourceUnavailable as e:
        logger.exception("Failed to rank currencies: %s", e)
        raise HTTPException(status_code=500, detail="Price data unavailable")


@router.get(
    "/highest-normalized-range/{date}",
    response_class=PlainTextResponse,
    summary="Find currency with highest normalized range for selected day",
    responses={404: {"description": "No currency with highest normalized range found for selected day"}},
)
def get_currency_with_highest_normalized_range(
    date: dt.date,
    service: StatisticsService = Depends(get_statistics_service),
) -> PlainTextResponse:
    try:
        symbol = service.top_symbol_for_day(date)
    except ObservationSourceUnavailable as e:
        logger.exception("Failed to compute highest normalized range for %s: %s", date, e)
        raise HTTPException(status_code=500, detail="Price data unavailable")

    if symbol is None:
        raise HTTPException(status_code=404, detail="No currency found for selected day")
    return PlainTextResponse(symbol)
