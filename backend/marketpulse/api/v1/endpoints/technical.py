"""
Technical Analysis API Endpoints

Indicator battery and recommendation over upstream 15-minute closes.
"""

import logging

from fastapi import APIRouter, HTTPException

from marketpulse.schemas.market import SymbolRequest
from marketpulse.schemas.indicators import TechnicalDataResponse
from marketpulse.services.base import ServiceError
from marketpulse.services.data_ingestion import get_market_data_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/technical", response_model=TechnicalDataResponse)
async def get_technical_data(request: SymbolRequest):
    """
    Calculate technical indicators for an index.

    Uses 60 days of 15-minute closes with the live price as the latest
    close. Indicators:
    - RSI (14), RSI (9)
    - MACD (12, 26, 9)
    - SMA (20, 50, 100, 200), EMA (20, 50)
    - Bollinger Bands (20, 2)
    """
    service = get_market_data_service()

    try:
        return await service.get_technical_data(request)
    except ServiceError as e:
        logger.error(f"Technical data failed for {request.symbol}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
