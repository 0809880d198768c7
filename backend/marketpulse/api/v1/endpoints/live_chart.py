"""
Live Chart API Endpoints
"""

from fastapi import APIRouter

from marketpulse.core.market_hours import get_ist_now
from marketpulse.schemas.market import SymbolRequest, LiveChartResponse
from marketpulse.services.data_ingestion import get_market_data_service

router = APIRouter()


@router.post("/live-chart", response_model=LiveChartResponse)
async def get_live_chart(request: SymbolRequest):
    """
    Intraday 5-minute chart with ATM option premiums and the IV smile.

    Never fails on upstream errors: synthetic bars are served instead and
    flagged with using_mock_data. Outside market hours the response is
    frozen at the last session's close.
    """
    service = get_market_data_service()
    return await service.get_live_chart(request, get_ist_now())
