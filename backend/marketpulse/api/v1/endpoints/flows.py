"""
Institutional Flows API Endpoints
"""

from fastapi import APIRouter, Query

from marketpulse.core.config import settings
from marketpulse.core.market_hours import get_ist_now
from marketpulse.schemas.flows import FIIDIIResponse
from marketpulse.services.synthesizer import get_synthesizer_service

router = APIRouter()


@router.get("/fii-dii", response_model=FIIDIIResponse)
async def get_fii_dii_flows(
    days: int = Query(default=settings.fii_dii_days, ge=1, le=30),
):
    """FII and DII cash flows (INR crore) for the last trading days, newest first."""
    service = get_synthesizer_service()
    return await service.generate_flows(get_ist_now(), days)
