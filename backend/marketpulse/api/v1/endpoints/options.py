"""
Option Chain API Endpoints
"""

from fastapi import APIRouter

from marketpulse.core.market_hours import get_ist_now
from marketpulse.schemas.market import SymbolRequest
from marketpulse.schemas.options import OptionChainResponse
from marketpulse.services.data_ingestion import get_market_data_service

router = APIRouter()


@router.post("/chain", response_model=OptionChainResponse)
async def get_option_chain(request: SymbolRequest):
    """
    Synthetic 21-strike option chain around the live index price.

    OI, volume, IV, premiums and Greeks are heuristic and stable within
    a 5-minute block.
    """
    service = get_market_data_service()
    return await service.get_option_chain(request, get_ist_now())
