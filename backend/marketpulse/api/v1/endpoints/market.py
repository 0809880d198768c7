"""
Market Data API Endpoints

Index quotes, the global market board, market status and index configuration.
"""

from fastapi import APIRouter

from marketpulse.core.market_hours import get_ist_now, get_market_status
from marketpulse.schemas.market import (
    IndexInfo,
    IndicesResponse,
    MarketStatusResponse,
    SeedInfo,
)
from marketpulse.services.data_ingestion import INDICES, get_market_data_service
from marketpulse.services.synthesizer import derive_seed

router = APIRouter()


@router.get("/indices", response_model=IndicesResponse)
async def get_market_indices():
    """
    Latest quotes for the supported indices.

    Each index tries its fallback symbols in order; indices with no
    working symbol are left out.
    """
    service = get_market_data_service()
    return await service.get_indices()


@router.get("/global", response_model=IndicesResponse)
async def get_global_market():
    """
    Global market board: Indian benchmarks and INDIA VIX, US indices,
    NIKKEI 225, gold and silver futures.

    Each entry carries last_updated from the upstream's last trade time;
    symbols that fail are left out.
    """
    service = get_market_data_service()
    return await service.get_global_indices()


@router.get("/status", response_model=MarketStatusResponse)
async def get_status():
    """Current NSE session plus the seed bucket synthetic data is using."""
    now = get_ist_now()
    ctx = derive_seed(now)

    return MarketStatusResponse(
        **get_market_status(now),
        seed=SeedInfo(
            seed=ctx.seed,
            as_of_date=ctx.as_of_date,
            is_market_open=ctx.is_market_open,
            as_of_timestamp=ctx.as_of_timestamp,
        ),
    )


@router.get("/config", response_model=list[IndexInfo])
async def get_index_config():
    """Supported indices and their option strike intervals."""
    return INDICES
