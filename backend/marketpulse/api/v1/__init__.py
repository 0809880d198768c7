"""
API v1 Router

All API endpoints for the dashboard frontend.
"""

from fastapi import APIRouter

from marketpulse.api.v1.endpoints import technical, live_chart, options, flows, market, strategy

router = APIRouter()

# Include all endpoint routers
router.include_router(technical.router, tags=["Technical Analysis"])
router.include_router(live_chart.router, tags=["Live Chart"])
router.include_router(options.router, prefix="/options", tags=["Option Chain"])
router.include_router(flows.router, prefix="/flows", tags=["Institutional Flows"])
router.include_router(market.router, prefix="/market", tags=["Market Data"])
router.include_router(strategy.router, prefix="/strategy", tags=["Strategy"])
