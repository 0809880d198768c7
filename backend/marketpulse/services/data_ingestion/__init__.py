"""
Market Data Service

CONTRACT:
    Input:  SymbolRequest (symbol, strike_interval)
    Output: LiveChartResponse / TechnicalDataResponse / OptionChainResponse

RESPONSIBILITIES:
    - Fetch intraday bars, closes and quotes from Yahoo Finance
    - Fall back to the seeded synthesizer on failure or gaps
    - Try fallback symbols per index
    - Quote the global market board (US, Asia, commodities)

Pure data fetching and normalization.
"""

from marketpulse.services.data_ingestion.interface import MarketDataServiceInterface
from marketpulse.services.data_ingestion.service import (
    MarketDataService,
    get_market_data_service,
)
from marketpulse.services.data_ingestion.indices import INDICES, GLOBAL_INDICES

__all__ = [
    "MarketDataServiceInterface",
    "MarketDataService",
    "get_market_data_service",
    "INDICES",
    "GLOBAL_INDICES",
]
