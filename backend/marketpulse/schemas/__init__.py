"""
MarketPulse Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from marketpulse.schemas.market import (
    SymbolRequest,
    IntradayBar,
    OptionPremiumPoint,
    IVSmilePoint,
    SyntheticMarket,
    LiveChartResponse,
    MarketIndex,
    IndicesResponse,
)
from marketpulse.schemas.options import (
    OptionLeg,
    OptionChainRow,
    OptionChainResponse,
)
from marketpulse.schemas.indicators import (
    IndicatorRequest,
    Indicator,
    Recommendation,
    TechnicalAnalysis,
    TechnicalDataResponse,
)
from marketpulse.schemas.flows import (
    FIIFlow,
    DIIFlow,
    FIIDIIResponse,
)
from marketpulse.schemas.strategy import (
    StrategyLeg,
    PayoffRequest,
    PayoffResponse,
)

__all__ = [
    # Market
    "SymbolRequest",
    "IntradayBar",
    "OptionPremiumPoint",
    "IVSmilePoint",
    "SyntheticMarket",
    "LiveChartResponse",
    "MarketIndex",
    "IndicesResponse",
    # Options
    "OptionLeg",
    "OptionChainRow",
    "OptionChainResponse",
    # Indicators
    "IndicatorRequest",
    "Indicator",
    "Recommendation",
    "TechnicalAnalysis",
    "TechnicalDataResponse",
    # Flows
    "FIIFlow",
    "DIIFlow",
    "FIIDIIResponse",
    # Strategy
    "StrategyLeg",
    "PayoffRequest",
    "PayoffResponse",
]
