"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorRequest (close prices + current price)
    Output: TechnicalAnalysis

RESPONSIBILITIES:
    - Calculate RSI (14, 9), MACD, SMA (20/50/100/200), EMA (20/50)
    - Calculate Bollinger Bands (20, 2)
    - Classify each indicator and score its strength
    - Aggregate into a recommendation

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from marketpulse.services.indicators.interface import IndicatorServiceInterface
from marketpulse.services.indicators.service import (
    IndicatorService,
    compute_indicators,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "compute_indicators",
    "get_indicator_service",
]
