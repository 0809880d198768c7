"""
CONTRACT 2: Indicator Engine

Input: IndicatorRequest (close prices + current price)
Output: TechnicalAnalysis

This module performs ALL mathematical calculations.
Pure Python/NumPy - no fabricated values.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalType(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"
    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"


class RecommendationAction(str, Enum):
    STRONG_BULLISH = "Strong Bullish"
    BULLISH = "Bullish"
    NEUTRAL = "Neutral"
    BEARISH = "Bearish"
    STRONG_BEARISH = "Strong Bearish"


class IndicatorCategory(str, Enum):
    MOMENTUM = "Momentum"
    TREND = "Trend"
    MOVING_AVERAGE = "Moving Average"
    VOLATILITY = "Volatility"


# =============================================================================
# INPUT: IndicatorRequest
# =============================================================================


class IndicatorRequest(BaseModel):
    """
    Request for indicator calculation.
    Sent by: Technical endpoint
    Received by: Indicator Service
    """

    prices: list[float] = Field(..., description="Chronological close prices")
    current_price: float = Field(..., description="Live price used for signals")


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class Indicator(BaseModel):
    """One indicator reading with its signal."""

    category: IndicatorCategory
    name: str
    value: str = Field(..., description="Formatted value, 2 decimals")
    signal: SignalType
    strength: float = Field(..., ge=0, le=100)


class Recommendation(BaseModel):
    """Aggregate over an indicator batch."""

    action: RecommendationAction
    confidence: int = Field(..., ge=0, le=100)
    bullish_count: int = Field(..., ge=0)
    bearish_count: int = Field(..., ge=0)
    neutral_count: int = Field(
        ..., ge=0, description="Neutral + Overbought + Oversold"
    )


class TechnicalAnalysis(BaseModel):
    """Indicator batch plus recommendation."""

    indicators: list[Indicator]
    recommendation: Recommendation


# =============================================================================
# OUTPUT: TechnicalDataResponse (Complete Response)
# =============================================================================


class TechnicalDataResponse(BaseModel):
    """
    Complete technical analysis for an index.
    Returned by: Indicator Service
    Consumed by: Frontend technical page
    """

    symbol: str
    current_price: float
    change: float
    change_percent: float
    atm_strike: int
    candles: int = Field(..., ge=0, description="Number of close prices used")
    indicators: list[Indicator]
    recommendation: Recommendation
    timestamp: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "^NSEI",
                "current_price": 25612.4,
                "change": -152.6,
                "change_percent": -0.59,
                "atm_strike": 25600,
                "candles": 1500,
                "indicators": [
                    {
                        "category": "Momentum",
                        "name": "RSI (14)",
                        "value": "41.27",
                        "signal": "Bearish",
                        "strength": 17.46,
                    }
                ],
                "recommendation": {
                    "action": "Bearish",
                    "confidence": 60,
                    "bullish_count": 2,
                    "bearish_count": 6,
                    "neutral_count": 2,
                },
            }
        }
