"""
Indicator Engine Service Implementation

Calculates the indicator battery from close prices.
Pure Python/NumPy calculations; never fabricates values.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from marketpulse.core.market_hours import IST
from marketpulse.schemas.indicators import (
    IndicatorRequest,
    Indicator,
    IndicatorCategory,
    TechnicalAnalysis,
    TechnicalDataResponse,
)
from marketpulse.services.base import NoDataError
from marketpulse.services.indicators.interface import IndicatorServiceInterface
from marketpulse.services.indicators.calculations import (
    calculate_rsi,
    calculate_macd,
    calculate_sma,
    calculate_ema,
    calculate_bollinger_bands,
)
from marketpulse.services.indicators.signals import (
    classify_rsi,
    rsi_strength,
    classify_macd,
    macd_strength,
    classify_moving_average,
    moving_average_strength,
    classify_bollinger,
    bollinger_strength,
    build_recommendation,
)
from marketpulse.services.synthesizer.generators import calculate_atm_strike

logger = logging.getLogger(__name__)

RSI_PERIODS = (14, 9)
SMA_PERIODS = (20, 50, 100, 200)
EMA_PERIODS = (20, 50)


def _rsi_indicator(prices: Sequence[float], period: int) -> Indicator:
    value = calculate_rsi(prices, period)
    return Indicator(
        category=IndicatorCategory.MOMENTUM,
        name=f"RSI ({period})",
        value=f"{value:.2f}",
        signal=classify_rsi(value),
        strength=rsi_strength(value),
    )


def _moving_average_indicator(name: str, average: float, current_price: float) -> Indicator:
    return Indicator(
        category=IndicatorCategory.MOVING_AVERAGE,
        name=name,
        value=f"{average:.2f}",
        signal=classify_moving_average(current_price, average),
        strength=moving_average_strength(current_price, average),
    )


def compute_indicators(prices: Sequence[float], current_price: float) -> TechnicalAnalysis:
    """
    Compute the fixed indicator battery and the aggregate recommendation.

    Raises:
        NoDataError: If the price series is empty
    """
    if len(prices) == 0:
        raise NoDataError("IndicatorService", "No price data available")

    indicators = [_rsi_indicator(prices, period) for period in RSI_PERIODS]

    macd = calculate_macd(prices)
    indicators.append(
        Indicator(
            category=IndicatorCategory.TREND,
            name="MACD",
            value=f"{macd.value:.2f} / {macd.signal:.2f}",
            signal=classify_macd(macd.histogram),
            strength=macd_strength(macd.histogram),
        )
    )

    for period in SMA_PERIODS:
        indicators.append(
            _moving_average_indicator(
                f"SMA ({period})", calculate_sma(prices, period), current_price
            )
        )
    for period in EMA_PERIODS:
        indicators.append(
            _moving_average_indicator(
                f"EMA ({period})", calculate_ema(prices, period), current_price
            )
        )

    bands = calculate_bollinger_bands(prices)
    indicators.append(
        Indicator(
            category=IndicatorCategory.VOLATILITY,
            name="Bollinger Bands",
            value=f"{bands.upper:.2f} / {bands.lower:.2f}",
            signal=classify_bollinger(current_price, bands.upper, bands.lower),
            strength=bollinger_strength(current_price, bands.upper, bands.lower),
        )
    )

    return TechnicalAnalysis(
        indicators=indicators,
        recommendation=build_recommendation(indicators),
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates technical indicators for market analysis.
    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: IndicatorRequest) -> TechnicalAnalysis:
        """Calculate the indicator battery for one price series."""
        return compute_indicators(input_data.prices, input_data.current_price)

    async def analyze(
        self,
        symbol: str,
        prices: Sequence[float],
        current_price: float,
        previous_close: Optional[float],
        strike_interval: int,
    ) -> TechnicalDataResponse:
        """Full technical payload for a symbol."""
        analysis = compute_indicators(prices, current_price)

        if not previous_close:
            previous_close = prices[-2] if len(prices) > 1 else current_price
        change = current_price - previous_close
        change_percent = (change / previous_close) * 100 if previous_close else 0.0

        rsi_values = {i.name: i.value for i in analysis.indicators if i.name.startswith("RSI")}
        logger.info(
            f"{symbol}: {len(prices)} candles, {rsi_values}, "
            f"recommendation {analysis.recommendation.action.value}"
        )

        return TechnicalDataResponse(
            symbol=symbol,
            current_price=current_price,
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            atm_strike=calculate_atm_strike(current_price, strike_interval),
            candles=len(prices),
            indicators=analysis.indicators,
            recommendation=analysis.recommendation,
            timestamp=datetime.now(IST),
        )

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
