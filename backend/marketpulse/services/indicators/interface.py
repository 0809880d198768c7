"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from marketpulse.services.base import BaseService
from marketpulse.schemas.indicators import (
    IndicatorRequest,
    TechnicalAnalysis,
    TechnicalDataResponse,
)


class IndicatorServiceInterface(BaseService[IndicatorRequest, TechnicalAnalysis]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorRequest
        - prices: Chronological close prices
        - current_price: Live price used for signal comparisons

    OUTPUT: TechnicalAnalysis
        - indicators: Fixed battery (RSI, MACD, SMA/EMA, Bollinger)
        - recommendation: Aggregate action and confidence
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: IndicatorRequest) -> TechnicalAnalysis:
        """Calculate the indicator battery for one price series."""
        pass

    @abstractmethod
    async def analyze(
        self,
        symbol: str,
        prices: Sequence[float],
        current_price: float,
        previous_close: Optional[float],
        strike_interval: int,
    ) -> TechnicalDataResponse:
        """
        Full technical payload for a symbol.

        Args:
            symbol: Upstream ticker
            prices: Close prices, last one already the live price
            current_price: Live price
            previous_close: Previous session close (optional)
            strike_interval: Strike spacing for the ATM strike

        Returns:
            Indicators, recommendation and price change
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
