"""
Market Data Service Interface

Defines the contract for the upstream-or-synthetic data layer.
"""

from abc import abstractmethod
from datetime import datetime

from marketpulse.services.base import BaseService
from marketpulse.schemas.market import SymbolRequest, LiveChartResponse, IndicesResponse
from marketpulse.schemas.options import OptionChainResponse
from marketpulse.schemas.indicators import TechnicalDataResponse


class MarketDataServiceInterface(BaseService[SymbolRequest, LiveChartResponse]):
    """
    Market Data Service Contract.

    INPUT: SymbolRequest
        - symbol: Upstream ticker
        - strike_interval: Option strike spacing

    OUTPUT: LiveChartResponse
        - Real intraday bars when the upstream answers
        - Seeded synthetic bars otherwise (using_mock_data=True)

    Every method that depends on the clock takes the instant as an argument.
    """

    @property
    def name(self) -> str:
        return "MarketDataService"

    @abstractmethod
    async def execute(self, input_data: SymbolRequest) -> LiveChartResponse:
        """Live chart for the current instant."""
        pass

    @abstractmethod
    async def get_live_chart(
        self, request: SymbolRequest, now: datetime
    ) -> LiveChartResponse:
        """Intraday bars, ATM premium series and IV smile."""
        pass

    @abstractmethod
    async def get_technical_data(self, request: SymbolRequest) -> TechnicalDataResponse:
        """
        Indicator battery over upstream closes.

        Raises:
            ExternalAPIError: Upstream unavailable
            NoDataError: Upstream returned no closes
        """
        pass

    @abstractmethod
    async def get_option_chain(
        self, request: SymbolRequest, now: datetime
    ) -> OptionChainResponse:
        """Synthetic chain around the upstream (or fallback) price."""
        pass

    @abstractmethod
    async def get_indices(self) -> IndicesResponse:
        """Quotes for the configured indices; failed indices are omitted."""
        pass

    @abstractmethod
    async def get_global_indices(self) -> IndicesResponse:
        """Global benchmarks and commodities with their last trade time."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass
