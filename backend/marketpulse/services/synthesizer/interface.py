"""
Market Synthesizer Service Interface

Defines the contract for the synthetic market data layer.
"""

from abc import abstractmethod
from datetime import datetime

from marketpulse.services.base import BaseService
from marketpulse.schemas.market import SynthesisRequest, SyntheticMarket
from marketpulse.schemas.flows import FIIDIIResponse


class SynthesizerServiceInterface(BaseService[SynthesisRequest, SyntheticMarket]):
    """
    Market Synthesizer Contract.

    INPUT: SynthesisRequest
        - current_price: Price estimate to scatter bars around
        - strike_interval: Strike spacing
        - seed / as_of_date: Seed bucket from derive_seed()

    OUTPUT: SyntheticMarket
        - 78 intraday bars, premium series, IV smile, 21-strike chain
        - Identical inputs give identical output
    """

    @property
    def name(self) -> str:
        return "SynthesizerService"

    @abstractmethod
    async def execute(self, input_data: SynthesisRequest) -> SyntheticMarket:
        """Generate a full synthetic snapshot."""
        pass

    @abstractmethod
    async def generate_flows(self, instant: datetime, days: int = 10) -> FIIDIIResponse:
        """Generate FII/DII flows for the trading days before `instant`."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Synthesizer is always healthy (pure computation)."""
        pass
