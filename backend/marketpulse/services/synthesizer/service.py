"""
Market Synthesizer Service Implementation

Produces a self-consistent synthetic snapshot when upstream data is
unavailable or incomplete.
"""

import logging
from datetime import datetime
from typing import Optional

from marketpulse.core.config import settings
from marketpulse.schemas.market import SynthesisRequest, SyntheticMarket
from marketpulse.schemas.flows import FIIDIIResponse
from marketpulse.services.base import ValidationError
from marketpulse.services.synthesizer.interface import SynthesizerServiceInterface
from marketpulse.services.synthesizer.generators import (
    calculate_atm_strike,
    generate_intraday_bars,
    generate_option_premium_series,
    generate_iv_smile,
)
from marketpulse.services.synthesizer.option_chain import generate_option_chain
from marketpulse.services.synthesizer.flows import generate_fii_dii_flows

logger = logging.getLogger(__name__)


def synthesize_market(
    current_price: float,
    strike_interval: int,
    seed: str,
    as_of_date: str,
    num_strikes: int = 21,
) -> SyntheticMarket:
    """
    Build bars, premium series, IV smile and option chain for one seed.

    Deterministic: the same arguments always produce the same snapshot.
    """
    atm_strike = calculate_atm_strike(current_price, strike_interval)
    bars = generate_intraday_bars(current_price, seed, as_of_date)

    return SyntheticMarket(
        atm_strike=atm_strike,
        intraday_bars=bars,
        option_premium_series=generate_option_premium_series(bars, atm_strike, seed),
        iv_smile=generate_iv_smile(atm_strike, strike_interval, seed),
        option_chain=generate_option_chain(
            current_price, strike_interval, seed, as_of_date, num_strikes
        ),
    )


class SynthesizerService(SynthesizerServiceInterface):
    """
    Market Synthesizer Service.

    Wraps the pure generators; holds no state between calls.
    """

    @property
    def name(self) -> str:
        return "SynthesizerService"

    async def validate_input(self, input_data: SynthesisRequest) -> SynthesisRequest:
        """Bars are anchored to as_of_date, so it must be a real YYYY-MM-DD date."""
        try:
            datetime.strptime(input_data.as_of_date, "%Y-%m-%d")
        except ValueError:
            raise ValidationError(
                self.name,
                f"Invalid as_of_date: {input_data.as_of_date!r}",
                {"as_of_date": input_data.as_of_date},
            )
        return input_data

    async def execute(self, input_data: SynthesisRequest) -> SyntheticMarket:
        """Generate a full synthetic snapshot."""
        input_data = await self.validate_input(input_data)
        logger.debug(
            f"Synthesizing market around {input_data.current_price:.2f} "
            f"(interval {input_data.strike_interval}, seed {input_data.seed})"
        )
        return synthesize_market(
            current_price=input_data.current_price,
            strike_interval=input_data.strike_interval,
            seed=input_data.seed,
            as_of_date=input_data.as_of_date,
            num_strikes=settings.option_chain_strikes,
        )

    async def generate_flows(self, instant: datetime, days: int = 10) -> FIIDIIResponse:
        """Generate FII/DII flows for the trading days before `instant`."""
        return generate_fii_dii_flows(instant, days)

    async def health_check(self) -> bool:
        """Synthesizer is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[SynthesizerService] = None


def get_synthesizer_service() -> SynthesizerService:
    """Get or create synthesizer service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SynthesizerService()
    return _service_instance
