"""
CONTRACT 1: Market Data

Input: SymbolRequest
Output: LiveChartResponse / SyntheticMarket / IndicesResponse

Intraday bars and derived option series, either normalized from the
upstream provider or produced by the seeded synthesizer.
"""

from typing import Optional
from pydantic import BaseModel, Field

from marketpulse.schemas.options import OptionChainRow


# =============================================================================
# INPUT: SymbolRequest
# =============================================================================


class SymbolRequest(BaseModel):
    """
    Request for index data.
    Sent by: Frontend
    Received by: Market data / indicator / option endpoints
    """

    symbol: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Upstream ticker (e.g., '^NSEI', '^NSEBANK')",
    )
    strike_interval: int = Field(
        default=50,
        gt=0,
        description="Option strike spacing for this index",
    )


# =============================================================================
# OUTPUT: Intraday Components
# =============================================================================


class IntradayBar(BaseModel):
    """Single 5-minute candle (IST)."""

    time: str = Field(..., description="IST wall-clock label HH:MM")
    timestamp: int = Field(..., description="Epoch seconds")
    open: float
    high: float
    low: float
    close: float
    volume: int = Field(..., ge=0)


class OptionPremiumPoint(BaseModel):
    """ATM call/put premium aligned with an intraday bar."""

    time: str
    timestamp: int
    call_premium: float = Field(..., ge=0)
    put_premium: float = Field(..., ge=0)


class IVSmilePoint(BaseModel):
    """Implied volatility at one strike."""

    strike: int
    call_iv: float
    put_iv: float


class SynthesisRequest(BaseModel):
    """
    Parameters for a synthetic snapshot.
    Sent by: Market data service when upstream data is missing
    Received by: Synthesizer
    """

    current_price: float
    strike_interval: int = Field(..., description="Non-positive values yield empty strike series")
    seed: str
    as_of_date: str = Field(..., description="Effective trading date YYYY-MM-DD")


class SyntheticMarket(BaseModel):
    """
    Complete synthetic snapshot.
    Returned by: Synthesizer
    Consumed by: Live chart / option chain endpoints
    """

    atm_strike: int
    intraday_bars: list[IntradayBar]
    option_premium_series: list[OptionPremiumPoint]
    iv_smile: list[IVSmilePoint]
    option_chain: list[OptionChainRow]


class LiveChartResponse(BaseModel):
    """Intraday chart payload for one index."""

    symbol: str
    current_price: float
    change: float
    change_percent: float
    atm_strike: int
    previous_close: float
    day_high: float
    day_low: float
    is_market_open: bool
    intraday_price_data: list[IntradayBar]
    option_premium_data: list[OptionPremiumPoint]
    iv_smile_data: list[IVSmilePoint]
    timestamp: str = Field(..., description="As-of time; frozen at close when market is shut")
    using_mock_data: bool = False


# =============================================================================
# OUTPUT: Index quotes
# =============================================================================


class QuoteSource(BaseModel):
    """Display name and primary upstream symbol for a quoted instrument."""

    name: str
    symbol: str


class IndexInfo(QuoteSource):
    """Configured index with its option strike spacing."""

    strike_interval: int


class MarketIndex(BaseModel):
    """Latest quote for an index, global benchmark or commodity."""

    name: str
    symbol: str = Field(..., description="Upstream symbol that answered")
    value: float
    change: float
    change_percent: float
    last_updated: Optional[str] = Field(None, description="ISO 8601 time of the last trade")


class IndicesResponse(BaseModel):
    indices: list[MarketIndex]


class SeedInfo(BaseModel):
    """Seed bucket currently used for synthetic data."""

    seed: str
    as_of_date: str
    is_market_open: bool
    as_of_timestamp: str


class MarketStatusResponse(BaseModel):
    is_open: bool
    session: str
    is_holiday: bool
    is_weekend: bool
    current_time_ist: str
    current_date: str
    next_open: Optional[str] = None
    seed: SeedInfo
