"""
CONTRACT 3: Option Chain

Synthetic option chain with heuristic Greeks.
"""

from pydantic import BaseModel, Field


class OptionLeg(BaseModel):
    """Call or put data at one strike."""

    oi: int = Field(..., ge=0, description="Open interest (contracts)")
    volume: int = Field(..., ge=0)
    iv: float = Field(..., description="Implied volatility in %")
    ltp: float = Field(..., ge=0, description="Last traded premium")
    change: float
    delta: float = Field(..., ge=-1, le=1)
    gamma: float
    theta: float
    vega: float


class OptionChainRow(BaseModel):
    """Call and put legs at one strike."""

    strike: int
    call: OptionLeg
    put: OptionLeg


class OptionChainResponse(BaseModel):
    """
    Option chain for an index.
    Returned by: /options/chain
    """

    symbol: str
    current_price: float
    atm_strike: int
    strike_interval: int
    option_data: list[OptionChainRow]
    timestamp: str
    using_mock_price: bool = False
