"""
CONTRACT 5: Option Strategy Payoff

Input: PayoffRequest / CalculatorRequest
Output: PayoffResponse / CalculatorResponse
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class LegAction(str, Enum):
    BUY = "Buy"
    SELL = "Sell"


class OptionType(str, Enum):
    CALL = "Call"
    PUT = "Put"


class StrategyLeg(BaseModel):
    action: LegAction
    type: OptionType
    strike: float = Field(..., gt=0)
    premium: float = Field(..., ge=0)


class PayoffRequest(BaseModel):
    stock_price: float = Field(..., gt=0)
    legs: list[StrategyLeg] = Field(..., max_length=8)
    lot_size: int = Field(default=1, ge=1)


class PayoffPoint(BaseModel):
    price: float
    payoff: float


class PayoffResponse(BaseModel):
    points: list[PayoffPoint]
    max_profit: Optional[float] = None
    max_loss: Optional[float] = None
    breakeven_points: list[int]


class CalculatorRequest(BaseModel):
    """Up to two legs; the second leg is ignored when strike or premium is 0."""

    action1: LegAction = LegAction.BUY
    strike1: float = Field(default=0, ge=0)
    premium1: float = Field(default=0, ge=0)
    action2: LegAction = LegAction.SELL
    strike2: float = Field(default=0, ge=0)
    premium2: float = Field(default=0, ge=0)
    lot_size: int = Field(default=1, ge=1)


class CalculatorResponse(BaseModel):
    net_cost: float
    max_profit: float
    max_loss: float
    breakeven: float
    is_credit: bool
