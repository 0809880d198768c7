"""
Strategy API Endpoints

Option strategy payoff curves and the two-leg calculator.
"""

from fastapi import APIRouter

from marketpulse.schemas.strategy import (
    PayoffRequest,
    PayoffResponse,
    CalculatorRequest,
    CalculatorResponse,
)
from marketpulse.services.strategy import calculate_payoff_curve, calculate_two_leg_summary

router = APIRouter()


@router.post("/payoff", response_model=PayoffResponse)
async def get_payoff(request: PayoffRequest):
    """Expiry payoff across a price grid, with max profit/loss and breakevens."""
    return calculate_payoff_curve(request.stock_price, request.legs, request.lot_size)


@router.post("/calculator", response_model=CalculatorResponse)
async def calculate_strategy(request: CalculatorRequest):
    """Net cost, max profit, max loss and breakeven for up to two legs."""
    return calculate_two_leg_summary(request)
