"""
Option Strategy Service

CONTRACT:
    Input:  PayoffRequest / CalculatorRequest
    Output: PayoffResponse / CalculatorResponse

RESPONSIBILITIES:
    - Expiry payoff curve for up to 8 legs
    - Max profit, max loss and breakeven points
    - Two-leg cost calculator

Pure arithmetic; no market data.
"""

from marketpulse.services.strategy.payoff import (
    calculate_payoff_curve,
    calculate_two_leg_summary,
)

__all__ = [
    "calculate_payoff_curve",
    "calculate_two_leg_summary",
]
