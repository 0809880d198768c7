"""
Option Strategy Payoff

Expiry payoff curves for multi-leg option positions and the quick
two-leg cost calculator.
"""

import math
from typing import Sequence

from marketpulse.schemas.strategy import (
    LegAction,
    OptionType,
    StrategyLeg,
    PayoffPoint,
    PayoffResponse,
    CalculatorRequest,
    CalculatorResponse,
)

CURVE_POINTS = 50
MIN_STEP = 10
GRID_ROUNDING = 100


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def leg_payoff(leg: StrategyLeg, price: float) -> float:
    """Per-unit P&L of one leg at expiry."""
    if leg.type == OptionType.CALL:
        intrinsic = max(0.0, price - leg.strike)
    else:
        intrinsic = max(0.0, leg.strike - price)
    multiplier = 1 if leg.action == LegAction.BUY else -1
    return multiplier * (intrinsic - leg.premium)


def price_grid(stock_price: float, strikes: Sequence[float]) -> list[float]:
    """Evenly spaced underlying prices, padded around the strikes and snapped to 100s."""
    min_strike = min(strikes)
    max_strike = max(strikes)
    spread = (max_strike - min_strike) or stock_price * 0.1
    padding = max(spread * 1.5, stock_price * 0.08)

    start = math.floor((min_strike - padding) / GRID_ROUNDING) * GRID_ROUNDING
    end = math.ceil((max_strike + padding) / GRID_ROUNDING) * GRID_ROUNDING
    step = max(_round_half_up((end - start) / CURVE_POINTS), MIN_STEP)

    return [float(price) for price in range(start, end + 1, step)]


def calculate_payoff_curve(
    stock_price: float,
    legs: Sequence[StrategyLeg],
    lot_size: int = 1,
) -> PayoffResponse:
    """
    Payoff at expiry across a price grid.

    Breakevens are the zero crossings between neighbouring grid points,
    linearly interpolated and rounded to the nearest rupee.
    """
    if not legs:
        return PayoffResponse(points=[], max_profit=None, max_loss=None, breakeven_points=[])

    curve = [
        (price, sum(leg_payoff(leg, price) for leg in legs) * lot_size)
        for price in price_grid(stock_price, [leg.strike for leg in legs])
    ]

    breakevens = []
    for (prev_price, prev_payoff), (price, payoff) in zip(curve, curve[1:]):
        if (prev_payoff < 0 <= payoff) or (payoff < 0 <= prev_payoff):
            exact = prev_price + (price - prev_price) * (0 - prev_payoff) / (payoff - prev_payoff)
            breakevens.append(_round_half_up(exact))

    payoffs = [payoff for _, payoff in curve]
    return PayoffResponse(
        points=[PayoffPoint(price=price, payoff=round(payoff, 2)) for price, payoff in curve],
        max_profit=round(max(payoffs), 2),
        max_loss=round(min(payoffs), 2),
        breakeven_points=breakevens,
    )


def calculate_two_leg_summary(request: CalculatorRequest) -> CalculatorResponse:
    """
    Net cost, max profit/loss and breakeven of a one- or two-leg position.

    A debit (net cost > 0) risks the debit and can make the spread width
    minus the debit; a credit keeps the credit and risks the rest of the
    width. The second leg counts only when both its strike and premium
    are set. Money figures scale with the lot size; the breakeven is a
    price and does not.
    """
    net_cost = request.premium1 if request.action1 == LegAction.BUY else -request.premium1
    if request.strike2 and request.premium2:
        net_cost += request.premium2 if request.action2 == LegAction.BUY else -request.premium2

    spread_width = abs(request.strike2 - request.strike1)

    if net_cost > 0:
        max_loss = net_cost
        max_profit = spread_width - net_cost
    else:
        max_profit = abs(net_cost)
        max_loss = spread_width - abs(net_cost)

    return CalculatorResponse(
        net_cost=round(net_cost * request.lot_size, 2),
        max_profit=round(max_profit * request.lot_size, 2),
        max_loss=round(max_loss * request.lot_size, 2),
        breakeven=round(request.strike1 + net_cost, 2),
        is_credit=net_cost < 0,
    )
