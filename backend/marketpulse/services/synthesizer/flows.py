"""
Synthetic FII / DII Flows

Per-day institutional flow figures seeded by the trading date, so a
given day always reports the same numbers.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from marketpulse.core.market_hours import is_trading_day, to_ist
from marketpulse.schemas.flows import FIIFlow, DIIFlow, FIIDIIResponse
from marketpulse.services.synthesizer.prng import mulberry32, date_seed

logger = logging.getLogger(__name__)

MAX_LOOKBACK_DAYS = 90

# (min, max) in INR crore. FIIs lean net sellers, DIIs net buyers.
FII_INDEX_RANGE = (-3500, 1500)
FII_DEBT_RANGE = (-600, 900)
FII_HYBRID_RANGE = (-250, 350)
DII_EQUITY_RANGE = (1500, 4500)
DII_DEBT_RANGE = (-600, 1800)
DII_HYBRID_RANGE = (-300, 700)


def _generate_value(random: Callable[[], float], bounds: tuple[int, int]) -> float:
    low, high = bounds
    return round(low + random() * (high - low), 2)


def generate_fii_dii_flows(instant: datetime, days: int = 10) -> FIIDIIResponse:
    """
    Flows for the last `days` trading days up to and including the IST
    date of `instant`, most recent first. Weekends and NSE holidays are
    skipped.
    """
    today = to_ist(instant).date()
    logger.info(f"Generating {days} trading days of FII/DII flows from {today.isoformat()}")

    fii_data: list[FIIFlow] = []
    dii_data: list[DIIFlow] = []

    days_back = 0
    while len(fii_data) < days and days_back < MAX_LOOKBACK_DAYS:
        day = today - timedelta(days=days_back)
        days_back += 1

        if not is_trading_day(day):
            continue

        random = mulberry32(date_seed(day.isoformat()))
        label = day.strftime("%d %b %Y")

        # Draw order is fixed: changing it changes every historical day
        fii_data.append(
            FIIFlow(
                date=label,
                index=_generate_value(random, FII_INDEX_RANGE),
                debt=_generate_value(random, FII_DEBT_RANGE),
                hybrid=_generate_value(random, FII_HYBRID_RANGE),
            )
        )
        dii_data.append(
            DIIFlow(
                date=label,
                equity=_generate_value(random, DII_EQUITY_RANGE),
                debt=_generate_value(random, DII_DEBT_RANGE),
                hybrid=_generate_value(random, DII_HYBRID_RANGE),
            )
        )

    return FIIDIIResponse(fii_data=fii_data, dii_data=dii_data)
