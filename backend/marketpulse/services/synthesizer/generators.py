"""
Synthetic Series Generators

Intraday bars, ATM option premium series and the IV smile.
Every value is a pure function of (seed, index); no value depends on its
neighbours, so a series can be regenerated piecewise.
"""

import math
from datetime import datetime, timedelta

from marketpulse.schemas.market import IntradayBar, OptionPremiumPoint, IVSmilePoint
from marketpulse.services.synthesizer.prng import seeded_random
from marketpulse.services.synthesizer.seed import IST_FIXED

# 5-minute bars from 09:15 IST; the last bar is stamped 15:40
BARS_PER_SESSION = 78
BAR_MINUTES = 5

IV_SMILE_HALF_WIDTH = 1000
IV_BASE = 18.0


def calculate_atm_strike(price: float, strike_interval: int) -> int:
    """Nearest strike to price; ties round up."""
    if strike_interval <= 0:
        return int(math.floor(price + 0.5))
    return int(math.floor(price / strike_interval + 0.5) * strike_interval)


def session_start(as_of_date: str) -> datetime:
    """09:15 IST on the given YYYY-MM-DD date."""
    day = datetime.strptime(as_of_date, "%Y-%m-%d")
    return IST_FIXED.localize(day.replace(hour=9, minute=15))


def generate_intraday_bars(
    base_price: float,
    seed: str,
    as_of_date: str,
    count: int = BARS_PER_SESSION,
) -> list[IntradayBar]:
    """Generate one session of 5-minute bars scattered around base_price."""
    start = session_start(as_of_date)
    bars = []

    for i in range(count):
        bar_time = start + timedelta(minutes=i * BAR_MINUTES)
        close = base_price + (seeded_random(seed + "intraday", i) - 0.5) * 100

        bars.append(
            IntradayBar(
                time=bar_time.strftime("%H:%M"),
                timestamp=int(bar_time.timestamp()),
                open=round(close - 20, 2),
                high=round(close + 30, 2),
                low=round(close - 40, 2),
                close=round(close, 2),
                volume=math.floor(seeded_random(seed + "volume", i) * 10_000_000),
            )
        )

    return bars


def generate_option_premium_series(
    bars: list[IntradayBar], atm_strike: int, seed: str
) -> list[OptionPremiumPoint]:
    """ATM call/put premiums aligned one-to-one with the bars."""
    total = len(bars)
    series = []

    for i, bar in enumerate(bars):
        # Linear decay over the session stands in for theta
        time_decay = 1 - (i / total) * 0.1
        call_variation = seeded_random(seed + "call", i) * 30
        put_variation = seeded_random(seed + "put", i) * 25

        series.append(
            OptionPremiumPoint(
                time=bar.time,
                timestamp=bar.timestamp,
                call_premium=round(
                    max(0.0, (bar.close - atm_strike) + 150 * time_decay + call_variation), 2
                ),
                put_premium=round(
                    max(0.0, (atm_strike - bar.close) + 120 * time_decay + put_variation), 2
                ),
            )
        )

    return series


def generate_iv_smile(
    atm_strike: int, strike_interval: int, seed: str
) -> list[IVSmilePoint]:
    """IV across strikes within +/-1000 of ATM, rising with distance."""
    if strike_interval <= 0:
        return []

    smile = []
    strikes = range(
        atm_strike - IV_SMILE_HALF_WIDTH,
        atm_strike + IV_SMILE_HALF_WIDTH + 1,
        strike_interval,
    )
    for index, strike in enumerate(strikes):
        volatility_smile = (abs(strike - atm_strike) / IV_SMILE_HALF_WIDTH) * 5

        smile.append(
            IVSmilePoint(
                strike=strike,
                call_iv=round(IV_BASE + volatility_smile + seeded_random(seed + "ivCall", index) * 2, 2),
                put_iv=round(IV_BASE + volatility_smile + seeded_random(seed + "ivPut", index) * 2, 2),
            )
        )

    return smile
