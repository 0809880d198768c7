"""
Synthetic Option Chain

21 strikes centered on ATM with OI, volume, premium, IV, change and
heuristic Greeks. The Greeks are closed-form approximations, not a
pricing model.
"""

import math

from marketpulse.schemas.options import OptionLeg, OptionChainRow
from marketpulse.services.synthesizer.generators import calculate_atm_strike
from marketpulse.services.synthesizer.prng import seeded_random

DEFAULT_NUM_STRIKES = 21
DAYS_TO_EXPIRY = 30
TIME_TO_EXPIRY = DAYS_TO_EXPIRY / 365


def _leg(
    oi: float,
    volume: float,
    iv: float,
    ltp: float,
    change: float,
    delta: float,
    gamma: float,
    theta: float,
    vega: float,
) -> OptionLeg:
    return OptionLeg(
        oi=round(oi),
        volume=round(volume),
        iv=round(iv, 2),
        ltp=round(ltp, 2),
        change=round(change, 2),
        delta=round(delta, 3),
        gamma=round(gamma, 4),
        theta=round(theta, 2),
        vega=round(vega, 2),
    )


def generate_option_chain(
    current_price: float,
    strike_interval: int,
    seed: str,
    as_of_date: str,
    num_strikes: int = DEFAULT_NUM_STRIKES,
) -> list[OptionChainRow]:
    """
    Build the chain ordered by strike.

    Args:
        current_price: Underlying price; distance and moneyness use it
        strike_interval: Strike spacing; non-positive gives an empty chain
        seed: Seed bucket (changes every 5 minutes while open)
        as_of_date: Effective trading date; drives the day-level change
        num_strikes: Strikes in the chain, centered on ATM

    Returns:
        List of OptionChainRow
    """
    if strike_interval <= 0 or num_strikes <= 0 or current_price <= 0:
        return []

    atm_strike = calculate_atm_strike(current_price, strike_interval)
    start_strike = atm_strike - (num_strikes // 2) * strike_interval

    chain = []
    for i in range(num_strikes):
        strike = start_strike + i * strike_interval
        distance = abs(strike - current_price)
        strike_seed = f"{seed}:{strike}"
        day_seed = f"{as_of_date}:{strike}"

        # OI concentrates near the money
        oi_multiplier = math.exp(-distance / 800)
        call_oi = 80000 + seeded_random(strike_seed, 1) * 120000 * oi_multiplier
        put_oi = 80000 + seeded_random(strike_seed, 2) * 120000 * oi_multiplier

        # Volume is 10-30% of OI
        call_volume = call_oi * (0.1 + seeded_random(strike_seed, 3) * 0.2)
        put_volume = put_oi * (0.1 + seeded_random(strike_seed, 4) * 0.2)

        intrinsic_call = max(current_price - strike, 0)
        intrinsic_put = max(strike - current_price, 0)
        time_value = 150 * math.exp(-distance / 600)

        call_premium = intrinsic_call + time_value + seeded_random(strike_seed, 5) * 15
        put_premium = intrinsic_put + time_value + seeded_random(strike_seed, 6) * 15

        base_iv = 14 + (distance / 1000) * 4
        call_iv = base_iv + seeded_random(strike_seed, 7) * 1.5
        put_iv = base_iv + seeded_random(strike_seed, 8) * 1.5

        call_change = (seeded_random(day_seed, 9) - 0.5) * 30
        put_change = (seeded_random(day_seed, 10) - 0.5) * 30

        call_delta = 0.5 + (current_price - strike) / (2 * current_price)
        put_delta = call_delta - 1
        gamma = 0.01 * math.exp(-distance / 1000)
        # Both legs share the call-premium based theta and vega
        theta = -(call_premium / (TIME_TO_EXPIRY * 365)) / 10
        vega = call_premium * math.sqrt(TIME_TO_EXPIRY) * 0.01

        chain.append(
            OptionChainRow(
                strike=strike,
                call=_leg(
                    call_oi, call_volume, call_iv, call_premium, call_change,
                    min(1.0, max(0.0, call_delta)), gamma, theta, vega,
                ),
                put=_leg(
                    put_oi, put_volume, put_iv, put_premium, put_change,
                    min(0.0, max(-1.0, put_delta)), gamma, theta, vega,
                ),
            )
        )

    return chain
