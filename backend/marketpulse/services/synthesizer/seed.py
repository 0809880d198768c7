"""
Seed Derivation

Maps an instant to the seed bucket used by the synthesizer:
one seed per 5-minute block while the market is open, and a single
frozen "close" seed for the whole non-trading period.

The instant is always passed in; nothing here reads the clock.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

import pytz

# Seeds use a fixed +05:30 offset, not the tz database.
IST_FIXED = pytz.FixedOffset(330)

OPEN_MINUTES = 9 * 60 + 15
CLOSE_MINUTES = 15 * 60 + 30


@dataclass(frozen=True)
class SeedContext:
    """Seed bucket for one instant."""

    is_market_open: bool
    seed: str
    as_of_date: str  # effective trading date, YYYY-MM-DD
    hour: int
    minute: int
    weekday: int  # Monday = 0 ... Sunday = 6
    as_of_timestamp: str


def to_ist_fixed(instant: datetime) -> datetime:
    """Convert to IST (+05:30). Naive instants are taken as UTC."""
    if instant.tzinfo is None:
        instant = pytz.utc.localize(instant)
    return instant.astimezone(IST_FIXED)


def is_market_hours(weekday: int, hour: int, minute: int) -> bool:
    """Mon-Fri, 09:15 to 15:30 inclusive. Holidays are not consulted."""
    minutes = hour * 60 + minute
    return weekday < 5 and OPEN_MINUTES <= minutes <= CLOSE_MINUTES


def effective_trading_date(today: date, hour: int, minute: int) -> date:
    """
    Trading date whose data should be shown at this wall-clock time.

    Weekends roll back to Friday; weekday mornings before the open roll
    back to the previous weekday.
    """
    weekday = today.weekday()
    if weekday == 5:
        return today - timedelta(days=1)
    if weekday == 6:
        return today - timedelta(days=2)

    if hour * 60 + minute < OPEN_MINUTES:
        return today - timedelta(days=3 if weekday == 0 else 1)
    return today


def derive_seed(instant: datetime) -> SeedContext:
    """Compute the seed bucket for an instant."""
    local = to_ist_fixed(instant)
    hour, minute, weekday = local.hour, local.minute, local.weekday()

    market_open = is_market_hours(weekday, hour, minute)
    ymd = effective_trading_date(local.date(), hour, minute).isoformat()

    if market_open:
        seed = f"{ymd}-{hour:02d}-{minute // 5}"
        as_of = local.isoformat()
    else:
        seed = f"{ymd}-close"
        as_of = f"{ymd}T15:30:00+05:30"

    return SeedContext(
        is_market_open=market_open,
        seed=seed,
        as_of_date=ymd,
        hour=hour,
        minute=minute,
        weekday=weekday,
        as_of_timestamp=as_of,
    )
