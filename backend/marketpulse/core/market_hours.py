"""
Market Hours Utility

Handles IST timezone, market sessions, and NSE holidays.
"""

from datetime import datetime, date, timedelta
from enum import Enum
from typing import Optional
import pytz

IST = pytz.timezone("Asia/Kolkata")

# Market timing (IST)
MARKET_OPEN = "09:15"
MARKET_CLOSE = "15:30"
PRE_OPEN_START = "09:00"
PRE_OPEN_END = "09:08"


class MarketSession(str, Enum):
    PRE_OPEN = "PRE_OPEN"
    OPENING = "OPENING"
    NORMAL = "NORMAL"
    CLOSED = "CLOSED"


# NSE Holidays 2024-2026
NSE_HOLIDAYS = {
    # 2024
    date(2024, 12, 25),  # Christmas
    # 2025
    date(2025, 1, 26),   # Republic Day
    date(2025, 2, 26),   # Maha Shivaratri
    date(2025, 3, 14),   # Holi
    date(2025, 3, 31),   # Id-Ul-Fitr
    date(2025, 4, 10),   # Mahavir Jayanti
    date(2025, 4, 14),   # Dr. Ambedkar Jayanti
    date(2025, 4, 18),   # Good Friday
    date(2025, 5, 1),    # Maharashtra Day
    date(2025, 6, 7),    # Eid ul-Adha
    date(2025, 8, 15),   # Independence Day
    date(2025, 8, 16),   # Parsi New Year
    date(2025, 8, 27),   # Janmashtami
    date(2025, 10, 2),   # Gandhi Jayanti
    date(2025, 10, 21),  # Diwali
    date(2025, 10, 22),  # Diwali Balipratipada
    date(2025, 11, 5),   # Guru Nanak Jayanti
    date(2025, 12, 25),  # Christmas
    # 2026
    date(2026, 1, 26),   # Republic Day
    date(2026, 8, 15),   # Independence Day
    date(2026, 10, 2),   # Gandhi Jayanti
    date(2026, 12, 25),  # Christmas
}


def get_ist_now() -> datetime:
    """Get current time in IST."""
    return datetime.now(IST)


def to_ist(dt: datetime) -> datetime:
    """Convert a datetime to IST. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(IST)


def is_weekend(dt: date) -> bool:
    """Check if date is a weekend."""
    return dt.weekday() >= 5  # Saturday = 5, Sunday = 6


def is_holiday(dt: date) -> bool:
    """Check if date is an NSE holiday."""
    return dt in NSE_HOLIDAYS


def is_trading_day(dt: date) -> bool:
    """Check if date is a trading day."""
    return not is_weekend(dt) and not is_holiday(dt)


def get_market_session(dt: Optional[datetime] = None) -> MarketSession:
    """Get market session at the given instant (defaults to now)."""
    dt = get_ist_now() if dt is None else to_ist(dt)

    if not is_trading_day(dt.date()):
        return MarketSession.CLOSED

    time_str = dt.strftime("%H:%M")

    if time_str < PRE_OPEN_START:
        return MarketSession.CLOSED
    elif time_str < PRE_OPEN_END:
        return MarketSession.PRE_OPEN
    elif time_str < MARKET_OPEN:
        return MarketSession.OPENING
    elif time_str <= MARKET_CLOSE:
        return MarketSession.NORMAL
    else:
        return MarketSession.CLOSED


def get_next_trading_day(dt: date) -> date:
    """Get the next trading day."""
    next_day = dt + timedelta(days=1)
    while not is_trading_day(next_day):
        next_day += timedelta(days=1)

    return next_day


def get_market_status(now: Optional[datetime] = None) -> dict:
    """Get comprehensive market status."""
    now = get_ist_now() if now is None else to_ist(now)
    session = get_market_session(now)

    status = {
        "is_open": session == MarketSession.NORMAL,
        "session": session.value,
        "is_holiday": is_holiday(now.date()),
        "is_weekend": is_weekend(now.date()),
        "current_time_ist": now.strftime("%H:%M:%S"),
        "current_date": now.date().isoformat(),
    }

    if not status["is_open"]:
        next_trading = now.date()
        if now.strftime("%H:%M") > MARKET_CLOSE or not is_trading_day(next_trading):
            next_trading = get_next_trading_day(next_trading)
        status["next_open"] = f"{next_trading.isoformat()}T{MARKET_OPEN}:00+05:30"

    return status
