"""Tests for market hours utilities."""

from datetime import date, datetime

from marketpulse.core.market_hours import (
    IST,
    MarketSession,
    get_market_session,
    get_market_status,
    get_next_trading_day,
    is_trading_day,
)


def _ist(year, month, day, hour, minute):
    return IST.localize(datetime(year, month, day, hour, minute))


class TestSessions:
    def test_normal_session(self):
        assert get_market_session(_ist(2025, 10, 10, 10, 0)) == MarketSession.NORMAL

    def test_pre_open_and_opening(self):
        assert get_market_session(_ist(2025, 10, 10, 9, 5)) == MarketSession.PRE_OPEN
        assert get_market_session(_ist(2025, 10, 10, 9, 10)) == MarketSession.OPENING

    def test_closed_after_hours(self):
        assert get_market_session(_ist(2025, 10, 10, 15, 31)) == MarketSession.CLOSED

    def test_closed_on_weekend_and_holiday(self):
        assert get_market_session(_ist(2025, 10, 11, 11, 0)) == MarketSession.CLOSED
        assert get_market_session(_ist(2025, 10, 21, 11, 0)) == MarketSession.CLOSED


class TestTradingDays:
    def test_holiday_is_not_a_trading_day(self):
        assert is_trading_day(date(2025, 10, 21)) is False
        assert is_trading_day(date(2025, 10, 20)) is True

    def test_next_trading_day_skips_weekend(self):
        assert get_next_trading_day(date(2025, 10, 10)) == date(2025, 10, 13)

    def test_next_trading_day_skips_holidays(self):
        assert get_next_trading_day(date(2025, 10, 20)) == date(2025, 10, 23)


class TestMarketStatus:
    def test_open(self):
        status = get_market_status(_ist(2025, 10, 10, 11, 0))
        assert status["is_open"] is True
        assert status["session"] == "NORMAL"
        assert "next_open" not in status

    def test_friday_evening_points_to_monday(self):
        status = get_market_status(_ist(2025, 10, 10, 16, 0))
        assert status["is_open"] is False
        assert status["next_open"] == "2025-10-13T09:15:00+05:30"

    def test_morning_points_to_same_day(self):
        status = get_market_status(_ist(2025, 10, 13, 8, 0))
        assert status["next_open"] == "2025-10-13T09:15:00+05:30"

    def test_weekend_flags(self):
        status = get_market_status(_ist(2025, 10, 11, 12, 0))
        assert status["is_weekend"] is True
        assert status["current_date"] == "2025-10-11"
