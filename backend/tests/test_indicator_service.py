"""Tests for the indicator engine service."""

from datetime import datetime

import pytest

from marketpulse.schemas.indicators import IndicatorRequest, SignalType
from marketpulse.services.base import NoDataError
from marketpulse.services.indicators import compute_indicators, get_indicator_service

BATTERY = [
    "RSI (14)",
    "RSI (9)",
    "MACD",
    "SMA (20)",
    "SMA (50)",
    "SMA (100)",
    "SMA (200)",
    "EMA (20)",
    "EMA (50)",
    "Bollinger Bands",
]


@pytest.fixture
def accelerating_prices():
    return [100 + 0.01 * i * i for i in range(250)]


class TestComputeIndicators:
    def test_empty_prices_raise(self):
        with pytest.raises(NoDataError):
            compute_indicators([], 25600)

    def test_fixed_battery(self, accelerating_prices):
        analysis = compute_indicators(accelerating_prices, accelerating_prices[-1])
        assert [i.name for i in analysis.indicators] == BATTERY

    def test_signals_for_uptrend(self, accelerating_prices):
        analysis = compute_indicators(accelerating_prices, accelerating_prices[-1])
        by_name = {i.name: i for i in analysis.indicators}

        assert by_name["RSI (14)"].signal == SignalType.OVERBOUGHT
        assert by_name["MACD"].signal == SignalType.BULLISH
        for name in ("SMA (20)", "SMA (200)", "EMA (50)"):
            assert by_name[name].signal == SignalType.BULLISH
        assert by_name["Bollinger Bands"].signal == SignalType.NEUTRAL

        rec = analysis.recommendation
        assert rec.bullish_count == 7
        assert rec.bearish_count == 0
        assert rec.neutral_count == 3

    def test_value_formatting(self, accelerating_prices):
        analysis = compute_indicators(accelerating_prices, accelerating_prices[-1])
        by_name = {i.name: i for i in analysis.indicators}
        assert by_name["RSI (14)"].value == "100.00"
        assert " / " in by_name["MACD"].value
        assert " / " in by_name["Bollinger Bands"].value

    def test_single_price_recovers(self):
        analysis = compute_indicators([25600.0], 25600.0)
        by_name = {i.name: i for i in analysis.indicators}
        assert by_name["RSI (14)"].value == "50.00"
        assert by_name["MACD"].value == "0.00 / 0.00"
        assert by_name["SMA (200)"].value == "25600.00"
        total = analysis.recommendation
        assert total.bullish_count + total.bearish_count + total.neutral_count == len(BATTERY)


class TestIndicatorService:
    @pytest.mark.asyncio
    async def test_execute(self, accelerating_prices):
        service = get_indicator_service()
        analysis = await service.execute(
            IndicatorRequest(prices=accelerating_prices, current_price=accelerating_prices[-1])
        )
        assert len(analysis.indicators) == len(BATTERY)

    @pytest.mark.asyncio
    async def test_analyze_uses_previous_close(self):
        prices = [25500.0 + i for i in range(60)]
        result = await get_indicator_service().analyze(
            symbol="^NSEI",
            prices=prices,
            current_price=25612.0,
            previous_close=25512.0,
            strike_interval=50,
        )
        assert result.change == 100.0
        assert result.change_percent == round(100 / 25512 * 100, 2)
        assert result.atm_strike == 25600
        assert result.candles == 60
        assert isinstance(result.timestamp, datetime)
        assert result.timestamp.tzinfo is not None

    @pytest.mark.asyncio
    async def test_analyze_without_previous_close(self):
        result = await get_indicator_service().analyze(
            symbol="^NSEI",
            prices=[100.0, 110.0],
            current_price=110.0,
            previous_close=None,
            strike_interval=50,
        )
        assert result.change == 10.0
        assert result.atm_strike == 100

    @pytest.mark.asyncio
    async def test_health_check(self):
        assert await get_indicator_service().health_check() is True
