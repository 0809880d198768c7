"""Tests for the upstream-or-synthetic market data service."""

from datetime import datetime

import pytest

from marketpulse.schemas.market import IntradayBar, SymbolRequest
from marketpulse.services.base import ExternalAPIError, NoDataError
from marketpulse.services.data_ingestion import service as market_data_module
from marketpulse.services.data_ingestion.service import MarketDataService
from marketpulse.services.data_ingestion.yahoo_adapter import (
    IndexQuote,
    IntradaySeries,
    PriceHistory,
)
from marketpulse.services.synthesizer import service as synthesizer_service_module
from marketpulse.services.synthesizer.generators import generate_intraday_bars
from marketpulse.services.synthesizer.seed import IST_FIXED, derive_seed

SATURDAY = IST_FIXED.localize(datetime(2025, 10, 11, 12, 0))
FRIDAY_OPEN = IST_FIXED.localize(datetime(2025, 10, 10, 10, 7))


@pytest.fixture
def nifty():
    return SymbolRequest(symbol="^NSEI", strike_interval=50)


@pytest.fixture
def service(upstream):
    return MarketDataService(use_upstream=True)


def _bar(time, timestamp, close):
    return IntradayBar(
        time=time,
        timestamp=timestamp,
        open=close - 5,
        high=close + 10,
        low=close - 10,
        close=close,
        volume=1000,
    )


class TestLiveChart:
    @pytest.mark.asyncio
    async def test_upstream_failure_uses_mock_prices(self, service, upstream, nifty):
        chart = await service.get_live_chart(nifty, SATURDAY)

        assert chart.using_mock_data is True
        assert chart.current_price == 25600
        assert chart.previous_close == 25765
        assert chart.change == -165
        assert chart.change_percent == round(-165 / 25765 * 100, 2)
        assert chart.atm_strike == 25600
        assert chart.day_high == 25700
        assert chart.day_low == 25450
        assert chart.is_market_open is False
        assert chart.timestamp == "2025-10-10T15:30:00+05:30"
        assert len(chart.intraday_price_data) == 78
        assert len(chart.option_premium_data) == 78
        assert len(chart.iv_smile_data) == 41

    @pytest.mark.asyncio
    async def test_frozen_outside_market_hours(self, service, upstream, nifty):
        saturday = await service.get_live_chart(nifty, SATURDAY)
        sunday = await service.get_live_chart(
            nifty, IST_FIXED.localize(datetime(2025, 10, 12, 20, 0))
        )
        assert saturday.model_dump_json() == sunday.model_dump_json()

    @pytest.mark.asyncio
    async def test_quote_without_bars(self, service, upstream, nifty):
        upstream.intraday = IntradaySeries(bars=[], current_price=24010.0, previous_close=24000.0)

        chart = await service.get_live_chart(nifty, FRIDAY_OPEN)

        assert chart.using_mock_data is True
        assert chart.current_price == 24010.0
        assert chart.previous_close == 24000.0
        assert chart.atm_strike == 24000
        assert chart.is_market_open is True

    @pytest.mark.asyncio
    async def test_real_bars(self, service, upstream, nifty):
        bars = [
            _bar("09:15", 1760069700, 25580.0),
            _bar("09:20", 1760070000, 25640.0),
            _bar("09:25", 1760070300, 25610.0),
        ]
        upstream.intraday = IntradaySeries(bars=bars, current_price=25611.0, previous_close=25500.0)

        chart = await service.get_live_chart(nifty, FRIDAY_OPEN)

        assert chart.using_mock_data is False
        assert chart.current_price == 25610.0
        assert chart.change == 110.0
        assert chart.day_high == 25650.0
        assert chart.day_low == 25570.0
        assert chart.atm_strike == 25600
        assert chart.intraday_price_data == bars
        assert [p.time for p in chart.option_premium_data] == ["09:15", "09:20", "09:25"]

    @pytest.mark.asyncio
    async def test_upstream_disabled(self, upstream, nifty):
        chart = await MarketDataService(use_upstream=False).get_live_chart(nifty, SATURDAY)
        assert chart.using_mock_data is True
        assert upstream.calls == []


class TestTechnicalData:
    @pytest.mark.asyncio
    async def test_upstream_failure(self, service, upstream, nifty):
        with pytest.raises(ExternalAPIError):
            await service.get_technical_data(nifty)

    @pytest.mark.asyncio
    async def test_no_closes(self, service, upstream, nifty):
        upstream.history = PriceHistory(closes=[], current_price=None, previous_close=None)
        with pytest.raises(NoDataError):
            await service.get_technical_data(nifty)

    @pytest.mark.asyncio
    async def test_live_price_replaces_last_close(self, service, upstream, nifty):
        closes = [25000.0 + i * 5 for i in range(60)]
        upstream.history = PriceHistory(closes=closes, current_price=25400.0, previous_close=25300.0)

        result = await service.get_technical_data(nifty)

        assert result.current_price == 25400.0
        assert result.change == 100.0
        assert result.candles == 60
        assert result.atm_strike == 25400
        assert len(result.indicators) == 10

    @pytest.mark.asyncio
    async def test_upstream_disabled(self, upstream, nifty):
        with pytest.raises(ExternalAPIError):
            await MarketDataService(use_upstream=False).get_technical_data(nifty)


class TestOptionChain:
    @pytest.mark.asyncio
    async def test_fallback_price(self, service, upstream, nifty):
        chain = await service.get_option_chain(nifty, SATURDAY)

        assert chain.using_mock_price is True
        assert chain.current_price == 24000
        assert chain.atm_strike == 24000
        assert len(chain.option_data) == 21
        assert chain.timestamp == "2025-10-10T15:30:00+05:30"

    @pytest.mark.asyncio
    async def test_upstream_price(self, service, upstream, nifty):
        upstream.quotes["^NSEI"] = IndexQuote(symbol="^NSEI", price=25612.3, previous_close=25500.0)

        chain = await service.get_option_chain(nifty, FRIDAY_OPEN)

        assert chain.using_mock_price is False
        assert chain.atm_strike == 25600
        assert chain.option_data[10].strike == 25600


class TestIndices:
    @pytest.mark.asyncio
    async def test_fallback_symbol_and_omitted_index(self, service, upstream):
        upstream.quotes.update(
            {
                "^NSEI": IndexQuote(symbol="^NSEI", price=25600.0, previous_close=25500.0),
                "SENSEX.BO": IndexQuote(symbol="SENSEX.BO", price=83000.0, previous_close=83000.0),
                "^NSEBANK": IndexQuote(symbol="^NSEBANK", price=57000.0, previous_close=57100.0),
                "^CNXFMCG": IndexQuote(symbol="^CNXFMCG", price=56000.0, previous_close=56000.0),
                "^CNXPHARMA": IndexQuote(symbol="^CNXPHARMA", price=22000.0, previous_close=22100.0),
            }
        )

        result = await service.get_indices()
        by_name = {index.name: index for index in result.indices}

        assert len(result.indices) == 5
        assert "NIFTY IT" not in by_name
        assert by_name["SENSEX"].symbol == "SENSEX.BO"
        assert by_name["NIFTY 50"].change == 100.0
        assert by_name["NIFTY 50"].change_percent == round(100 / 25500 * 100, 2)
        assert "quote:^BSESN" in upstream.calls

    @pytest.mark.asyncio
    async def test_health_check(self, service, upstream):
        assert await service.health_check() is False
        upstream.quotes["^NSEI"] = IndexQuote(symbol="^NSEI", price=25600.0, previous_close=25500.0)
        assert await service.health_check() is True


class TestGlobalIndices:
    @pytest.mark.asyncio
    async def test_failed_symbols_are_omitted(self, service, upstream):
        upstream.quotes.update(
            {
                "^INDIAVIX": IndexQuote(
                    symbol="^INDIAVIX",
                    price=11.2,
                    previous_close=11.0,
                    last_updated="2025-10-10T10:00:00+00:00",
                ),
                "^DJI": IndexQuote(
                    symbol="^DJI",
                    price=42850.5,
                    previous_close=42700.0,
                    last_updated="2025-10-09T20:00:00+00:00",
                ),
                "GC=F": IndexQuote(symbol="GC=F", price=4000.0, previous_close=4000.0),
            }
        )

        result = await service.get_global_indices()
        by_name = {index.name: index for index in result.indices}

        assert list(by_name) == ["INDIA VIX", "DOW JONES", "GOLD"]
        assert by_name["DOW JONES"].change == 150.5
        assert by_name["DOW JONES"].change_percent == round(150.5 / 42700 * 100, 2)
        assert by_name["DOW JONES"].last_updated == "2025-10-09T20:00:00+00:00"
        assert by_name["GOLD"].change_percent == 0.0
        # missing trade time falls back to the fetch time
        assert by_name["GOLD"].last_updated is not None
        assert "quote:SENSEX.BO" in upstream.calls
        assert "quote:SI=F" in upstream.calls

    @pytest.mark.asyncio
    async def test_upstream_disabled(self, upstream):
        result = await MarketDataService(use_upstream=False).get_global_indices()
        assert result.indices == []
        assert upstream.calls == []


class TestSyntheticChartSkipsOptionChain:
    @pytest.mark.asyncio
    async def test_no_chain_built(self, service, upstream, nifty, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("option chain generated for a live chart")

        monkeypatch.setattr(market_data_module, "generate_option_chain", fail)
        monkeypatch.setattr(synthesizer_service_module, "generate_option_chain", fail)

        chart = await service.get_live_chart(nifty, SATURDAY)

        assert chart.using_mock_data is True
        ctx = derive_seed(SATURDAY)
        assert chart.intraday_price_data == generate_intraday_bars(
            25600, ctx.seed, ctx.as_of_date
        )
