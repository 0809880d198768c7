"""Tests for the Yahoo Finance adapter with yfinance replaced by a fake ticker."""

import threading
from types import SimpleNamespace

import pytest

from marketpulse.services.data_ingestion import yahoo_adapter
from marketpulse.services.data_ingestion.yahoo_adapter import _iso_timestamp, fetch_index_quote


class EmptyFrame:
    empty = True


def fake_yfinance(metadata: dict, threads: list):
    class FakeTicker:
        def __init__(self, symbol):
            self.symbol = symbol
            self.history_metadata = metadata

        def history(self, period, interval):
            threads.append(threading.get_ident())
            return EmptyFrame()

    return SimpleNamespace(Ticker=FakeTicker)


class TestIndexQuote:
    @pytest.mark.asyncio
    async def test_quote_with_last_trade_time(self, monkeypatch):
        threads = []
        meta = {
            "regularMarketPrice": 42850.5,
            "chartPreviousClose": 42700.0,
            "regularMarketTime": 1760000000,
        }
        monkeypatch.setattr(yahoo_adapter, "yf", fake_yfinance(meta, threads))

        quote = await fetch_index_quote("^DJI")

        assert quote.symbol == "^DJI"
        assert quote.price == 42850.5
        assert quote.previous_close == 42700.0
        assert quote.last_updated == "2025-10-09T08:53:20+00:00"

    @pytest.mark.asyncio
    async def test_runs_off_the_event_loop_thread(self, monkeypatch):
        threads = []
        monkeypatch.setattr(
            yahoo_adapter, "yf", fake_yfinance({"regularMarketPrice": 100.0}, threads)
        )

        await fetch_index_quote("GC=F")

        assert threads and threads[0] != threading.get_ident()

    @pytest.mark.asyncio
    async def test_unusable_price_is_none(self, monkeypatch):
        monkeypatch.setattr(
            yahoo_adapter, "yf", fake_yfinance({"regularMarketPrice": float("nan")}, [])
        )
        assert await fetch_index_quote("SI=F") is None

    @pytest.mark.asyncio
    async def test_provider_error_is_none(self, monkeypatch):
        def broken_ticker(symbol):
            raise RuntimeError("rate limited")

        monkeypatch.setattr(yahoo_adapter, "yf", SimpleNamespace(Ticker=broken_ticker))
        assert await fetch_index_quote("^N225") is None


def test_iso_timestamp():
    assert _iso_timestamp(1760000000) == "2025-10-09T08:53:20+00:00"
    assert _iso_timestamp(None) is None
    assert _iso_timestamp(0) is None
