"""Shared fixtures: offline upstream provider and API client."""

from dataclasses import dataclass, field
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from marketpulse.services.data_ingestion import service as market_data_module
from marketpulse.services.data_ingestion.yahoo_adapter import (
    PriceHistory,
    IntradaySeries,
    IndexQuote,
)


@dataclass
class FakeUpstream:
    """Canned upstream answers; None means the provider failed."""

    history: Optional[PriceHistory] = None
    intraday: Optional[IntradaySeries] = None
    quotes: dict[str, IndexQuote] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def fetch_price_history(self, symbol, period="60d", interval="15m"):
        self.calls.append(f"history:{symbol}")
        return self.history

    async def fetch_intraday_series(self, symbol, period="1d", interval="5m"):
        self.calls.append(f"intraday:{symbol}")
        return self.intraday

    async def fetch_index_quote(self, symbol):
        self.calls.append(f"quote:{symbol}")
        return self.quotes.get(symbol)


@pytest.fixture
def upstream(monkeypatch) -> FakeUpstream:
    """Replace the Yahoo adapter so no test touches the network."""
    fake = FakeUpstream()
    monkeypatch.setattr(market_data_module, "fetch_price_history", fake.fetch_price_history)
    monkeypatch.setattr(market_data_module, "fetch_intraday_series", fake.fetch_intraday_series)
    monkeypatch.setattr(market_data_module, "fetch_index_quote", fake.fetch_index_quote)
    return fake


@pytest.fixture
def client(upstream) -> TestClient:
    from marketpulse.main import app

    return TestClient(app)
