"""
Yahoo Finance Data Adapter

Fetches REAL index data from Yahoo Finance.
Every function returns None on failure; callers decide the fallback.
yfinance is blocking, so each fetch runs in a worker thread and
concurrent fetches do not stall the event loop.
"""

import asyncio
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

import yfinance as yf

from marketpulse.schemas.market import IntradayBar

logger = logging.getLogger(__name__)
IST = ZoneInfo("Asia/Kolkata")


@dataclass
class PriceHistory:
    """Close prices plus the live quote for one symbol."""

    closes: list[float]
    current_price: Optional[float]
    previous_close: Optional[float]


@dataclass
class IntradaySeries:
    """Normalized intraday bars. Bars may be empty when only the quote came back."""

    bars: list[IntradayBar]
    current_price: Optional[float]
    previous_close: Optional[float]


@dataclass
class IndexQuote:
    symbol: str
    price: float
    previous_close: float
    last_updated: Optional[str] = None


def _positive(value) -> Optional[float]:
    """Float of value if it is a usable price, else None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number <= 0:
        return None
    return number


def _iso_timestamp(epoch_seconds) -> Optional[str]:
    """UTC ISO 8601 string for a Unix timestamp, None if missing."""
    if not epoch_seconds:
        return None
    try:
        return datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc).isoformat()
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def _history_meta(ticker: yf.Ticker) -> dict:
    try:
        return ticker.history_metadata or {}
    except Exception as e:
        logger.debug(f"No history metadata: {e}")
        return {}


def _load_price_history(symbol: str, period: str, interval: str) -> PriceHistory:
    ticker = yf.Ticker(symbol)
    hist = ticker.history(period=period, interval=interval)

    closes = [] if hist.empty else [float(c) for c in hist["Close"].dropna()]
    meta = _history_meta(ticker)

    current_price = _positive(meta.get("regularMarketPrice"))
    previous_close = _positive(meta.get("previousClose")) or _positive(
        meta.get("chartPreviousClose")
    )

    # Try to get live quote for more accurate current price
    try:
        info = ticker.info
        current_price = (
            _positive(info.get("currentPrice"))
            or _positive(info.get("regularMarketPrice"))
            or current_price
        )
        previous_close = _positive(info.get("previousClose")) or previous_close
    except Exception as e:
        logger.debug(f"Could not get live quote: {e}")

    return PriceHistory(
        closes=closes,
        current_price=current_price,
        previous_close=previous_close,
    )


async def fetch_price_history(
    symbol: str,
    period: str = "60d",
    interval: str = "15m",
) -> Optional[PriceHistory]:
    """
    Fetch close prices and the live quote.

    Args:
        symbol: Yahoo ticker (e.g., "^NSEI")
        period: History range
        interval: Candle size

    Returns:
        PriceHistory (closes may be empty), or None on failure
    """
    try:
        logger.info(f"Fetching {symbol} ({period}/{interval}) from Yahoo Finance...")
        history = await asyncio.to_thread(_load_price_history, symbol, period, interval)
        logger.info(f"Fetched {len(history.closes)} candles for {symbol}")
        return history

    except Exception as e:
        logger.error(f"Error fetching {symbol} from Yahoo Finance: {e}")
        return None


def _load_intraday_series(symbol: str, period: str, interval: str) -> IntradaySeries:
    ticker = yf.Ticker(symbol)
    hist = ticker.history(period=period, interval=interval)
    meta = _history_meta(ticker)

    bars = []
    if not hist.empty:
        for idx, row in hist.dropna(subset=["Close"]).iterrows():
            ts = idx.to_pydatetime()
            if ts.tzinfo is None:
                ts = ts.replace(tzinfo=IST)
            ts = ts.astimezone(IST)

            volume = row["Volume"]
            bars.append(
                IntradayBar(
                    time=ts.strftime("%H:%M"),
                    timestamp=int(ts.timestamp()),
                    open=float(row["Open"]),
                    high=float(row["High"]),
                    low=float(row["Low"]),
                    close=float(row["Close"]),
                    volume=0 if math.isnan(volume) else int(volume),
                )
            )

    return IntradaySeries(
        bars=bars,
        current_price=_positive(meta.get("regularMarketPrice")),
        previous_close=_positive(meta.get("chartPreviousClose")),
    )


async def fetch_intraday_series(
    symbol: str,
    period: str = "1d",
    interval: str = "5m",
) -> Optional[IntradaySeries]:
    """
    Fetch today's intraday bars with IST time labels.

    Returns:
        IntradaySeries, or None on failure
    """
    try:
        logger.info(f"Fetching intraday {symbol} ({period}/{interval}) from Yahoo Finance...")
        return await asyncio.to_thread(_load_intraday_series, symbol, period, interval)

    except Exception as e:
        logger.error(f"Error fetching intraday {symbol} from Yahoo Finance: {e}")
        return None


def _load_index_quote(symbol: str) -> Optional[IndexQuote]:
    ticker = yf.Ticker(symbol)
    hist = ticker.history(period="1d", interval="1d")
    meta = _history_meta(ticker)

    price = _positive(meta.get("regularMarketPrice"))
    if price is None and not hist.empty:
        price = _positive(hist["Close"].iloc[-1])
    if price is None:
        logger.warning(f"Invalid market price for {symbol}")
        return None

    previous_close = (
        _positive(meta.get("chartPreviousClose"))
        or _positive(meta.get("previousClose"))
        or price
    )
    return IndexQuote(
        symbol=symbol,
        price=price,
        previous_close=previous_close,
        last_updated=_iso_timestamp(meta.get("regularMarketTime")),
    )


async def fetch_index_quote(symbol: str) -> Optional[IndexQuote]:
    """Latest price, previous close and last trade time, or None if the price is unusable."""
    try:
        return await asyncio.to_thread(_load_index_quote, symbol)

    except Exception as e:
        logger.error(f"Error fetching quote for {symbol}: {e}")
        return None
