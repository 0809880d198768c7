"""
Market Data Service Implementation

Fetches index data from Yahoo Finance and falls back to the seeded
synthesizer whenever the upstream fails or returns gaps.
Primary: Yahoo Finance (free, real data)
Fallback: Synthesizer (stable within a 5-minute block, frozen after close)
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from marketpulse.core.config import settings
from marketpulse.core.market_hours import get_ist_now
from marketpulse.schemas.market import (
    SymbolRequest,
    LiveChartResponse,
    MarketIndex,
    IndicesResponse,
    QuoteSource,
)
from marketpulse.schemas.options import OptionChainResponse
from marketpulse.schemas.indicators import TechnicalDataResponse
from marketpulse.services.base import ExternalAPIError
from marketpulse.services.data_ingestion.interface import MarketDataServiceInterface
from marketpulse.services.data_ingestion.indices import (
    INDICES,
    GLOBAL_INDICES,
    get_quote_symbols,
)
from marketpulse.services.data_ingestion.yahoo_adapter import (
    fetch_price_history,
    fetch_intraday_series,
    fetch_index_quote,
)
from marketpulse.services.indicators import get_indicator_service
from marketpulse.services.synthesizer import derive_seed
from marketpulse.services.synthesizer.generators import (
    calculate_atm_strike,
    generate_intraday_bars,
    generate_option_premium_series,
    generate_iv_smile,
)
from marketpulse.services.synthesizer.option_chain import generate_option_chain

logger = logging.getLogger(__name__)

# Synthetic day range around the mock price
MOCK_DAY_HIGH_OFFSET = 100
MOCK_DAY_LOW_OFFSET = 150


def _change_percent(change: float, previous_close: float) -> float:
    return (change / previous_close) * 100 if previous_close else 0.0


class MarketDataService(MarketDataServiceInterface):
    """
    Market Data Service.

    Uses Yahoo Finance when enabled and reachable.
    Falls back to synthesized data only if the upstream fails.
    """

    def __init__(self, use_upstream: Optional[bool] = None):
        self._use_upstream = settings.enable_upstream if use_upstream is None else use_upstream

    @property
    def name(self) -> str:
        return "MarketDataService"

    async def execute(self, input_data: SymbolRequest) -> LiveChartResponse:
        return await self.get_live_chart(input_data, get_ist_now())

    async def get_live_chart(
        self, request: SymbolRequest, now: datetime
    ) -> LiveChartResponse:
        """Live intraday chart; synthetic bars when upstream bars are missing."""
        ctx = derive_seed(now)
        logger.info(
            f"Live chart for {request.symbol}: market open={ctx.is_market_open}, seed={ctx.seed}"
        )

        series = None
        if self._use_upstream:
            series = await fetch_intraday_series(
                request.symbol,
                period=settings.intraday_period,
                interval=settings.intraday_interval,
            )

        if series is not None and series.bars:
            bars = series.bars
            current_price = bars[-1].close
            previous_close = series.previous_close or current_price
            atm_strike = calculate_atm_strike(current_price, request.strike_interval)

            return LiveChartResponse(
                symbol=request.symbol,
                current_price=current_price,
                change=round(current_price - previous_close, 2),
                change_percent=round(
                    _change_percent(current_price - previous_close, previous_close), 2
                ),
                atm_strike=atm_strike,
                previous_close=previous_close,
                day_high=max(bar.high for bar in bars),
                day_low=min(bar.low for bar in bars),
                is_market_open=ctx.is_market_open,
                intraday_price_data=bars,
                option_premium_data=generate_option_premium_series(bars, atm_strike, ctx.seed),
                iv_smile_data=generate_iv_smile(atm_strike, request.strike_interval, ctx.seed),
                timestamp=ctx.as_of_timestamp,
            )

        if series is None:
            logger.warning(f"No upstream data for {request.symbol}, using mock data")
            current_price = settings.mock_current_price
            previous_close = settings.mock_previous_close
        else:
            logger.warning(f"Missing intraday bars for {request.symbol}, using mock data")
            current_price = series.current_price or settings.mock_current_price
            previous_close = series.previous_close or settings.mock_previous_close

        # Series generators only; the chart carries no option chain
        atm_strike = calculate_atm_strike(current_price, request.strike_interval)
        bars = generate_intraday_bars(current_price, ctx.seed, ctx.as_of_date)
        change = current_price - previous_close

        return LiveChartResponse(
            symbol=request.symbol,
            current_price=current_price,
            change=round(change, 2),
            change_percent=round(_change_percent(change, previous_close), 2),
            atm_strike=atm_strike,
            previous_close=previous_close,
            day_high=current_price + MOCK_DAY_HIGH_OFFSET,
            day_low=current_price - MOCK_DAY_LOW_OFFSET,
            is_market_open=ctx.is_market_open,
            intraday_price_data=bars,
            option_premium_data=generate_option_premium_series(bars, atm_strike, ctx.seed),
            iv_smile_data=generate_iv_smile(atm_strike, request.strike_interval, ctx.seed),
            timestamp=ctx.as_of_timestamp,
            using_mock_data=True,
        )

    async def get_technical_data(self, request: SymbolRequest) -> TechnicalDataResponse:
        """Indicators over 15-minute closes with the live price as the last close."""
        if not self._use_upstream:
            raise ExternalAPIError(self.name, "Upstream provider disabled")

        history = await fetch_price_history(
            request.symbol,
            period=settings.technical_period,
            interval=settings.technical_interval,
        )
        if history is None:
            raise ExternalAPIError(
                self.name,
                f"Failed to fetch {request.symbol} from Yahoo Finance",
                {"symbol": request.symbol},
            )

        prices = list(history.closes)
        current_price = history.current_price or (prices[-1] if prices else 0.0)
        if prices:
            prices[-1] = current_price

        return await get_indicator_service().analyze(
            symbol=request.symbol,
            prices=prices,
            current_price=current_price,
            previous_close=history.previous_close,
            strike_interval=request.strike_interval,
        )

    async def get_option_chain(
        self, request: SymbolRequest, now: datetime
    ) -> OptionChainResponse:
        """Option chain around the upstream price, 24000 if unavailable."""
        ctx = derive_seed(now)

        quote = await fetch_index_quote(request.symbol) if self._use_upstream else None
        using_mock_price = quote is None
        current_price = settings.option_fallback_price if using_mock_price else quote.price
        if using_mock_price:
            logger.warning(
                f"No quote for {request.symbol}, building chain around {current_price}"
            )

        return OptionChainResponse(
            symbol=request.symbol,
            current_price=current_price,
            atm_strike=calculate_atm_strike(current_price, request.strike_interval),
            strike_interval=request.strike_interval,
            option_data=generate_option_chain(
                current_price,
                request.strike_interval,
                ctx.seed,
                ctx.as_of_date,
                settings.option_chain_strikes,
            ),
            timestamp=ctx.as_of_timestamp,
            using_mock_price=using_mock_price,
        )

    async def _fetch_index(self, source: QuoteSource) -> Optional[MarketIndex]:
        for symbol in get_quote_symbols(source):
            quote = await fetch_index_quote(symbol)
            if quote is None:
                logger.warning(f"Error fetching {source.name} with {symbol}, trying next symbol")
                continue

            change = quote.price - quote.previous_close
            return MarketIndex(
                name=source.name,
                symbol=symbol,
                value=quote.price,
                change=round(change, 2),
                change_percent=round(_change_percent(change, quote.previous_close), 2),
                last_updated=quote.last_updated or datetime.now(timezone.utc).isoformat(),
            )

        # All fallbacks failed for this index
        return None

    async def _fetch_all(self, sources: list[QuoteSource]) -> IndicesResponse:
        if not self._use_upstream:
            return IndicesResponse(indices=[])

        results = await asyncio.gather(*(self._fetch_index(source) for source in sources))
        indices = [r for r in results if r is not None]
        logger.info(f"Fetched {len(indices)} of {len(sources)} quotes")
        return IndicesResponse(indices=indices)

    async def get_indices(self) -> IndicesResponse:
        return await self._fetch_all(INDICES)

    async def get_global_indices(self) -> IndicesResponse:
        """Global benchmarks, INDIA VIX and commodities; failed symbols are omitted."""
        return await self._fetch_all(GLOBAL_INDICES)

    async def health_check(self) -> bool:
        """Healthy when disabled, or when the primary NIFTY quote answers."""
        if not self._use_upstream:
            return True
        return await fetch_index_quote(INDICES[0].symbol) is not None


# Singleton instance
_service_instance: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get or create market data service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = MarketDataService()
    return _service_instance
