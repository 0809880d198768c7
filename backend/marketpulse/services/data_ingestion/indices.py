"""
Supported Indices

Display name, primary Yahoo symbol, option strike spacing and the
symbols tried in order when fetching a quote. GLOBAL_INDICES feeds the
global market board and carries no option data.
"""

from marketpulse.schemas.market import IndexInfo, QuoteSource

INDICES: list[IndexInfo] = [
    IndexInfo(name="NIFTY 50", symbol="^NSEI", strike_interval=50),
    IndexInfo(name="SENSEX", symbol="^BSESN", strike_interval=100),
    IndexInfo(name="NIFTY BANK", symbol="^NSEBANK", strike_interval=100),
    IndexInfo(name="NIFTY IT", symbol="^CNXIT", strike_interval=50),
    IndexInfo(name="NIFTY FMCG", symbol="^CNXFMCG", strike_interval=50),
    IndexInfo(name="NIFTY PHARMA", symbol="^CNXPHARMA", strike_interval=50),
]

GLOBAL_INDICES: list[QuoteSource] = [
    # India
    QuoteSource(name="NIFTY 50", symbol="^NSEI"),
    QuoteSource(name="SENSEX", symbol="^BSESN"),
    QuoteSource(name="NIFTY BANK", symbol="^NSEBANK"),
    QuoteSource(name="INDIA VIX", symbol="^INDIAVIX"),
    # US
    QuoteSource(name="DOW JONES", symbol="^DJI"),
    QuoteSource(name="NASDAQ", symbol="^IXIC"),
    QuoteSource(name="S&P 500", symbol="^GSPC"),
    QuoteSource(name="RUSSELL 2000", symbol="^RUT"),
    # Asia
    QuoteSource(name="NIKKEI 225", symbol="^N225"),
    # Commodities
    QuoteSource(name="GOLD", symbol="GC=F"),
    QuoteSource(name="SILVER", symbol="SI=F"),
]

FALLBACK_SYMBOLS: dict[str, list[str]] = {
    "^BSESN": ["SENSEX.BO"],
}


def get_quote_symbols(source: QuoteSource) -> list[str]:
    """Primary symbol followed by its fallbacks."""
    return [source.symbol] + FALLBACK_SYMBOLS.get(source.symbol, [])
