"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
All math is deterministic. Short inputs fall back to documented
neutral values instead of raising.
"""

import numpy as np
from typing import Optional, Sequence
from dataclasses import dataclass


@dataclass
class MACDResult:
    """MACD line, signal line and histogram at the last price."""

    value: float
    signal: float
    histogram: float


@dataclass
class BollingerBandsResult:
    """Bollinger Bands at the last price."""

    upper: float
    middle: float
    lower: float


RSI_NEUTRAL = 50.0
MACD_MIN_PRICES = 35
MACD_LOOKBACK = 20


def _as_array(prices: Sequence[float]) -> np.ndarray:
    return np.asarray(prices, dtype=float)


def _last(data: np.ndarray) -> float:
    """Last element, or 0.0 for an empty series."""
    return float(data[-1]) if len(data) > 0 else 0.0


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """Simple Moving Average."""
    if len(data) < period:
        return np.full(len(data), np.nan)

    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = np.mean(data[i - period + 1 : i + 1])
    return result


def ema(data: np.ndarray, period: int) -> np.ndarray:
    """Exponential Moving Average."""
    if len(data) < period:
        return np.full(len(data), np.nan)

    result = np.full(len(data), np.nan)
    multiplier = 2 / (period + 1)

    # Start with SMA
    result[period - 1] = np.mean(data[:period])

    # Calculate EMA
    for i in range(period, len(data)):
        result[i] = (data[i] - result[i - 1]) * multiplier + result[i - 1]

    return result


def calculate_sma(prices: Sequence[float], period: int) -> float:
    """Mean of the last `period` prices; the last price if fewer."""
    data = _as_array(prices)
    if period <= 0 or len(data) < period:
        return _last(data)
    return float(sma(data[-period:], period)[-1])


def calculate_ema(prices: Sequence[float], period: int) -> float:
    """EMA seeded with the SMA of the first `period` prices; the last price if fewer."""
    data = _as_array(prices)
    if period <= 0 or len(data) < period:
        return _last(data)
    return float(ema(data, period)[-1])


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    if avg_gain == 0:
        return 0.0
    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """Relative Strength Index (Wilder smoothing)."""
    if period <= 0 or len(closes) < period + 1:
        return np.full(len(closes), np.nan)

    # Calculate price changes
    deltas = np.diff(closes)

    # Separate gains and losses
    gains = np.where(deltas > 0, deltas, 0)
    losses = np.where(deltas < 0, -deltas, 0)

    # First average
    avg_gain = np.mean(gains[:period])
    avg_loss = np.mean(losses[:period])

    result = np.full(len(closes), np.nan)
    result[period] = _rsi_from_averages(avg_gain, avg_loss)

    # Subsequent RSI values using smoothed averages
    for i in range(period, len(deltas)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        result[i + 1] = _rsi_from_averages(avg_gain, avg_loss)

    return result


def calculate_rsi(prices: Sequence[float], period: int = 14) -> float:
    """Wilder's RSI at the last price; 50 when fewer than period + 1 prices."""
    value = get_last_valid(rsi(_as_array(prices), period))
    return RSI_NEUTRAL if value is None else value


def calculate_macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """
    MACD (Moving Average Convergence Divergence).

    The signal line is a 9-period EMA over the MACD values of the trailing
    prefixes ending at max(26, n - 20) .. n. Fewer than 35 prices give
    all zeros.
    """
    data = _as_array(prices)
    n = len(data)
    if n < MACD_MIN_PRICES:
        return MACDResult(value=0.0, signal=0.0, histogram=0.0)

    fast_ema = ema(data, fast_period)
    slow_ema = ema(data, slow_period)

    # ema[i - 1] is the EMA of the prefix data[:i]
    start = max(slow_period, n - MACD_LOOKBACK)
    macd_values = fast_ema[start - 1 : n] - slow_ema[start - 1 : n]

    current = float(macd_values[-1])
    signal = calculate_ema(macd_values, signal_period)

    return MACDResult(value=current, signal=signal, histogram=current - signal)


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def calculate_bollinger_bands(
    prices: Sequence[float], period: int = 20, std_dev: float = 2.0
) -> BollingerBandsResult:
    """
    Bollinger Bands.

    Population variance over the last `period` prices, always divided by
    `period` (short series are not rescaled).
    """
    data = _as_array(prices)
    middle = calculate_sma(data, period)
    window = data[-period:] if period > 0 else data[:0]

    variance = float(np.sum((window - middle) ** 2)) / period if period > 0 else 0.0
    std = float(np.sqrt(variance))

    return BollingerBandsResult(
        upper=middle + (std * std_dev),
        middle=middle,
        lower=middle - (std * std_dev),
    )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_last_valid(arr: np.ndarray) -> Optional[float]:
    """Get last non-NaN value from array."""
    valid = arr[~np.isnan(arr)]
    return float(valid[-1]) if len(valid) > 0 else None
