"""
Indicator Signals

Signal classification, strength scores and the aggregate recommendation.
"""

from marketpulse.schemas.indicators import (
    Indicator,
    Recommendation,
    RecommendationAction,
    SignalType,
)

STRONG_THRESHOLD = 70
THRESHOLD = 55


def _clamp_strength(value: float) -> float:
    return round(max(0.0, min(value, 100.0)), 2)


def classify_rsi(value: float) -> SignalType:
    if value > 70:
        return SignalType.OVERBOUGHT
    if value < 30:
        return SignalType.OVERSOLD
    if value > 50:
        return SignalType.BULLISH
    return SignalType.BEARISH


def rsi_strength(value: float) -> float:
    return _clamp_strength(abs(value - 50) * 2)


def classify_macd(histogram: float) -> SignalType:
    return SignalType.BULLISH if histogram > 0 else SignalType.BEARISH


def macd_strength(histogram: float) -> float:
    return _clamp_strength(abs(histogram) * 10)


def classify_moving_average(price: float, average: float) -> SignalType:
    return SignalType.BULLISH if price > average else SignalType.BEARISH


def moving_average_strength(price: float, average: float) -> float:
    if price == 0:
        return 0.0
    return _clamp_strength(abs(price - average) / abs(price) * 100 * 20)


def classify_bollinger(price: float, upper: float, lower: float) -> SignalType:
    if price > upper:
        return SignalType.OVERBOUGHT
    if price < lower:
        return SignalType.OVERSOLD
    return SignalType.NEUTRAL


def bollinger_strength(price: float, upper: float, lower: float) -> float:
    """Distance outside the band as % of the band, x10; 50 inside the bands."""
    if price > upper:
        return _clamp_strength((price - upper) / upper * 100 * 10) if upper > 0 else 0.0
    if price < lower:
        return _clamp_strength((lower - price) / lower * 100 * 10) if lower > 0 else 0.0
    return 50.0


def build_recommendation(indicators: list[Indicator]) -> Recommendation:
    """
    Aggregate an indicator batch.

    Only Bullish and Bearish count towards the percentages; Neutral,
    Overbought and Oversold are tallied as neutral.
    """
    bullish_count = sum(1 for i in indicators if i.signal == SignalType.BULLISH)
    bearish_count = sum(1 for i in indicators if i.signal == SignalType.BEARISH)
    total = len(indicators)
    neutral_count = total - bullish_count - bearish_count

    if total == 0:
        return Recommendation(
            action=RecommendationAction.NEUTRAL,
            confidence=50,
            bullish_count=0,
            bearish_count=0,
            neutral_count=0,
        )

    bullish_percent = bullish_count / total * 100
    bearish_percent = bearish_count / total * 100

    if bullish_percent > STRONG_THRESHOLD:
        action, confidence = RecommendationAction.STRONG_BULLISH, bullish_percent
    elif bullish_percent > THRESHOLD:
        action, confidence = RecommendationAction.BULLISH, bullish_percent
    elif bearish_percent > STRONG_THRESHOLD:
        action, confidence = RecommendationAction.STRONG_BEARISH, bearish_percent
    elif bearish_percent > THRESHOLD:
        action, confidence = RecommendationAction.BEARISH, bearish_percent
    else:
        action = RecommendationAction.NEUTRAL
        confidence = 50 + abs(bullish_percent - bearish_percent) / 2

    return Recommendation(
        action=action,
        confidence=min(100, max(0, int(confidence + 0.5))),
        bullish_count=bullish_count,
        bearish_count=bearish_count,
        neutral_count=neutral_count,
    )
