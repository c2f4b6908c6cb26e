"""Scoring and target-price computations.

All functions here are pure: they read an ``InstrumentStat`` and a
``ScreenerConfig`` and return plain values or a new ``AnalysisRecord``.
"""

import math
from typing import Iterable, List, Optional

from ..core.config import DEFAULT_CONFIG, ScreenerConfig
from ..core.enums import Trend
from ..core.errors import ConfigurationError, DataError
from ..core.models import AnalysisRecord, InstrumentStat


def normalize(value: float, lo: float, hi: float) -> float:
    """Map *value* linearly from [lo, hi] onto [0, 1], clamping outside the range."""
    if hi <= lo:
        raise ConfigurationError(f"Degenerate normalization range ({lo}, {hi})")
    return min(max((value - lo) / (hi - lo), 0.0), 1.0)


def classify_trend(price_change_pct: float, config: Optional[ScreenerConfig] = None) -> Trend:
    """Classify a 24h percent change. First matching rule wins."""
    config = config or DEFAULT_CONFIG
    if price_change_pct > config.strong_trend_threshold:
        return Trend.STRONG_UP
    if price_change_pct > config.trend_threshold:
        return Trend.UP
    if price_change_pct < -config.strong_trend_threshold:
        return Trend.STRONG_DOWN
    if price_change_pct < -config.trend_threshold:
        return Trend.DOWN
    return Trend.SIDEWAYS


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def composite_score(stat: InstrumentStat, config: Optional[ScreenerConfig] = None) -> int:
    """
    Weighted blend of liquidity, volatility and direction, rounded to an int.

    Each factor is normalized to [0, 1] before weighting, so the result never
    leaves [0, sum of weights].
    """
    config = config or DEFAULT_CONFIG
    change = stat.price_change_percent_24h

    volume_factor = normalize(stat.quote_volume_24h, *config.volume_range)
    volatility_factor = normalize(abs(change), *config.volatility_range)
    direction_factor = 1.0 if change > 0 else 0.0

    raw = (
        volume_factor * config.volume_weight
        + volatility_factor * config.volatility_weight
        + direction_factor * config.direction_weight
    )
    return _round_half_up(raw)


def target_price(stat: InstrumentStat, config: Optional[ScreenerConfig] = None) -> float:
    """
    Project a target price from the 24h range and change.

    Uptrend: extrapolate half the relative 24h range, capped 5% above the high.
    Flat/downtrend: bounce proportional to the drop, capped at the high.
    """
    config = config or DEFAULT_CONFIG
    price = stat.last_price
    high = stat.high_price_24h
    low = stat.low_price_24h
    change = stat.price_change_percent_24h

    if change > 0:
        if low <= 0:
            raise DataError(f"24h low must be positive to derive volatility, got {low}", stat.symbol)
        volatility = (high - low) / low
        up_target = price * (1 + volatility * config.uptrend_volatility_factor)
        return min(up_target, high * config.uptrend_high_cap)

    bounce_target = price * (1 + abs(change) * config.bounce_factor)
    return min(bounce_target, high)


def expected_profit_percent(target: float, price: float, symbol: Optional[str] = None) -> float:
    """Return to *target* from *price*, in percent."""
    if price <= 0:
        raise DataError(f"price must be positive, got {price}", symbol)
    return (target - price) / price * 100


def _check_finite(stat: InstrumentStat) -> None:
    fields = {
        'last_price': stat.last_price,
        'high_price_24h': stat.high_price_24h,
        'low_price_24h': stat.low_price_24h,
        'price_change_percent_24h': stat.price_change_percent_24h,
        'quote_volume_24h': stat.quote_volume_24h,
    }
    for name, value in fields.items():
        if not math.isfinite(value):
            raise DataError(f"{name} is not finite ({value})", stat.symbol)


def score_instrument(stat: InstrumentStat, config: Optional[ScreenerConfig] = None) -> AnalysisRecord:
    """Build the AnalysisRecord for one eligible instrument."""
    config = config or DEFAULT_CONFIG
    _check_finite(stat)
    if stat.last_price <= 0:
        raise DataError(f"last price must be positive, got {stat.last_price}", stat.symbol)

    target = target_price(stat, config)
    return AnalysisRecord(
        symbol=stat.symbol,
        price=stat.last_price,
        price_change_percent=stat.price_change_percent_24h,
        quote_volume=stat.quote_volume_24h,
        trend=classify_trend(stat.price_change_percent_24h, config),
        target_price=target,
        expected_profit_percent=expected_profit_percent(target, stat.last_price, stat.symbol),
        score=composite_score(stat, config),
    )


def rank_records(records: Iterable[AnalysisRecord]) -> List[AnalysisRecord]:
    """Sort descending by score. Equal scores keep their input order."""
    return sorted(records, key=lambda r: r.score, reverse=True)
