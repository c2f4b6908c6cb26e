"""Market screener: eligibility filter, scoring and ranking."""

from .filters import filter_eligible, is_eligible
from .scoring import (
    classify_trend,
    composite_score,
    expected_profit_percent,
    normalize,
    rank_records,
    score_instrument,
    target_price,
)
from .screener import MarketScreener, analyze_snapshot

__all__ = [
    "MarketScreener",
    "analyze_snapshot",
    "filter_eligible",
    "is_eligible",
    "classify_trend",
    "composite_score",
    "expected_profit_percent",
    "normalize",
    "rank_records",
    "score_instrument",
    "target_price",
]
