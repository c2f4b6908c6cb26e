"""Market overview, tabular rendering and the logging sink."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from ..core.models import AnalysisRecord
from .formatters import format_percent, format_price, format_volume, recommendation_level

logger = logging.getLogger(__name__)

NO_DATA = "No data"

_COLUMNS = [
    'symbol', 'price', 'price_change_percent', 'quote_volume', 'trend',
    'target_price', 'expected_profit_percent', 'score', 'level',
]


@dataclass
class MarketOverview:
    """Headline figures for one ranked snapshot."""
    total: int = 0
    highest_volume: Optional[AnalysisRecord] = None
    highest_change: Optional[AnalysisRecord] = None
    mean_score: float = 0.0

    def describe(self) -> str:
        if not self.total:
            return NO_DATA
        return (
            f"{self.total} instruments | "
            f"top volume {self.highest_volume.symbol} ({format_volume(self.highest_volume.quote_volume)}) | "
            f"top change {self.highest_change.symbol} ({format_percent(self.highest_change.price_change_percent)}) | "
            f"mean score {self.mean_score:.1f}"
        )


def build_overview(records: Sequence[AnalysisRecord]) -> MarketOverview:
    """Summarise a ranked list. An empty list yields a neutral overview."""
    if not records:
        return MarketOverview()

    return MarketOverview(
        total=len(records),
        highest_volume=max(records, key=lambda r: r.quote_volume),
        highest_change=max(records, key=lambda r: r.price_change_percent),
        mean_score=float(np.mean([r.score for r in records])),
    )


def records_to_frame(
    records: Sequence[AnalysisRecord],
    top_n: Optional[int] = None,
    high_score: int = 70,
    medium_score: int = 50,
) -> pd.DataFrame:
    """Numeric DataFrame of the first *top_n* records, rank order kept."""
    rows = list(records[:top_n] if top_n is not None else records)
    if not rows:
        return pd.DataFrame(columns=_COLUMNS)

    return pd.DataFrame([
        {
            'symbol': r.symbol,
            'price': r.price,
            'price_change_percent': r.price_change_percent,
            'quote_volume': r.quote_volume,
            'trend': r.trend.value,
            'target_price': r.target_price,
            'expected_profit_percent': r.expected_profit_percent,
            'score': r.score,
            'level': recommendation_level(r.score, high_score, medium_score).value,
        }
        for r in rows
    ], columns=_COLUMNS)


def render_table(records: Sequence[AnalysisRecord], top_n: Optional[int] = 20, **levels) -> str:
    """Render the top records as a fixed-width text table."""
    df = records_to_frame(records, top_n, **levels)
    if df.empty:
        return NO_DATA

    display = pd.DataFrame({
        'Symbol': df['symbol'],
        'Price': df['price'].map(format_price),
        'Change': df['price_change_percent'].map(format_percent),
        'Volume': df['quote_volume'].map(format_volume),
        'Trend': df['trend'],
        'Target': df['target_price'].map(format_price),
        'Profit': df['expected_profit_percent'].map(format_percent),
        'Score': df['score'].map(lambda s: f"{s}/100"),
        'Level': df['level'],
    })
    return display.to_string(index=False)


class LogSink:
    """Presentation sink that writes the overview and table to the log."""

    def __init__(self, top_n: int = 20, high_score: int = 70, medium_score: int = 50):
        self.top_n = top_n
        self.high_score = high_score
        self.medium_score = medium_score
        self.last_rendered: Optional[str] = None

    def publish(self, records: List[AnalysisRecord]) -> str:
        overview = build_overview(records)
        table = render_table(
            records, self.top_n, high_score=self.high_score, medium_score=self.medium_score
        )
        self.last_rendered = f"{overview.describe()}\n{table}"
        logger.info(f"Market overview: {overview.describe()}")
        if records:
            logger.info(f"Top {min(self.top_n, len(records))} recommendations:\n{table}")
        return self.last_rendered
