"""Presentation helpers and sinks for ranked records."""

from .formatters import format_percent, format_price, format_volume, recommendation_level
from .reporter import LogSink, MarketOverview, build_overview, records_to_frame, render_table

__all__ = [
    "format_percent",
    "format_price",
    "format_volume",
    "recommendation_level",
    "LogSink",
    "MarketOverview",
    "build_overview",
    "records_to_frame",
    "render_table",
]
