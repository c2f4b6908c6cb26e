"""Core module for the screener."""

from .models import InstrumentStat, AnalysisRecord
from .enums import Trend, RecommendationLevel
from .config import ScreenerConfig, DEFAULT_CONFIG
from .errors import ScreenerError, ConfigurationError, DataError, SnapshotError

__all__ = [
    "InstrumentStat",
    "AnalysisRecord",
    "Trend",
    "RecommendationLevel",
    "ScreenerConfig",
    "DEFAULT_CONFIG",
    "ScreenerError",
    "ConfigurationError",
    "DataError",
    "SnapshotError",
]
