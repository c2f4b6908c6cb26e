"""
Crypto Market Screener

Ranks exchange instruments from a 24h ticker snapshot by a composite
liquidity/volatility/direction score and projects a target price for each.
"""

__version__ = "0.1.0"

from .core.models import InstrumentStat, AnalysisRecord
from .core.enums import Trend
from .core.config import ScreenerConfig
from .core.errors import ConfigurationError, DataError
from .scanner.screener import MarketScreener, analyze_snapshot

__all__ = [
    "InstrumentStat",
    "AnalysisRecord",
    "Trend",
    "ScreenerConfig",
    "ConfigurationError",
    "DataError",
    "MarketScreener",
    "analyze_snapshot",
]
