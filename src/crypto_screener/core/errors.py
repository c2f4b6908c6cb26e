"""Exception hierarchy for the screener."""

from typing import Optional


class ScreenerError(Exception):
    """Base class for all screener errors."""


class ConfigurationError(ScreenerError, ValueError):
    """Raised when engine constants are inconsistent (e.g. a collapsed range)."""


class DataError(ScreenerError, ValueError):
    """Raised when a single instrument record cannot be scored."""

    def __init__(self, message: str, symbol: Optional[str] = None):
        self.symbol = symbol
        if symbol:
            message = f"{symbol}: {message}"
        super().__init__(message)


class SnapshotError(ScreenerError):
    """Raised when the snapshot provider fails to deliver a snapshot."""
