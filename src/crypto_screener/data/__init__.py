"""Market data module."""

from .connector import SnapshotProvider, CCXTSnapshotProvider, StaticSnapshotProvider, stat_from_ticker

__all__ = [
    "SnapshotProvider",
    "CCXTSnapshotProvider",
    "StaticSnapshotProvider",
    "stat_from_ticker",
]
