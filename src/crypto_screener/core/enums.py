"""Core enumerations for the screener."""

from enum import Enum


class Trend(str, Enum):
    """24h trend classification."""
    STRONG_UP = "strong_up"
    UP = "up"
    SIDEWAYS = "sideways"
    DOWN = "down"
    STRONG_DOWN = "strong_down"


class RecommendationLevel(str, Enum):
    """Recommendation tiers used for highlighting ranked rows."""
    HIGH = "high"
    MEDIUM = "medium"
    NONE = "none"
