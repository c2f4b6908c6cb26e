"""Display formatting helpers for ranked records."""

from ..core.enums import RecommendationLevel


def format_volume(value: float) -> str:
    """Abbreviate a volume with a B/M/K suffix, two decimals."""
    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.2f}B"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{value / 1_000:.2f}K"
    return f"{value:.2f}"


def format_price(value: float) -> str:
    return f"{value:.8f}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def recommendation_level(score: int, high: int = 70, medium: int = 50) -> RecommendationLevel:
    """Highlight tier for a score: HIGH at or above *high*, MEDIUM at or above *medium*."""
    if score >= high:
        return RecommendationLevel.HIGH
    if score >= medium:
        return RecommendationLevel.MEDIUM
    return RecommendationLevel.NONE
