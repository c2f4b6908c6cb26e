"""Engine configuration.

Every constant the filter and scorer use lives here so that callers (and
tests) can override them without touching the scoring code.
"""

from typing import Tuple

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError


class ScreenerConfig(BaseModel):
    """Immutable set of filter and scoring constants."""

    # Filter
    quote_suffix: str = Field(default="USDT", description="Required symbol suffix (quote currency)")
    min_quote_volume: float = Field(default=1_000_000, description="Strict lower bound on 24h quote volume")

    # Composite score weights (sum to 100 by default)
    volume_weight: float = Field(default=30.0, ge=0.0, description="Weight of the liquidity factor")
    volatility_weight: float = Field(default=40.0, ge=0.0, description="Weight of the |change| factor")
    direction_weight: float = Field(default=30.0, ge=0.0, description="Weight of the positive-change factor")

    # Normalization ranges (lo, hi)
    volume_range: Tuple[float, float] = Field(default=(0.0, 1_000_000_000.0), description="Quote volume range")
    volatility_range: Tuple[float, float] = Field(default=(0.0, 30.0), description="|change %| range")

    # Trend thresholds (percent points)
    strong_trend_threshold: float = Field(default=5.0, description="|change| above which a trend is strong")
    trend_threshold: float = Field(default=2.0, description="|change| above which a trend is directional")

    # Target price
    uptrend_volatility_factor: float = Field(default=0.5, description="Share of 24h range extrapolated upward")
    uptrend_high_cap: float = Field(default=1.05, description="Uptrend target cap as a multiple of the 24h high")
    bounce_factor: float = Field(default=0.3, description="Bounce per percent point of drop")

    # Per-record error policy: True skips bad records, False fails the batch
    skip_invalid: bool = Field(default=True, description="Skip malformed records instead of failing the batch")

    class Config:
        frozen = True

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid screener configuration: {e}") from e
        self._check_consistency()

    def _check_consistency(self) -> None:
        """Cross-field checks, run once every field (default or override) is set."""
        for name in ('volume_range', 'volatility_range'):
            lo, hi = getattr(self, name)
            if hi <= lo:
                raise ConfigurationError(f"{name} must satisfy lo < hi, got ({lo}, {hi})")

        if self.total_weight > 100.0:
            raise ConfigurationError(f"Score weights must sum to at most 100, got {self.total_weight}")

        if self.trend_threshold > self.strong_trend_threshold:
            raise ConfigurationError(
                f"trend_threshold ({self.trend_threshold}) must not exceed "
                f"strong_trend_threshold ({self.strong_trend_threshold})"
            )

    @property
    def total_weight(self) -> float:
        return self.volume_weight + self.volatility_weight + self.direction_weight


DEFAULT_CONFIG = ScreenerConfig()
