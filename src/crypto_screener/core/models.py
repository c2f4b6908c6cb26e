"""Core data models for the screener."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .enums import Trend


class InstrumentStat(BaseModel):
    """24h statistics for one traded pair in a snapshot."""

    symbol: str = Field(description="Exchange ticker, e.g. BTCUSDT")

    # Price data
    last_price: float = Field(description="Last traded price")
    high_price_24h: float = Field(description="24h high")
    low_price_24h: float = Field(description="24h low")
    price_change_percent_24h: float = Field(description="Signed 24h percent change")

    # Liquidity
    volume_24h: float = Field(default=0.0, description="24h volume in base asset")
    quote_volume_24h: float = Field(default=0.0, description="24h volume in quote currency")

    class Config:
        frozen = True

    @classmethod
    def from_binance(cls, payload: Dict[str, Any]) -> "InstrumentStat":
        """Build from a Binance ``/api/v3/ticker/24hr`` entry (numbers as strings)."""
        return cls(
            symbol=payload['symbol'],
            last_price=payload.get('lastPrice') or 0.0,
            high_price_24h=payload.get('highPrice') or 0.0,
            low_price_24h=payload.get('lowPrice') or 0.0,
            price_change_percent_24h=payload.get('priceChangePercent') or 0.0,
            volume_24h=payload.get('volume') or 0.0,
            quote_volume_24h=payload.get('quoteVolume') or 0.0,
        )


class AnalysisRecord(BaseModel):
    """Scored, annotated instrument."""

    symbol: str = Field(description="Exchange ticker")
    price: float = Field(description="Last traded price")
    price_change_percent: float = Field(description="Signed 24h percent change")
    quote_volume: float = Field(description="24h volume in quote currency")

    trend: Trend = Field(description="Trend classification")
    target_price: float = Field(description="Projected target price")
    expected_profit_percent: float = Field(description="Return to target, in percent")
    score: int = Field(ge=0, le=100, description="Composite recommendation score (0-100)")

    class Config:
        frozen = True

    def __lt__(self, other: "AnalysisRecord") -> bool:
        return self.score < other.score
