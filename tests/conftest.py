"""Pytest configuration and fixtures."""

import pytest

from crypto_screener.core.config import ScreenerConfig
from crypto_screener.core.models import InstrumentStat


def make_stat(
    symbol="ABCUSDT",
    last=100.0,
    high=110.0,
    low=90.0,
    pct=6.0,
    volume=500.0,
    quote_volume=2_000_000.0,
):
    return InstrumentStat(
        symbol=symbol,
        last_price=last,
        high_price_24h=high,
        low_price_24h=low,
        price_change_percent_24h=pct,
        volume_24h=volume,
        quote_volume_24h=quote_volume,
    )


def make_binance_payload(symbol="BTCUSDT", last="100.0", high="110.0", low="90.0",
                         pct="6.0", volume="500.0", quote_volume="2000000.0"):
    """Raw Binance /api/v3/ticker/24hr entry (numbers as strings)."""
    return {
        "symbol": symbol,
        "lastPrice": last,
        "highPrice": high,
        "lowPrice": low,
        "priceChangePercent": pct,
        "volume": volume,
        "quoteVolume": quote_volume,
    }


@pytest.fixture
def default_config():
    return ScreenerConfig()


@pytest.fixture
def uptrend_stat():
    """Instrument from the worked uptrend example."""
    return make_stat()


@pytest.fixture
def downtrend_stat():
    """Same instrument after an 8% drop."""
    return make_stat(pct=-8.0)


@pytest.fixture
def sample_snapshot():
    """Mixed snapshot: eligible, wrong suffix, illiquid, inactive."""
    return [
        make_stat("ABCUSDT", pct=6.0, quote_volume=2_000_000),
        make_stat("XYZBTC", pct=12.0, quote_volume=900_000_000),
        make_stat("LOWUSDT", pct=3.0, quote_volume=999_999),
        make_stat("DEADUSDT", pct=1.0, volume=0.0, quote_volume=5_000_000),
        make_stat("BIGUSDT", pct=-1.0, quote_volume=800_000_000),
        make_stat("HOTUSDT", pct=25.0, quote_volume=50_000_000),
    ]
