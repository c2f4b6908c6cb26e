"""Snapshot provider interface and CCXT implementation."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

import ccxt.async_support as ccxt
from pydantic import ValidationError

from ..core.errors import SnapshotError
from ..core.models import InstrumentStat

logger = logging.getLogger(__name__)

_BINANCE_FIELDS = ('symbol', 'lastPrice', 'highPrice', 'lowPrice', 'priceChangePercent', 'quoteVolume')


def _exchange_symbol(unified: str) -> str:
    """Turn a CCXT unified symbol (``BTC/USDT`` or ``BTC/USDT:USDT``) into ``BTCUSDT``."""
    return unified.split(':')[0].replace('/', '')


def stat_from_ticker(ticker: Dict[str, Any]) -> InstrumentStat:
    """
    Convert one CCXT ticker into an InstrumentStat.

    The raw exchange payload is preferred when it carries the Binance 24hr
    fields; otherwise the unified CCXT fields are used.
    """
    info = ticker.get('info') or {}
    if all(key in info for key in _BINANCE_FIELDS):
        return InstrumentStat.from_binance(info)

    last = ticker.get('last') or 0.0
    return InstrumentStat(
        symbol=_exchange_symbol(ticker['symbol']),
        last_price=last,
        high_price_24h=ticker.get('high') or last,
        low_price_24h=ticker.get('low') or last,
        price_change_percent_24h=ticker.get('percentage') or 0.0,
        volume_24h=ticker.get('baseVolume') or 0.0,
        quote_volume_24h=ticker.get('quoteVolume') or 0.0,
    )


class SnapshotProvider(ABC):
    """Abstract source of market snapshots."""

    @abstractmethod
    async def fetch_snapshot(self) -> List[InstrumentStat]:
        """Fetch one complete snapshot of 24h statistics."""
        pass

    @abstractmethod
    async def close(self):
        """Close connection."""
        pass


class CCXTSnapshotProvider(SnapshotProvider):
    """Snapshot provider backed by a CCXT exchange's ``fetch_tickers``."""

    def __init__(self, exchange_name: str = 'binance', config: Optional[Dict] = None, exchange=None):
        self.exchange_name = exchange_name
        self.config = config or {}

        if exchange is not None:
            self.exchange = exchange
        else:
            exchange_class = getattr(ccxt, exchange_name)
            self.exchange = exchange_class({
                'enableRateLimit': True,
                'timeout': self.config.get('timeout_ms', 30000),
                'options': {'defaultType': 'spot'},
            })

        logger.info(f"Initialized snapshot provider for {exchange_name}")

    async def fetch_snapshot(self) -> List[InstrumentStat]:
        """Fetch all tickers and convert them. Unconvertible tickers are dropped."""
        try:
            tickers = await self.exchange.fetch_tickers()
        except Exception as e:
            logger.error(f"Error fetching tickers from {self.exchange_name}: {e}")
            raise SnapshotError(f"Failed to fetch snapshot from {self.exchange_name}: {e}") from e

        stats: List[InstrumentStat] = []
        for symbol, ticker in tickers.items():
            try:
                stats.append(stat_from_ticker(ticker))
            except (KeyError, TypeError, ValidationError) as e:
                logger.debug(f"Dropping ticker {symbol}: {e}")

        logger.debug(f"Fetched snapshot of {len(stats)} instruments ({len(tickers)} tickers)")
        return stats

    async def close(self):
        """Close the underlying exchange session."""
        await self.exchange.close()
        logger.info(f"Closed snapshot provider for {self.exchange_name}")


class StaticSnapshotProvider(SnapshotProvider):
    """Provider that replays a fixed snapshot. Used for dry runs and tests."""

    def __init__(self, stats: List[InstrumentStat]):
        self._stats = list(stats)

    async def fetch_snapshot(self) -> List[InstrumentStat]:
        return list(self._stats)

    async def close(self):
        pass
