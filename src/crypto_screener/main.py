"""Screener application: periodic refresh loop around the analysis engine."""

import asyncio
import logging
import os
import signal
import sys
from datetime import datetime
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .core.errors import DataError, SnapshotError
from .core.models import AnalysisRecord
from .data.connector import CCXTSnapshotProvider, SnapshotProvider
from .reporting.reporter import LogSink
from .scanner.screener import MarketScreener

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = 'crypto_screener.log'):
    """Configure root logging for the command-line entry point."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


class ScreenerApp:
    """Fetches a snapshot every refresh interval, ranks it and publishes the result."""

    def __init__(
        self,
        config: Optional[Dict] = None,
        provider: Optional[SnapshotProvider] = None,
        sink=None,
    ):
        """Initialize the application."""
        defaults = self._default_config()
        if config:
            for key, val in config.items():
                if isinstance(val, dict) and key in defaults and isinstance(defaults[key], dict):
                    defaults[key].update(val)
                else:
                    defaults[key] = val
        self.config = defaults

        self._running = False
        self._closed = False
        self._stop_event: Optional[asyncio.Event] = None
        self._cycle_count = 0
        self._last_records: List[AnalysisRecord] = []
        self._last_refresh: Optional[datetime] = None

        self._init_components(provider, sink)
        logger.info("Screener initialized")

    @staticmethod
    def _default_config() -> Dict:
        """Default configuration."""
        return {
            'exchange': {
                'name': 'binance',
                'timeout_ms': 30000,
            },
            'refresh': {
                'interval_seconds': 60,
            },
            'screener': {
                'quote_suffix': 'USDT',
                'min_quote_volume': 1_000_000,
                'skip_invalid': True,
            },
            'report': {
                'top_n': 20,
                'high_score': 70,
                'medium_score': 50,
            },
        }

    def _init_components(self, provider: Optional[SnapshotProvider], sink):
        exchange_cfg = self.config['exchange']
        self.provider = provider or CCXTSnapshotProvider(exchange_cfg['name'], exchange_cfg)
        self.screener = MarketScreener(self.config['screener'])

        report_cfg = self.config['report']
        self.sink = sink or LogSink(
            top_n=report_cfg['top_n'],
            high_score=report_cfg['high_score'],
            medium_score=report_cfg['medium_score'],
        )

    async def run_cycle(self) -> Optional[List[AnalysisRecord]]:
        """
        One refresh: fetch, analyze, publish.

        Returns the ranked records, or None when the cycle was skipped because
        the snapshot could not be fetched or a record aborted the batch.
        """
        try:
            stats = await self.provider.fetch_snapshot()
        except SnapshotError as e:
            logger.error(f"Skipping refresh cycle: {e}")
            return None

        try:
            records = self.screener.analyze(stats)
        except DataError as e:
            logger.error(f"Skipping refresh cycle: {e}")
            return None

        self.sink.publish(records)

        self._cycle_count += 1
        self._last_records = records
        self._last_refresh = datetime.now()
        return records

    async def start(self):
        """Run one cycle now, then one per refresh interval until stopped."""
        interval = self.config['refresh']['interval_seconds']
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")

        self._stop_event = asyncio.Event()
        self._running = True
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

        logger.info(f"Starting screener (refresh every {interval}s)")
        while self._running:
            await self.run_cycle()
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass

    async def stop(self):
        """Stop the refresh loop and release the provider."""
        try:
            logger.info("Stopping screener...")
            self._running = False
            if self._stop_event is not None:
                self._stop_event.set()
            if self._closed:
                return
            self._closed = True
            await self.provider.close()
            logger.info("Screener stopped")
        except Exception as e:
            logger.error(f"Error stopping screener: {e}")

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals."""
        logger.info(f"Received signal {signum}, shutting down...")
        asyncio.create_task(self.stop())

    def get_status(self) -> Dict:
        """Get screener status."""
        return {
            'running': self._running,
            'cycles': self._cycle_count,
            'last_record_count': len(self._last_records),
            'last_refresh': self._last_refresh,
        }


def _config_from_env() -> Dict:
    """Build config dict from environment variables."""
    config: Dict = {}

    exchange_name = os.getenv('EXCHANGE_NAME', '').strip()
    if exchange_name:
        config['exchange'] = {'name': exchange_name}

    interval = os.getenv('REFRESH_INTERVAL_SECONDS', '').strip()
    if interval:
        config['refresh'] = {'interval_seconds': float(interval)}

    quote_suffix = os.getenv('SCREENER_QUOTE_SUFFIX', '').strip()
    min_volume = os.getenv('SCREENER_MIN_QUOTE_VOLUME', '').strip()
    skip_invalid = os.getenv('SCREENER_SKIP_INVALID', '').strip().lower()
    if quote_suffix or min_volume or skip_invalid:
        config['screener'] = {}
        if quote_suffix:
            config['screener']['quote_suffix'] = quote_suffix
        if min_volume:
            config['screener']['min_quote_volume'] = float(min_volume)
        if skip_invalid in ('0', 'false', 'no'):
            config['screener']['skip_invalid'] = False
        elif skip_invalid in ('1', 'true', 'yes'):
            config['screener']['skip_invalid'] = True

    top_n = os.getenv('REPORT_TOP_N', '').strip()
    if top_n:
        config['report'] = {'top_n': int(top_n)}

    return config


async def main():
    """Main entry point."""
    load_dotenv()
    setup_logging()

    app = ScreenerApp(_config_from_env() or None)

    try:
        await app.start()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
    finally:
        await app.stop()


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
