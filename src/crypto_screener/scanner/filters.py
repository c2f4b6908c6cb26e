"""Eligibility filter: quote-currency suffix and liquidity gate."""

import logging
from typing import Iterable, List, Optional

from ..core.config import DEFAULT_CONFIG, ScreenerConfig
from ..core.models import InstrumentStat

logger = logging.getLogger(__name__)


def is_eligible(stat: InstrumentStat, config: Optional[ScreenerConfig] = None) -> bool:
    """True when *stat* passes every eligibility predicate."""
    config = config or DEFAULT_CONFIG
    return (
        stat.symbol.endswith(config.quote_suffix)
        and stat.volume_24h > 0
        and stat.quote_volume_24h > config.min_quote_volume
    )


def filter_eligible(
    stats: Iterable[InstrumentStat],
    config: Optional[ScreenerConfig] = None,
) -> List[InstrumentStat]:
    """Return the eligible instruments of a snapshot, input order preserved."""
    config = config or DEFAULT_CONFIG
    stats = list(stats)
    result = [s for s in stats if is_eligible(s, config)]

    logger.debug(
        f"Filtered {len(result)} {config.quote_suffix} pairs from {len(stats)} total "
        f"(min quote volume {config.min_quote_volume:,.0f})"
    )
    return result
