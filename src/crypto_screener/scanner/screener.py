"""Market screener: filters a snapshot, scores it and ranks the result."""

import logging
from typing import Dict, Iterable, List, Optional, Union

from ..core.config import DEFAULT_CONFIG, ScreenerConfig
from ..core.errors import DataError
from ..core.models import AnalysisRecord, InstrumentStat
from .filters import filter_eligible
from .scoring import rank_records, score_instrument

logger = logging.getLogger(__name__)


def analyze_snapshot(
    stats: Iterable[InstrumentStat],
    config: Optional[ScreenerConfig] = None,
) -> List[AnalysisRecord]:
    """
    Full analysis pass over one snapshot.

    Records that raise ``DataError`` are skipped with a warning when
    ``config.skip_invalid`` is set; otherwise the first one aborts the batch.
    """
    config = config or DEFAULT_CONFIG
    eligible = filter_eligible(stats, config)

    if not eligible:
        logger.warning("No instruments passed filtering")
        return []

    records: List[AnalysisRecord] = []
    skipped = 0
    for stat in eligible:
        try:
            records.append(score_instrument(stat, config))
        except DataError as e:
            if not config.skip_invalid:
                logger.error(f"Aborting analysis: {e}")
                raise
            skipped += 1
            logger.warning(f"Skipping instrument: {e}")

    if skipped:
        logger.info(f"Skipped {skipped} of {len(eligible)} eligible instruments")

    return rank_records(records)


class MarketScreener:
    """
    Stateless wrapper around the filter/score/rank pipeline.

    Holds only its (immutable) configuration, so one instance can be shared
    across refresh cycles and callers.
    """

    def __init__(self, config: Optional[Union[ScreenerConfig, Dict]] = None):
        if isinstance(config, ScreenerConfig):
            self.config = config
        elif config:
            self.config = ScreenerConfig(**config)
        else:
            self.config = DEFAULT_CONFIG

    def filter(self, stats: Iterable[InstrumentStat]) -> List[InstrumentStat]:
        return filter_eligible(stats, self.config)

    def score(self, stat: InstrumentStat) -> AnalysisRecord:
        return score_instrument(stat, self.config)

    def analyze(self, stats: Iterable[InstrumentStat]) -> List[AnalysisRecord]:
        """Filter, score and rank one snapshot."""
        records = analyze_snapshot(stats, self.config)
        logger.info(f"Analysis complete: {len(records)} ranked instruments")
        return records

    @staticmethod
    def top(records: List[AnalysisRecord], n: int) -> List[AnalysisRecord]:
        """Return the first *n* records of an already ranked list."""
        return records[:n]
