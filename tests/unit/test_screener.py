"""Unit tests for the screener pipeline and its error policy."""

import pytest

from crypto_screener.core.config import ScreenerConfig
from crypto_screener.core.errors import ConfigurationError, DataError
from crypto_screener.scanner.screener import MarketScreener, analyze_snapshot

from conftest import make_stat


class TestAnalyzeSnapshot:
    def test_ranked_output(self, sample_snapshot):
        records = analyze_snapshot(sample_snapshot)
        # HOT: 1.5 + 33.33 + 30, ABC: 38.06, BIG: 24 + 1.33
        assert [(r.symbol, r.score) for r in records] == [
            ("HOTUSDT", 65),
            ("ABCUSDT", 38),
            ("BIGUSDT", 25),
        ]

    def test_output_is_exactly_filtered_subset(self, sample_snapshot):
        records = analyze_snapshot(sample_snapshot)
        assert {r.symbol for r in records} == {"ABCUSDT", "BIGUSDT", "HOTUSDT"}

    def test_empty_snapshot(self):
        assert analyze_snapshot([]) == []

    def test_no_eligible(self):
        assert analyze_snapshot([make_stat("XYZBTC")]) == []

    def test_idempotent(self, sample_snapshot):
        first = analyze_snapshot(sample_snapshot)
        second = analyze_snapshot(list(sample_snapshot))
        assert first == second
        assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]

    def test_ties_follow_input_order(self):
        snapshot = [make_stat("AUSDT"), make_stat("BUSDT"), make_stat("CUSDT")]
        assert [r.symbol for r in analyze_snapshot(snapshot)] == ["AUSDT", "BUSDT", "CUSDT"]
        assert [r.symbol for r in analyze_snapshot(snapshot[::-1])] == ["CUSDT", "BUSDT", "AUSDT"]


class TestErrorPolicy:
    def _snapshot(self):
        return [
            make_stat("GOODUSDT", pct=6.0),
            make_stat("BADUSDT", low=0.0, pct=6.0),
            make_stat("ZEROUSDT", last=0.0, pct=-1.0),
            make_stat("ALSOUSDT", pct=-3.0),
        ]

    def test_skip_and_continue_by_default(self):
        records = analyze_snapshot(self._snapshot())
        assert [r.symbol for r in records] == ["GOODUSDT", "ALSOUSDT"]

    def test_fail_whole_batch(self):
        config = ScreenerConfig(skip_invalid=False)
        with pytest.raises(DataError) as exc:
            analyze_snapshot(self._snapshot(), config)
        assert exc.value.symbol == "BADUSDT"

    def test_skipped_records_are_logged(self, caplog):
        with caplog.at_level("WARNING"):
            analyze_snapshot(self._snapshot())
        assert "BADUSDT" in caplog.text
        assert "ZEROUSDT" in caplog.text


class TestMarketScreener:
    def test_inconsistent_dict_config_rejected(self):
        with pytest.raises(ConfigurationError, match="at most 100"):
            MarketScreener({"volume_weight": 100})

    def test_max_scores_stay_within_bounds(self):
        screener = MarketScreener({"volume_weight": 60, "volatility_weight": 20, "direction_weight": 20})
        records = screener.analyze([make_stat(pct=40.0, quote_volume=5_000_000_000)])
        assert [r.score for r in records] == [100]

    def test_accepts_dict_config(self):
        screener = MarketScreener({"quote_suffix": "BTC", "min_quote_volume": 0})
        assert screener.config.quote_suffix == "BTC"
        records = screener.analyze([make_stat("ETHBTC"), make_stat("ETHUSDT")])
        assert [r.symbol for r in records] == ["ETHBTC"]

    def test_default_config(self, sample_snapshot):
        screener = MarketScreener()
        assert screener.analyze(sample_snapshot) == analyze_snapshot(sample_snapshot)

    def test_steps(self, sample_snapshot):
        screener = MarketScreener(ScreenerConfig())
        eligible = screener.filter(sample_snapshot)
        assert len(eligible) == 3
        assert screener.score(eligible[0]).symbol == "ABCUSDT"

    def test_top(self, sample_snapshot):
        records = MarketScreener().analyze(sample_snapshot)
        assert [r.symbol for r in MarketScreener.top(records, 2)] == ["HOTUSDT", "ABCUSDT"]
