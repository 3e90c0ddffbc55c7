"""Tests for weight-gain evaluation."""
from datetime import date

import pytest

from app.domain.weight_gain import (
    HealthObservation,
    PersonalBaseline,
    WeightGainBand,
    classify_gain,
    compute_bmi,
    evaluate_weight_gain,
    recommended_total_gain_kg,
    summarize_health,
)

pytestmark = pytest.mark.unit

BASELINE = PersonalBaseline(height_cm=165, age_years=28, pre_pregnancy_weight_kg=60)


def _obs(weight: float, day: int = 1) -> HealthObservation:
    return HealthObservation(date=date(2026, 1, day), weight_kg=weight)


class TestEvaluateWeightGain:
    def test_no_observations_is_no_data(self):
        status = evaluate_weight_gain([], BASELINE, pregnancy_week=10)

        assert status.band == WeightGainBand.NO_DATA
        assert status.current_gain_kg == 0
        assert status.progress_percent == 0

    def test_healthy_gain(self):
        status = evaluate_weight_gain([_obs(65)], BASELINE, pregnancy_week=10)

        assert status.current_gain_kg == pytest.approx(5)
        assert status.expected_gain_kg == pytest.approx(4)
        assert status.difference_kg == pytest.approx(1)
        assert status.band == WeightGainBand.HEALTHY

    def test_weight_loss_is_underweight_gain(self):
        status = evaluate_weight_gain([_obs(55)], BASELINE, pregnancy_week=10)

        assert status.current_gain_kg == pytest.approx(-5)
        assert status.difference_kg == pytest.approx(-9)
        assert status.band == WeightGainBand.UNDERWEIGHT_GAIN

    def test_latest_observation_wins(self):
        status = evaluate_weight_gain([_obs(70, day=1), _obs(62, day=8)], BASELINE, pregnancy_week=5)
        assert status.current_gain_kg == pytest.approx(2)

    def test_progress_capped_at_hundred(self):
        # Baseline 60 kg recommends 5 kg total
        status = evaluate_weight_gain([_obs(70)], BASELINE, pregnancy_week=30)

        assert status.recommended_total_gain_kg == 5
        assert status.progress_percent == 100

    def test_negative_progress_displayed_as_zero(self):
        status = evaluate_weight_gain([_obs(58)], BASELINE, pregnancy_week=4)

        assert status.progress_percent < 0
        assert status.display_progress_percent == 0

    def test_models_can_disagree(self):
        """Recommended-total progress can be full while the weekly band is healthy."""
        status = evaluate_weight_gain([_obs(72)], BASELINE, pregnancy_week=30)

        assert status.progress_percent == 100
        assert status.band == WeightGainBand.HEALTHY


class TestClassifyGain:
    def test_boundaries_are_exclusive(self):
        # expected at week 10 is 4 kg
        assert classify_gain(2, 10) == WeightGainBand.HEALTHY
        assert classify_gain(7, 10) == WeightGainBand.HEALTHY
        assert classify_gain(1.9, 10) == WeightGainBand.UNDERWEIGHT_GAIN
        assert classify_gain(7.1, 10) == WeightGainBand.EXCESSIVE


class TestRecommendedTotalGain:
    @pytest.mark.parametrize(
        "weight,expected",
        [(17, 12.5), (18.5, 11.5), (24, 11.5), (25, 7), (29, 7), (30, 5), (35, 5)],
    )
    def test_bands(self, weight, expected):
        assert recommended_total_gain_kg(weight) == expected


class TestComputeBmi:
    def test_rounded_to_one_decimal(self):
        assert compute_bmi(65, 165) == 23.9

    def test_non_positive_height(self):
        assert compute_bmi(65, 0) is None


class TestSummarizeHealth:
    def test_summary_totals(self):
        summary = summarize_health([_obs(61, day=1), _obs(63, day=15)], BASELINE, pregnancy_week=12)

        assert summary.total_entries == 2
        assert summary.current_weight_kg == 63
        assert summary.total_gain_kg == pytest.approx(3)
        assert [e.gain_kg for e in summary.entries] == [pytest.approx(1), pytest.approx(3)]
        assert summary.entries[1].bmi == 23.1

    def test_empty_summary(self):
        summary = summarize_health([], BASELINE, pregnancy_week=0)

        assert summary.status.band == WeightGainBand.NO_DATA
        assert summary.total_entries == 0
        assert summary.current_weight_kg is None
        assert summary.entries == []
