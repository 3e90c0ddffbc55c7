"""Weight-gain evaluation against a pre-pregnancy baseline.

Two independent models are reported side by side and may disagree:
- progress toward a recommended total gain, banded on pre-pregnancy weight
- a week-relative band comparing actual gain to 0.4 kg per week

Pure functions -- no DB access.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

EXPECTED_GAIN_PER_WEEK_KG = 0.4
UNDERWEIGHT_GAIN_MARGIN_KG = -2
EXCESSIVE_GAIN_MARGIN_KG = 3


class WeightGainBand(str, Enum):
    UNDERWEIGHT_GAIN = "underweight_gain"
    HEALTHY = "healthy"
    EXCESSIVE = "excessive"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class HealthObservation:
    date: date
    weight_kg: float
    systolic_bp: int | None = None
    diastolic_bp: int | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PersonalBaseline:
    height_cm: float
    age_years: int
    pre_pregnancy_weight_kg: float
    due_date: date | None = None


@dataclass(frozen=True)
class WeightGainStatus:
    band: WeightGainBand
    pregnancy_week: int
    current_gain_kg: float = 0.0
    expected_gain_kg: float = 0.0
    difference_kg: float = 0.0
    recommended_total_gain_kg: float = 0.0
    progress_percent: float = 0.0
    display_progress_percent: float = 0.0


@dataclass(frozen=True)
class ObservationInsight:
    observation: HealthObservation
    gain_kg: float
    bmi: float | None


@dataclass(frozen=True)
class HealthSummary:
    status: WeightGainStatus
    total_entries: int
    total_gain_kg: float
    current_weight_kg: float | None
    entries: list[ObservationInsight] = field(default_factory=list)


def recommended_total_gain_kg(pre_pregnancy_weight_kg: float) -> float:
    """Recommended total gain, banded on pre-pregnancy weight.

    Thresholds are BMI cut-offs applied to the weight value itself.
    """
    if pre_pregnancy_weight_kg < 18.5:
        return 12.5
    if pre_pregnancy_weight_kg < 25:
        return 11.5
    if pre_pregnancy_weight_kg < 30:
        return 7
    return 5


def compute_bmi(weight_kg: float, height_cm: float) -> float | None:
    """BMI rounded to one decimal. None when height is not positive."""
    if height_cm <= 0:
        return None
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def classify_gain(current_gain_kg: float, pregnancy_week: int) -> WeightGainBand:
    """Band actual gain against the week-relative expectation."""
    expected = pregnancy_week * EXPECTED_GAIN_PER_WEEK_KG
    difference = current_gain_kg - expected
    if difference < UNDERWEIGHT_GAIN_MARGIN_KG:
        return WeightGainBand.UNDERWEIGHT_GAIN
    if difference > EXCESSIVE_GAIN_MARGIN_KG:
        return WeightGainBand.EXCESSIVE
    return WeightGainBand.HEALTHY


def evaluate_weight_gain(
    observations: list[HealthObservation],
    baseline: PersonalBaseline,
    pregnancy_week: int,
) -> WeightGainStatus:
    """Evaluate weight gain from date-ascending observations.

    Args:
        observations: Observations ordered by date ascending; the last one is
            treated as the latest
        baseline: Pre-pregnancy profile
        pregnancy_week: Current gestational week for the week-relative band

    Returns:
        WeightGainStatus; band NO_DATA with zeroed numbers when there are no
        observations.
    """
    if not observations:
        return WeightGainStatus(band=WeightGainBand.NO_DATA, pregnancy_week=pregnancy_week)

    latest = observations[-1]
    current_gain = latest.weight_kg - baseline.pre_pregnancy_weight_kg
    recommended = recommended_total_gain_kg(baseline.pre_pregnancy_weight_kg)
    progress = min(current_gain / recommended * 100, 100)
    expected = pregnancy_week * EXPECTED_GAIN_PER_WEEK_KG

    return WeightGainStatus(
        band=classify_gain(current_gain, pregnancy_week),
        pregnancy_week=pregnancy_week,
        current_gain_kg=current_gain,
        expected_gain_kg=expected,
        difference_kg=current_gain - expected,
        recommended_total_gain_kg=recommended,
        progress_percent=progress,
        display_progress_percent=max(progress, 0),
    )


def summarize_health(
    observations: list[HealthObservation],
    baseline: PersonalBaseline,
    pregnancy_week: int,
) -> HealthSummary:
    """Weight-gain status plus per-entry BMI/gain and headline totals."""
    status = evaluate_weight_gain(observations, baseline, pregnancy_week)
    entries = [
        ObservationInsight(
            observation=obs,
            gain_kg=obs.weight_kg - baseline.pre_pregnancy_weight_kg,
            bmi=compute_bmi(obs.weight_kg, baseline.height_cm),
        )
        for obs in observations
    ]

    return HealthSummary(
        status=status,
        total_entries=len(observations),
        total_gain_kg=status.current_gain_kg,
        current_weight_kg=observations[-1].weight_kg if observations else None,
        entries=entries,
    )
