"""Tests for profile-to-domain mapping."""

from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from app.services.profile_service import health_tracking_week, to_baseline

pytestmark = pytest.mark.unit

TODAY = date(2026, 5, 4)


def _profile(**fields):
    defaults = dict(height_cm=None, age_years=None, pre_pregnancy_weight_kg=None, due_date=None)
    defaults.update(fields)
    return SimpleNamespace(**defaults)


def test_baseline_filled_with_defaults():
    baseline = to_baseline(_profile())

    assert baseline.height_cm == 165
    assert baseline.age_years == 28
    assert baseline.pre_pregnancy_weight_kg == 60
    assert baseline.due_date is None


def test_baseline_keeps_stored_values():
    baseline = to_baseline(_profile(height_cm=158, pre_pregnancy_weight_kg=52.5))

    assert baseline.height_cm == 158
    assert baseline.pre_pregnancy_weight_kg == 52.5


def test_tracking_week_from_due_date():
    profile = _profile(due_date=TODAY + timedelta(weeks=8))
    assert health_tracking_week(profile, today=TODAY) == 32


def test_tracking_week_zero_without_due_date():
    assert health_tracking_week(_profile(), today=TODAY) == 0
