"""Pregnancy progress computation.

Pure functions over a gestational week. No DB access, no clock reads
unless ``today`` is omitted.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta

TOTAL_WEEKS = 40

MILESTONES: dict[int, str] = {
    1: "Your baby is just beginning! A tiny cluster of cells is forming.",
    4: "Your baby's heart begins to form and beat. So exciting!",
    6: "Brain and nervous system development is in full swing.",
    8: "Tiny limb buds are appearing - future arms and legs!",
    10: "Your baby is officially called a fetus now. Major organs are developing.",
    12: "Fingernails are forming and the baby can make a fist!",
    16: "You might feel the first flutters of movement soon!",
    20: "Halfway there! Baby can hear sounds from outside the womb.",
    24: "Baby's sense of hearing is developing rapidly.",
    28: "Baby's eyes can open and close, and they're practicing breathing!",
    32: "Baby's bones are hardening, but the skull remains flexible for birth.",
    36: "Baby is considered full-term and ready for the world!",
    40: "Your due date is here! Baby is ready to meet you!",
}


@dataclass(frozen=True)
class PregnancyProgress:
    """Derived progress for a gestational week. Never persisted."""

    current_week: int
    weeks_remaining: int
    total_weeks: int
    milestone_week: int
    milestone_text: str
    due_date: date
    percent_complete: float


@dataclass(frozen=True)
class TrimesterProgress:
    trimester: int
    percent: float


def nearest_milestone_week(current_week: int, milestones: dict[int, str] = MILESTONES) -> int:
    """Return the milestone key closest to ``current_week``.

    Keys are scanned in ascending order and the best is only replaced on a
    strict improvement, so a tie goes to the smaller week.
    """
    weeks = sorted(milestones)
    best = weeks[0]
    for week in weeks[1:]:
        if abs(week - current_week) < abs(best - current_week):
            best = week
    return best


def compute_pregnancy_progress(current_week: int, today: date | None = None) -> PregnancyProgress:
    """Compute dashboard progress for a gestational week.

    Args:
        current_week: Completed weeks of pregnancy (trusted, not validated)
        today: Reference date (injectable for testing, defaults to date.today())

    Returns:
        PregnancyProgress. ``due_date`` assumes today is the start of
        ``current_week``. ``percent_complete`` is not clamped above 100.
    """
    if today is None:
        today = date.today()

    weeks_remaining = max(0, TOTAL_WEEKS - current_week)
    milestone_week = nearest_milestone_week(current_week)

    return PregnancyProgress(
        current_week=current_week,
        weeks_remaining=weeks_remaining,
        total_weeks=TOTAL_WEEKS,
        milestone_week=milestone_week,
        milestone_text=MILESTONES[milestone_week],
        due_date=today + timedelta(days=weeks_remaining * 7),
        percent_complete=current_week / TOTAL_WEEKS * 100,
    )


def compute_trimester_progress(week: int) -> TrimesterProgress:
    """Map a week to its trimester and the percentage through that trimester."""
    if week <= 13:
        return TrimesterProgress(trimester=1, percent=week / 13 * 100)
    if week <= 27:
        return TrimesterProgress(trimester=2, percent=(week - 13) / 14 * 100)
    return TrimesterProgress(trimester=3, percent=(week - 27) / 13 * 100)


def week_from_due_date(due_date: date, today: date | None = None) -> int:
    """Derive the current gestational week from a stored due date.

    Whole weeks until the due date are rounded up, then subtracted from 40.
    Never negative; a past due date yields a week above 40.
    """
    if today is None:
        today = date.today()

    weeks_until_due = math.ceil((due_date - today).days / 7)
    return max(0, TOTAL_WEEKS - weeks_until_due)
