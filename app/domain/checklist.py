"""Baby-essentials catalog and checklist progress.

Pure domain logic with no external dependencies.
"""

from dataclasses import dataclass

CUSTOM_CATEGORY = "Custom"

BABY_ESSENTIALS_BY_CATEGORY: dict[str, list[str]] = {
    "Feeding": [
        "Baby bottles",
        "Burp cloths",
        "Pacifiers",
    ],
    "Clothing": [
        "Baby clothes (0-3 months)",
        "Onesies",
        "Baby socks/booties",
        "Swaddle blankets",
        "Receiving blankets",
    ],
    "Diaper Care": [
        "Diapers/Nappies",
        "Baby wipes",
        "Changing table/pad",
    ],
    "Sleep & Safety": [
        "Crib/Bassinet",
        "Car seat",
        "Baby monitor",
    ],
    "Bathing & Grooming": [
        "Baby lotion",
        "Baby shampoo",
        "Baby nail clippers",
    ],
    "Health & Safety": [
        "Baby thermometer",
        "First aid kit",
    ],
    "Transportation": [
        "Stroller",
    ],
}


@dataclass(frozen=True)
class ChecklistProgress:
    completed: int
    total: int
    percent: float

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.completed == self.total


def essential_items() -> list[tuple[str, str]]:
    """Flatten the catalog into (category, text) pairs in catalog order."""
    return [
        (category, text)
        for category, texts in BABY_ESSENTIALS_BY_CATEGORY.items()
        for text in texts
    ]


def checklist_progress(items: list) -> ChecklistProgress:
    """Count completed items. Items need a ``completed`` attribute."""
    total = len(items)
    completed = sum(1 for item in items if item.completed)
    percent = completed / total * 100 if total > 0 else 0.0
    return ChecklistProgress(completed=completed, total=total, percent=percent)


def group_by_category(items: list) -> dict[str, list]:
    """Group items by category.

    Catalog categories come first in catalog order, then any other
    categories in first-seen order. Items without a category land under
    CUSTOM_CATEGORY. Empty categories are omitted.
    """
    groups: dict[str, list] = {name: [] for name in BABY_ESSENTIALS_BY_CATEGORY}
    for item in items:
        groups.setdefault(item.category or CUSTOM_CATEGORY, []).append(item)
    return {name: members for name, members in groups.items() if members}
