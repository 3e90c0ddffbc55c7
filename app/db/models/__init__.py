"""Re-export all models so Base.metadata sees them."""

from app.db.models.appointment import Appointment
from app.db.models.checklist_item import ChecklistItem
from app.db.models.diary_entry import DiaryEntry
from app.db.models.faq import Faq
from app.db.models.health_entry import HealthEntry
from app.db.models.plan_tier import PlanTier
from app.db.models.pregnancy_week import PregnancyWeek
from app.db.models.profile import Profile
from app.db.models.user_preferences import UserPreferences

__all__ = [
    "Appointment",
    "ChecklistItem",
    "DiaryEntry",
    "Faq",
    "HealthEntry",
    "PlanTier",
    "PregnancyWeek",
    "Profile",
    "UserPreferences",
]
