"""Integration tests for user provisioning on first login."""

import pytest
from sqlalchemy import func, select

from app.core.provisioning import provision_user_on_first_login
from app.db.models.profile import Profile
from app.db.models.user_preferences import UserPreferences

pytestmark = pytest.mark.integration


async def test_creates_profile_and_preferences(db_session):
    profile = await provision_user_on_first_login("user_new", session=db_session)

    assert profile.user_id == "user_new"
    assert profile.height_cm == 165
    assert profile.age_years == 28
    assert profile.pre_pregnancy_weight_kg == 60
    assert profile.pregnancy_week is None

    prefs = (
        await db_session.execute(select(UserPreferences).where(UserPreferences.user_id == "user_new"))
    ).scalar_one()
    assert prefs.dark_mode is False
    assert prefs.sidebar_color == "purple"


async def test_idempotent(db_session):
    first = await provision_user_on_first_login("user_twice", session=db_session)
    second = await provision_user_on_first_login("user_twice", session=db_session)

    assert first.id == second.id
    count = (
        await db_session.execute(select(func.count()).select_from(Profile).where(Profile.user_id == "user_twice"))
    ).scalar()
    assert count == 1


async def test_existing_profile_keeps_values(db_session):
    profile = await provision_user_on_first_login("user_keep", session=db_session)
    profile.name = "Amira"
    profile.height_cm = 172
    await db_session.commit()

    again = await provision_user_on_first_login("user_keep", session=db_session)

    assert again.name == "Amira"
    assert again.height_cm == 172


async def test_uses_global_session_factory(engine):
    profile = await provision_user_on_first_login("user_global")
    assert profile.user_id == "user_global"
