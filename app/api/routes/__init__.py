from fastapi import APIRouter

from app.api.routes import (
    appointments,
    baby,
    checklist,
    dashboard,
    diary,
    health,
    health_entries,
    knowledge,
    plans,
    preferences,
    profile,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(health_entries.router, prefix="/health-entries", tags=["health-entries"])
api_router.include_router(checklist.router, prefix="/checklist", tags=["checklist"])
api_router.include_router(diary.router, prefix="/diary", tags=["diary"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(knowledge.router, prefix="/knowledge", tags=["knowledge"])
api_router.include_router(baby.router, prefix="/baby", tags=["baby"])
