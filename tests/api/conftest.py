"""API-specific test fixtures."""

from contextlib import asynccontextmanager

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from app.core.auth import UserSession, require_auth
from app.core.exceptions import BabyJourneyError

TEST_USER_ID = "user_test_a"


@pytest.fixture
def api_app(db_url: str) -> FastAPI:
    """App wired like app.main.create_app but with a test database lifespan.

    init_db runs inside the TestClient's own event loop so route handlers
    can use get_session_factory().
    """
    from app.api.routes import api_router
    from app.core.config import get_settings
    from app.db import close_db, init_db
    from app.db.seed import seed_plan_tiers
    from app.main import domain_exception_handler, generic_exception_handler, http_exception_handler
    from app.middleware.correlation import setup_correlation_middleware

    @asynccontextmanager
    async def test_lifespan(app: FastAPI):
        import app.db.base as db_mod

        # Reset global so init_db creates a fresh engine in THIS loop
        db_mod._engine = None
        db_mod._session_factory = None
        await init_db(db_url)
        await seed_plan_tiers()
        yield
        await close_db()

    settings = get_settings()

    app = FastAPI(title=settings.app_name, description="Baby Journey - Test Client", lifespan=test_lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_correlation_middleware(app)

    # Exception handlers (needed for debug_id and domain error tests)
    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(BabyJourneyError)(domain_exception_handler)
    app.exception_handler(Exception)(generic_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


def _override_auth(app: FastAPI, user_id: str) -> None:
    app.dependency_overrides[require_auth] = lambda: UserSession(user_id=user_id, claims={"sub": user_id})


@pytest.fixture
def login_as(api_app: FastAPI):
    """Switch the authenticated user for subsequent requests."""

    def _login(user_id: str) -> None:
        _override_auth(api_app, user_id)

    return _login


@pytest.fixture
def api_client(api_app: FastAPI):
    """Test client authenticated as TEST_USER_ID."""
    _override_auth(api_app, TEST_USER_ID)
    with TestClient(api_app) as client:
        yield client
    api_app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(api_app: FastAPI):
    """Test client with no auth override."""
    with TestClient(api_app) as client:
        yield client
