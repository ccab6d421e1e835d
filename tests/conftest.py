"""Shared fixtures: an in-memory database per test and an API client."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["SYSTEM_NAME"] = "Test Hub"
os.environ.pop("APP_TIMEZONE", None)

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notification_hub.config import reset_settings_cache

reset_settings_cache()

from notification_hub.domain.entities import Actor
from notification_hub.infrastructure.database import get_db, initialize_database
from notification_hub.infrastructure.notifications import NotificationRendererRegistry
from notification_hub.infrastructure.security import create_actor_token


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def registry() -> NotificationRendererRegistry:
    return NotificationRendererRegistry()


@pytest.fixture()
def client(session_factory, registry):
    """Return a test client bound to a clean application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from notification_hub.interfaces.api.dependencies import get_renderer_registry
    from notification_hub.main import create_app

    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_renderer_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Build ``Authorization`` headers for an actor."""

    def _build(actor: Actor) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_actor_token(actor)}"}

    return _build
