"""Shared pytest fixtures: in-memory Mongo, recording mailer and test client."""

from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient
from mongoengine import connect, disconnect

from app.services.mail import get_mailer
from app.utils.config import Settings, get_settings
from main import app as fastapi_app
from tests.helpers import RecordingMailer


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        environment="local",
        jwt_secret_key="test-secret",
        client_url="http://client.test",
        mailtrap_token=None,
    )


@pytest.fixture(autouse=True)
def mongo():
    connect(
        "auth_service_test",
        host="mongodb://localhost",
        alias="default",
        mongo_client_class=mongomock.MongoClient,
        tz_aware=True,
    )
    yield
    disconnect(alias="default")


@pytest.fixture()
def mailer(settings: Settings) -> RecordingMailer:
    return RecordingMailer(settings)


@pytest.fixture()
def app(settings: Settings, mailer: RecordingMailer):
    fastapi_app.dependency_overrides[get_settings] = lambda: settings
    fastapi_app.dependency_overrides[get_mailer] = lambda: mailer
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    # No context manager: the lifespan would connect to a real MongoDB
    return TestClient(app)
