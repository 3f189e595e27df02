"""
Shared fixtures for the test suite.

Every test gets a fresh application built from explicit settings:
in-memory users, fast bcrypt, no rate limiting.
"""

import pytest
from fastapi.testclient import TestClient

from authapi.core.config import Settings
from authapi.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        mongo_uri=None,
        bcrypt_rounds=4,
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
