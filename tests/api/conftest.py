"""Shared fixtures for API tests."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from airzone.api.app import app
from airzone.api.deps import get_current_user
from tests.persistence.fake_firestore import FakeFirestoreClient

TEST_USER_ID = "api-test-operator"


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def test_app(fake_client):
    """FastAPI app with dependency overrides for testing."""
    app.dependency_overrides[get_current_user] = lambda: TEST_USER_ID

    # The zone counter reads the client directly, so patch both imports
    with patch(
        "airzone.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ), patch(
        "airzone.persistence.repositories.zone_repo.get_firestore_client",
        return_value=fake_client,
    ):
        yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
