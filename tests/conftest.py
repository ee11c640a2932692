"""
Shared pytest fixtures.

Every test gets a fresh application backed by in-memory SQLite, its own
session store and upload folder, and a ServiceM8 client whose network
calls are replaced by mocks.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
from cachelib import SimpleCache

from booking_portal import create_app, db
from booking_portal.utils.servicem8 import servicem8_client
from config import TestingConfig
from helpers import register


@pytest.fixture
def app(tmp_path):
    config_class = type(
        "IsolatedTestingConfig",
        (TestingConfig,),
        {"UPLOAD_FOLDER": str(tmp_path / "uploads"), "SESSION_CACHELIB": SimpleCache()},
    )
    app = create_app(config_class)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def crm():
    """ServiceM8 calls succeed by default; tests can change the return values."""
    with patch.object(servicem8_client, "create_client", return_value={"errorCode": 0}) as create_client, \
            patch.object(servicem8_client, "create_job", return_value={"errorCode": 0}) as create_job:
        yield SimpleNamespace(create_client=create_client, create_job=create_job)


@pytest.fixture
def auth_client(client):
    """Client with a logged in user; the user's id is exposed as ``auth_client.user_id``."""
    response = register(client, email="owner@example.com", name="Booking Owner")
    assert response.status_code == 201
    client.user_id = response.get_json()["responseObject"]["id"]
    return client


@pytest.fixture
def other_client(app):
    """Second logged in user, used for ownership checks."""
    other = app.test_client()
    response = register(other, email="intruder@example.com", name="Other User")
    assert response.status_code == 201
    other.user_id = response.get_json()["responseObject"]["id"]
    return other
