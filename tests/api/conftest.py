"""Fixtures for API tests: an app on a temporary SQLite file."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from advocate_directory.api.app import create_app
from advocate_directory.config import DirectorySettings
from advocate_directory.ops.advocates import seed_advocates
from advocate_directory.ops.context import OperationContext
from tests.conftest import sample_records


@pytest.fixture()
def settings(tmp_path) -> DirectorySettings:
    return DirectorySettings(database_url=f"sqlite:///{tmp_path / 'test.db'}", log_format="console")


@pytest.fixture()
def app(settings):
    return create_app(settings=settings)


@pytest.fixture()
def client(app):
    """Test client; entering it runs the lifespan, which creates the tables."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded_client(app, client):
    with app.state.session_factory() as session:
        seed_advocates(OperationContext(session=session, caller="test"), sample_records())
    return client
