"""
Shared fixtures for the API tests
"""

import pytest
from fastapi.testclient import TestClient

from carshop_api.app.core.fixtures import build_fixture_store
from carshop_api.app.main import create_app
from carshop_api.app.services.sink import AcknowledgingSink


CUSTOMER = {"x-user-email": "customer@carshop.com"}
EMPLOYEE = {"x-user-email": "employee@carshop.com"}
OWNER = {"x-user-email": "owner@carshop.com"}


class RecordingSink(AcknowledgingSink):
    """Sink that remembers what it acknowledged."""

    def __init__(self):
        super().__init__()
        self.accepted = []

    def accept(self, kind, record):
        self.accepted.append((kind, record))
        return super().accept(kind, record)


@pytest.fixture
def store():
    return build_fixture_store()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def app(store, sink):
    return create_app(store=store, sink=sink)


@pytest.fixture
def client(app):
    return TestClient(app)
