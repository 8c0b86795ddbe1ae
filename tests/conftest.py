"""Test fixtures for the order cache service tests."""

import pytest
from fastapi.testclient import TestClient

from order_cache.fixtures import create_test_order
from order_cache.server import create_app
from order_cache.store import OrderStore


@pytest.fixture
def store():
    """Create an empty order store."""
    return OrderStore()


@pytest.fixture
def test_order():
    """Create a test order fixture.

    Returns:
        Order: The seed order with all nested objects populated.
    """
    return create_test_order()


@pytest.fixture
def test_client(store):
    """Create a test client whose lifespan seeds the injected store."""
    with TestClient(create_app(store)) as client:
        yield client
