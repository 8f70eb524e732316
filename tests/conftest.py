"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a fresh seeded store and a test client wired to it.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from store_api.main import app
from store_api.catalog.models import SEED_PRODUCTS
from store_api.catalog.store import ProductStore
from store_api.core.dependencies import get_store_optional


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def store() -> ProductStore:
    """Create a freshly seeded store for each test."""
    return ProductStore(SEED_PRODUCTS)


@pytest.fixture(scope="function")
def client(store: ProductStore) -> Generator[TestClient, None, None]:
    """Create test client with store override."""
    app.dependency_overrides[get_store_optional] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================

@pytest.fixture
def valid_product() -> dict:
    """A create request body that passes validation."""
    return {"id": 0, "name": "Kindle", "type": "gadget", "inventory": 25, "cost": 9999.5}
