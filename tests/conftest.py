"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, service, resolver and test client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from shopcart.main import app
from shopcart.catalog import PRODUCTS, CatalogStore, ProductService
from shopcart.navigation import NavigationResolver


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def store() -> CatalogStore:
    """Store seeded with the standard catalog."""
    return CatalogStore(PRODUCTS)


@pytest.fixture
def service(store: CatalogStore) -> ProductService:
    """Query service over the standard catalog."""
    return ProductService(store)


@pytest.fixture
def resolver(service: ProductService) -> NavigationResolver:
    """Navigation resolver over the standard catalog."""
    return NavigationResolver(service)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create test client; the lifespan loads the catalog."""
    with TestClient(app) as test_client:
        yield test_client
