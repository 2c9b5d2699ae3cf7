"""
==============================================================================
Catalog Package - Product Store and Queries
==============================================================================

Static, in-memory product catalog with read-only query operations.

Classes:
--------
- Product: Immutable pydantic model for catalog items
- CatalogStore: Ordered, immutable collection of products
- ProductService: Read-only queries over a CatalogStore

==============================================================================
"""

from .models import Product
from .data import PRODUCTS
from .store import CatalogStore
from .service import ProductService

__all__ = [
    "Product",
    "PRODUCTS",
    "CatalogStore",
    "ProductService",
]
