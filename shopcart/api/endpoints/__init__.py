"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- catalog: Full listing and category enumeration
- navigation: Category and product-lookup resolution, not-found page

==============================================================================
"""

from . import health, catalog, navigation

__all__ = ["health", "catalog", "navigation"]
