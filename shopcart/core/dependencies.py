"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog query service and navigation resolver.

The service is built once at startup and kept on ``app.state``; endpoints
receive it (or a resolver wrapping it) explicitly through ``Depends``.

Dependency Hierarchy:
--------------------
        ┌──────────────────────┐
        │ get_product_service  │
        └──────────┬───────────┘
                   │
        ┌──────────▼───────────┐
        │get_navigation_resolver│
        └──────────────────────┘

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from shopcart.catalog.service import ProductService
from shopcart.core import exceptions
from shopcart.navigation.resolver import NavigationResolver


# Module logger
logger = logging.getLogger(__name__)


def get_product_service(request: Request) -> ProductService:
    """
    Get the application's product service.
    
    Raises:
        AppException: CATALOG_NOT_LOADED if startup has not built the catalog
    """
    service = getattr(request.app.state, "product_service", None)
    if service is None:
        logger.error("Product service requested before catalog was loaded")
        raise exceptions.catalog_not_loaded()
    return service


def get_navigation_resolver(
    service: ProductService = Depends(get_product_service),
) -> NavigationResolver:
    """Build a resolver around the injected product service."""
    return NavigationResolver(service)
