"""
==============================================================================
Navigation Endpoints
==============================================================================

Category browsing and product lookup. Every resolution failure renders the
same not-found response in place.

==============================================================================
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from shopcart.core import exceptions
from shopcart.core.dependencies import get_navigation_resolver
from shopcart.navigation.resolver import NavigationResolver
from shopcart.navigation.results import CategoryFound, ProductFound, Resolution
from shopcart.schemas.catalog import CategoryProductsResponse, ProductLookupResponse
from shopcart.schemas.common import ErrorResponse


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Navigation"])

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Not found"}}


class NavigationController:
    """Controller turning resolutions into responses."""
    
    def __init__(self, resolver: NavigationResolver):
        self._resolver = resolver
    
    def category(self, category: str) -> CategoryProductsResponse:
        """Resolve a category page."""
        result = self._resolver.resolve_category(category)
        return CategoryProductsResponse.from_result(self._expect(result, CategoryFound))
    
    def product(self, product_id: str, qty: Optional[str] = None) -> ProductLookupResponse:
        """Resolve a product lookup, optionally with a quantity."""
        result = self._resolver.resolve_product(product_id, qty)
        return ProductLookupResponse.from_result(self._expect(result, ProductFound))
    
    @staticmethod
    def _expect(result: Resolution, found_type: type):
        if not isinstance(result, found_type):
            logger.info(f"Resolution ended in not-found: {result.reason.value}")
            raise exceptions.not_found()
        return result


@router.get(
    "/all_product_category/{category}",
    response_model=CategoryProductsResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def category_products(
    category: str,
    resolver: NavigationResolver = Depends(get_navigation_resolver)
):
    """List products in a category (case-insensitive)."""
    return NavigationController(resolver).category(category)


@router.get(
    "/product_lookup/{product_id}",
    response_model=ProductLookupResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def product_lookup(
    product_id: str,
    resolver: NavigationResolver = Depends(get_navigation_resolver)
):
    """Look up a product by id."""
    return NavigationController(resolver).product(product_id)


@router.get(
    "/product_lookup/{product_id}/{qty}",
    response_model=ProductLookupResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def product_lookup_with_quantity(
    product_id: str,
    qty: str,
    resolver: NavigationResolver = Depends(get_navigation_resolver)
):
    """Look up a product and price a quantity of it."""
    return NavigationController(resolver).product(product_id, qty)


@router.get("/not-found", responses=NOT_FOUND_RESPONSES)
async def not_found_page():
    """Static not-found page."""
    raise exceptions.not_found()
