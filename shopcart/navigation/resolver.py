"""
==============================================================================
Navigation Resolver Module
==============================================================================

Translates raw, untyped route parameters into display-ready results.

Flows:
------
Category flow:
    segment → missing? → get_by_category → empty? → CategoryFound

Product-lookup flow:
    id → parse → get_by_id → (no qty) → ProductFound
                           → (qty)    → parse/validate → ProductFound + total

Any failure along either path yields NotFound. Each resolution is a single
pass over the static catalog with no side effects.

==============================================================================
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from shopcart.catalog.service import ProductService
from shopcart.utils.validators import ProductIdValidator, QuantityValidator

from .results import CategoryFound, NotFound, NotFoundReason, ProductFound, Resolution


# Module logger
logger = logging.getLogger(__name__)


class NavigationResolver:
    """
    Resolves category and product-lookup routes against a ProductService.
    
    Example:
        >>> resolver = NavigationResolver(service)
        >>> resolver.resolve_product("1", "3").total_price
        Decimal('7.5')
        >>> resolver.resolve_category("doesnotexist").kind
        'not_found'
    """
    
    def __init__(
        self,
        service: ProductService,
        id_validator: Optional[ProductIdValidator] = None,
        quantity_validator: Optional[QuantityValidator] = None,
    ) -> None:
        self._service = service
        self._id_validator = id_validator or ProductIdValidator()
        self._quantity_validator = quantity_validator or QuantityValidator()
    
    # =========================================================================
    # CATEGORY FLOW
    # =========================================================================
    
    def resolve_category(self, segment: Optional[str]) -> Resolution:
        """
        Resolve a category path segment.
        
        Args:
            segment: Raw category segment, None when the route had none
            
        Returns:
            CategoryFound with the catalog's casing of the category, or NotFound
        """
        if segment is None or not segment.strip():
            return self._not_found(NotFoundReason.MISSING_CATEGORY, segment)
        
        products = self._service.get_by_category(segment)
        if not products:
            return self._not_found(NotFoundReason.UNKNOWN_CATEGORY, segment)
        
        return CategoryFound(
            category=products[0].product_category,
            products=tuple(products),
        )
    
    # =========================================================================
    # PRODUCT-LOOKUP FLOW
    # =========================================================================
    
    def resolve_product(
        self,
        id_segment: Optional[str],
        qty_segment: Optional[str] = None,
    ) -> Resolution:
        """
        Resolve a product lookup, optionally pricing a quantity.
        
        Args:
            id_segment: Raw product id segment
            qty_segment: Raw quantity segment; None means the route had no
                quantity, while any string (even empty) is validated
            
        Returns:
            ProductFound or NotFound
        """
        is_valid, product_id, error = self._id_validator.validate(id_segment)
        if not is_valid:
            return self._not_found(NotFoundReason.INVALID_ID, id_segment, error)
        
        product = self._service.get_by_id(product_id)
        if product is None:
            return self._not_found(NotFoundReason.UNKNOWN_ID, id_segment)
        
        if qty_segment is None:
            return ProductFound(product=product)
        
        is_valid, quantity, error = self._quantity_validator.validate(qty_segment)
        if not is_valid:
            return self._not_found(NotFoundReason.INVALID_QUANTITY, qty_segment, error)
        
        total_price = quantity * product.unit_price
        as_float = float(total_price)
        if not math.isfinite(as_float) or (total_price > 0 and as_float == 0):
            return self._not_found(
                NotFoundReason.INVALID_QUANTITY, qty_segment, "Total price is out of range"
            )
        
        return ProductFound(
            product=product,
            quantity=quantity,
            total_price=total_price,
        )
    
    # =========================================================================
    # HELPERS
    # =========================================================================
    
    @staticmethod
    def _not_found(
        reason: NotFoundReason,
        value: Optional[str],
        error: Optional[str] = None,
    ) -> NotFound:
        if error:
            logger.debug(f"Not found ({reason.value}): {value!r} - {error}")
        else:
            logger.debug(f"Not found ({reason.value}): {value!r}")
        return NotFound(reason=reason)
