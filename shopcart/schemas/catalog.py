"""
==============================================================================
Catalog Schemas Module
==============================================================================

Response schemas for catalog listing, category and product lookup endpoints.

==============================================================================
"""

from typing import List, Optional, Sequence

from pydantic import Field

from shopcart.catalog.models import Product
from shopcart.navigation.results import CategoryFound, ProductFound

from .common import SuccessResponse


class ProductListResponse(SuccessResponse):
    """Full catalog listing."""
    total: int = Field(ge=0)
    products: List[Product]
    
    @classmethod
    def from_products(cls, products: Sequence[Product]) -> "ProductListResponse":
        return cls(total=len(products), products=list(products))


class CategoryListResponse(SuccessResponse):
    """Distinct categories in first-occurrence order."""
    total: int = Field(ge=0)
    categories: List[str]
    
    @classmethod
    def from_categories(cls, categories: Sequence[str]) -> "CategoryListResponse":
        return cls(total=len(categories), categories=list(categories))


class CategoryProductsResponse(SuccessResponse):
    """Products belonging to one category."""
    category: str
    total: int = Field(ge=0)
    products: List[Product]
    
    @classmethod
    def from_result(cls, result: CategoryFound) -> "CategoryProductsResponse":
        """Create response from a CategoryFound resolution."""
        return cls(
            category=result.category,
            total=len(result.products),
            products=list(result.products),
        )


class ProductLookupResponse(SuccessResponse):
    """Single product, with quantity and total when a quantity was given."""
    product: Product
    quantity: Optional[float] = None
    total_price: Optional[float] = None
    
    @classmethod
    def from_result(cls, result: ProductFound) -> "ProductLookupResponse":
        """Create response from a ProductFound resolution."""
        return cls(
            product=result.product,
            quantity=None if result.quantity is None else float(result.quantity),
            total_price=None if result.total_price is None else float(result.total_price),
        )
