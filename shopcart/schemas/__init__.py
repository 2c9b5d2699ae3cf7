"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the catalog API.

==============================================================================
"""

from .common import ErrorDetail, ErrorResponse, SuccessResponse
from .catalog import (
    CategoryListResponse,
    CategoryProductsResponse,
    ProductListResponse,
    ProductLookupResponse,
)

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    "SuccessResponse",
    # Catalog
    "CategoryListResponse",
    "CategoryProductsResponse",
    "ProductListResponse",
    "ProductLookupResponse",
]
