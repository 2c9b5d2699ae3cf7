"""
==============================================================================
Catalog Listing Endpoints
==============================================================================

Endpoints for the full product listing and the category index.

==============================================================================
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from shopcart.catalog.service import ProductService
from shopcart.core.dependencies import get_product_service
from shopcart.schemas.catalog import CategoryListResponse, ProductListResponse


router = APIRouter(tags=["Catalog"])


class CatalogController:
    """Controller for catalog listing operations."""
    
    def __init__(self, service: ProductService):
        self._service = service
    
    def list_products(self) -> ProductListResponse:
        """List every product in catalog order."""
        return ProductListResponse.from_products(self._service.get_all())
    
    def list_categories(self) -> CategoryListResponse:
        """List distinct categories."""
        return CategoryListResponse.from_categories(self._service.get_all_categories())


@router.get("/", response_model=ProductListResponse)
async def home(service: ProductService = Depends(get_product_service)):
    """Landing page: the full catalog."""
    return CatalogController(service).list_products()


@router.get("/all_products", response_model=ProductListResponse)
async def all_products(service: ProductService = Depends(get_product_service)):
    """List all products."""
    return CatalogController(service).list_products()


@router.get("/all_product_categories", response_model=CategoryListResponse)
async def all_product_categories(service: ProductService = Depends(get_product_service)):
    """List all product categories."""
    return CatalogController(service).list_categories()


# ----------------------------------------------------------------------------
# Legacy paths (misspelled in earlier releases of the browser)
# ----------------------------------------------------------------------------

@router.get("/all_product_catgories", include_in_schema=False)
async def legacy_all_product_categories():
    return RedirectResponse(url="/all_product_categories")


@router.get("/all_product_catgory/{category}", include_in_schema=False)
async def legacy_all_product_category(category: str):
    return RedirectResponse(url=f"/all_product_category/{quote(category, safe='')}")
