"""
==============================================================================
Main API Router
==============================================================================

Combines all endpoint routers. Catalog routes live at the root path so the
route table matches the browser-facing URLs.

==============================================================================
"""

from fastapi import APIRouter

from shopcart.api.endpoints import health, catalog, navigation


class MainAPIRouter:
    """
    Main API router combining all routes.
    
    Provides a single entry point for all API endpoints.
    """
    
    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter()
        self._include_routers()
    
    def _include_routers(self) -> None:
        """Include all routers."""
        self._router.include_router(health.router)
        self._router.include_router(catalog.router)
        self._router.include_router(navigation.router)
    
    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
