"""
==============================================================================
Catalog Browser - Application Entry Point
==============================================================================

FastAPI application serving the static product catalog:
- Full product listing and category index
- Case-insensitive category browsing
- Product lookup with quantity-based line totals

Usage:
------
    # Development
    uvicorn shopcart.main:app --reload
    
    # Production
    uvicorn shopcart.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopcart import __version__
from shopcart.config import get_settings
from shopcart.core.exceptions import register_exception_handlers
from shopcart.api.router import api_router
from shopcart.catalog import PRODUCTS, CatalogStore, ProductService


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.
    
    Handles application lifecycle including:
    - Catalog construction at startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """
    
    def __init__(self):
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()
    
    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Static product catalog browser",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        
        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        
        return app
    
    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)
    
    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)
        
        self._load_catalog(app)
        
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)
    
    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        app.state.product_service = None
        logger.info("✅ Shutdown complete")
    
    def _load_catalog(self, app: FastAPI) -> None:
        """Build the catalog store and query service."""
        store = CatalogStore(PRODUCTS)
        app.state.product_service = ProductService(store)
        categories = app.state.product_service.get_all_categories()
        logger.info(f"✅ Loaded {len(store)} products from {len(categories)} categories")
    
    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )
    
    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "shopcart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
