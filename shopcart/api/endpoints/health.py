"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Request


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""
    
    def __init__(self, request: Request):
        self._request = request
    
    def check_catalog(self) -> dict:
        """Check catalog status."""
        service = getattr(self._request.app.state, "product_service", None)
        if service:
            return {"status": "healthy", "products": len(service.get_all())}
        return {"status": "not_loaded", "products": 0}
    
    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()
        
        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"
        
        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(request: Request):
    """
    Health check endpoint.
    
    Returns system status including API and catalog.
    """
    controller = HealthController(request)
    return controller.get_health()


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe for container orchestration."""
    ready = getattr(request.app.state, "product_service", None) is not None
    return {"ready": ready}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
