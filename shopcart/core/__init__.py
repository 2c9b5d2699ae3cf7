"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class, factory functions and handlers
- dependencies: FastAPI dependency injection functions

Usage:
------
    from shopcart.core import exceptions
    raise exceptions.not_found()

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import (
    get_navigation_resolver,
    get_product_service,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_navigation_resolver",
    "get_product_service",
]
