"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the application.

Modules:
--------
- validators: Path segment parsing for product ids and quantities

==============================================================================
"""

from .validators import ProductIdValidator, QuantityValidator

__all__ = [
    "ProductIdValidator",
    "QuantityValidator",
]
