"""
==============================================================================
Navigation Package
==============================================================================

Resolves raw route parameters into found / not-found results.

==============================================================================
"""

from .results import (
    CategoryFound,
    NotFound,
    NotFoundReason,
    ProductFound,
    Resolution,
)
from .resolver import NavigationResolver

__all__ = [
    "CategoryFound",
    "NotFound",
    "NotFoundReason",
    "ProductFound",
    "Resolution",
    "NavigationResolver",
]
