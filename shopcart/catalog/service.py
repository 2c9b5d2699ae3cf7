"""
==============================================================================
Product Query Service
==============================================================================

Read-only query operations over a CatalogStore.

Queries never raise for unknown input: a missing id yields None and an
unmatched category yields an empty list. Callers decide what absence means.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .models import Product
from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Query service for the product catalog.
    
    Example:
        >>> service = ProductService(CatalogStore(PRODUCTS))
        >>> service.get_all_categories()[:2]
        ['FROZEN', 'OFFICE SUPPLIES']
        >>> [p.product_id for p in service.get_by_category("  frozen ")]
        [1, 2, 3, 4, 5]
    """
    
    def __init__(self, store: CatalogStore) -> None:
        self._store = store
    
    def get_all(self) -> Tuple[Product, ...]:
        """Get every product in catalog order."""
        return self._store.products
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by exact id.
        
        Args:
            product_id: Product id to look up
            
        Returns:
            Product or None
        """
        return self._store.find(product_id)
    
    def get_all_categories(self) -> List[str]:
        """
        Get distinct categories ordered by first occurrence.
        
        Original casing is kept; categories differing only by case are
        reported separately.
        """
        return list(dict.fromkeys(p.product_category for p in self._store))
    
    def get_by_category(self, category: str) -> List[Product]:
        """
        Get products in a category (case-insensitive).
        
        Args:
            category: Category name, surrounding whitespace ignored
            
        Returns:
            Matching products in catalog order, possibly empty
        """
        wanted = category.strip().lower()
        results = [p for p in self._store if p.product_category.lower() == wanted]
        
        logger.debug(f"Category {category!r} matched {len(results)} products")
        return results
