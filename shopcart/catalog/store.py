"""
==============================================================================
Catalog Store Module
==============================================================================

Ordered, immutable in-memory product collection.

Features:
---------
- Insertion order preserved and stable across calls
- Unique product ids enforced at construction
- Id index for constant-time lookup

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Read-only product collection fixed at construction.
    
    Attributes:
        products: All products in insertion order
    
    Example:
        >>> store = CatalogStore(PRODUCTS)
        >>> store.find(1).product_name
        'Ice Cream'
    """
    
    def __init__(self, products: Iterable[Product]) -> None:
        """
        Build the store from an iterable of products.
        
        Args:
            products: Products in display order
            
        Raises:
            ValueError: If two products share a product_id
        """
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}
        
        for product in self._products:
            if product.product_id in self._by_id:
                raise ValueError(f"Duplicate product_id: {product.product_id}")
            self._by_id[product.product_id] = product
        
        logger.debug(f"Catalog store built with {len(self._products)} products")
    
    @property
    def products(self) -> Tuple[Product, ...]:
        """Get all products."""
        return self._products
    
    def find(self, product_id: int) -> Optional[Product]:
        """Look up a product by id."""
        return self._by_id.get(product_id)
    
    def __len__(self) -> int:
        return len(self._products)
    
    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)
