"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for raw route path segments.

This module implements:
- ProductIdValidator: Parses product id segments
- QuantityValidator: Parses quantity segments

Validation Rules for Product Ids:
--------------------------------
- Base-10 integer, optional sign
- Surrounding whitespace ignored

Validation Rules for Quantities:
-------------------------------
- Decimal number, optional fraction and exponent
- Must be finite and greater than zero
- Must stay finite and non-zero when emitted as a JSON number

Only ASCII digits are accepted in either segment.

==============================================================================
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple


class ProductIdValidator:
    """
    Validator for product id path segments.
    
    Example:
        >>> validator = ProductIdValidator()
        >>> validator.validate(" 7 ")
        (True, 7, None)
        >>> validator.validate("abc")
        (False, None, 'Product id must be an integer')
    """
    
    PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
    
    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Validate and parse a product id.
        
        Args:
            raw: Raw path segment
            
        Returns:
            Tuple of (is_valid, product_id, error_message)
        """
        if raw is None:
            return False, None, "Product id is required"
        
        value = raw.strip()
        
        if not value:
            return False, None, "Product id cannot be empty"
        
        if not self.PATTERN.match(value):
            return False, None, "Product id must be an integer"
        
        return True, int(value), None
    
    def is_valid(self, raw: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(raw)
        return is_valid


class QuantityValidator:
    """
    Validator for quantity path segments.
    """
    
    PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
    
    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate and parse a quantity.
        
        Args:
            raw: Raw path segment
            
        Returns:
            Tuple of (is_valid, quantity, error_message)
        """
        if raw is None:
            return False, None, "Quantity is required"
        
        value = raw.strip()
        
        if not value:
            return False, None, "Quantity cannot be empty"
        
        if not self.PATTERN.match(value):
            return False, None, "Quantity must be a number"
        
        try:
            qty = Decimal(value)
        except InvalidOperation:
            return False, None, "Quantity must be a number"
        
        if qty <= 0:
            return False, None, "Quantity must be greater than zero"
        
        as_float = float(qty)
        if not math.isfinite(as_float) or as_float <= 0:
            return False, None, "Quantity is out of range"
        
        return True, qty, None
    
    def is_valid(self, raw: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(raw)
        return is_valid
