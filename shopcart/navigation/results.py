"""
==============================================================================
Resolution Result Models
==============================================================================

Tagged results returned by the NavigationResolver.

Every failure kind collapses into NotFound. The reason it carries is for
logging and tests; it is not exposed to API clients.

==============================================================================
"""

import enum
from decimal import Decimal
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from shopcart.catalog.models import Product


class NotFoundReason(str, enum.Enum):
    """Why a resolution ended in NotFound."""
    MISSING_CATEGORY = "missing_category"
    UNKNOWN_CATEGORY = "unknown_category"
    INVALID_ID = "invalid_id"
    UNKNOWN_ID = "unknown_id"
    INVALID_QUANTITY = "invalid_quantity"


class ProductFound(BaseModel):
    """Product lookup succeeded; quantity and total are set only when requested."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["product"] = "product"
    product: Product
    quantity: Optional[Decimal] = Field(default=None, gt=0)
    total_price: Optional[Decimal] = Field(default=None, ge=0)
    
    @property
    def has_total(self) -> bool:
        return self.total_price is not None
    
    @field_serializer("quantity", "total_price")
    def serialize_number(self, value: Optional[Decimal]) -> Optional[float]:
        return None if value is None else float(value)


class CategoryFound(BaseModel):
    """Category lookup matched at least one product."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["category"] = "category"
    category: str
    products: Tuple[Product, ...]


class NotFound(BaseModel):
    """Any resolution failure."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["not_found"] = "not_found"
    reason: NotFoundReason


Resolution = Union[ProductFound, CategoryFound, NotFound]
