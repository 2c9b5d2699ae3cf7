"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Product(BaseModel):
    """
    Product model for catalog items.
    
    Instances are frozen: the catalog is read-only once built.
    
    Attributes:
        product_id: Unique positive identifier
        product_category: Grouping label, original casing preserved
        product_name: Product display name
        unit_price: Price of a single unit
        image: Display image URI
    """
    
    model_config = ConfigDict(frozen=True)
    
    product_id: int = Field(..., gt=0, description="Unique product identifier")
    product_category: str = Field(..., min_length=1, description="Product category")
    product_name: str = Field(..., min_length=1, description="Product name")
    unit_price: Decimal = Field(..., ge=0, description="Price per unit")
    image: str = Field(..., description="Image URI")
    
    @field_serializer("unit_price")
    def serialize_unit_price(self, value: Decimal) -> float:
        """Emit prices as JSON numbers."""
        return float(value)
