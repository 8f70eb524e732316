"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items and the fixed seed catalog.

==============================================================================
"""

import enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ProductType(str, enum.Enum):
    """
    Product type enumeration.

    The value is the wire representation used in JSON bodies and in the
    ``type`` query parameter.
    """

    BOOK = "book"
    FOOD = "food"
    GADGET = "gadget"
    OTHER = "other"


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Store-assigned identifier
        name: Product display name
        type: Product type
        inventory: Units in stock
        cost: Unit cost, optional
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    type: ProductType = Field(..., description="Product type")
    inventory: int = Field(..., description="Units in stock")
    cost: Optional[float] = Field(default=None, allow_inf_nan=False, description="Unit cost")


SEED_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Game of Thrones", type=ProductType.BOOK, inventory=50, cost=200.0),
    Product(id=2, name="Milk", type=ProductType.FOOD, inventory=100, cost=45.0),
    Product(id=3, name="Camera", type=ProductType.GADGET, inventory=10, cost=25000.0),
    Product(id=4, name="iPhone", type=ProductType.GADGET, inventory=2, cost=50000.0),
    Product(id=5, name="Binoculars", type=ProductType.OTHER, inventory=10, cost=12000.0),
)
