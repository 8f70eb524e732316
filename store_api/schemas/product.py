"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product endpoints.

The request schema only checks shape and types. Value rules (name pattern,
inventory range, required fields) live in ``store_api.utils.validators`` so
the route can inspect every violation before touching the store.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, Field

from store_api.catalog.models import Product, ProductType


class ProductDetails(BaseModel):
    """Product create request."""
    id: Optional[int] = Field(default=None, description="Ignored; the store assigns ids")
    name: Optional[str] = Field(default=None)
    type: ProductType
    inventory: Optional[int] = Field(default=None)
    cost: Optional[float] = Field(default=None, allow_inf_nan=False)

    def to_product(self) -> Product:
        """Build the domain object. Call only after validation."""
        return Product(
            id=self.id or 0,
            name=self.name,
            type=self.type,
            inventory=self.inventory,
            cost=self.cost,
        )


class ProductCreatedResponse(BaseModel):
    """Create response. ``id`` is the store size after the write."""
    id: int
