"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic.

This package provides:
- Common: Error response schema
- Product: Product create request and response schemas

==============================================================================
"""

from .common import ErrorResponse
from .product import ProductDetails, ProductCreatedResponse

__all__ = [
    # Common
    "ErrorResponse",
    # Product
    "ProductDetails",
    "ProductCreatedResponse",
]
