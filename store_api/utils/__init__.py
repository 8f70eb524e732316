"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: Product create request validation

==============================================================================
"""

from .validators import ProductValidator, ProductNameValidator, InventoryValidator

__all__ = [
    "ProductValidator",
    "ProductNameValidator",
    "InventoryValidator",
]
