"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog keyed by integer id.

Classes:
--------
- ProductType: Product type enumeration
- Product: Pydantic model for products
- ProductRepository: Storage protocol used by the HTTP layer
- ProductStore: Lock-guarded in-memory implementation

==============================================================================
"""

from .models import Product, ProductType, SEED_PRODUCTS
from .store import ProductRepository, ProductStore, get_product_store, init_product_store

__all__ = [
    "Product",
    "ProductType",
    "SEED_PRODUCTS",
    "ProductRepository",
    "ProductStore",
    "get_product_store",
    "init_product_store",
]
