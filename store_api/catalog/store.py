"""
==============================================================================
Product Store Module
==============================================================================

In-memory product catalog keyed by integer id.

Behavior:
---------
- Entries keep insertion order (plain dict).
- ``find_all`` compares every product's type against the filter value as-is.
  A missing filter (None) therefore matches nothing and yields an empty list.
- ``save`` inserts under ``size + 1`` only if that key is free and returns
  the size of the store after the attempt, not the key.

Nothing is ever updated or deleted.

==============================================================================
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Iterable, List, Optional, Protocol

from .models import Product, ProductType, SEED_PRODUCTS


# Module logger
logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Storage operations the HTTP layer relies on."""

    def find_all(self, type: Optional[ProductType]) -> List[Product]:
        ...

    def save(self, product: Product) -> int:
        ...


class ProductStore:
    """
    Lock-guarded in-memory product store.

    Attributes:
        products: Snapshot of all stored products in insertion order

    Example:
        >>> store = ProductStore(SEED_PRODUCTS)
        >>> [p.name for p in store.find_all(ProductType.GADGET)]
        ['Camera', 'iPhone']
        >>> store.find_all(None)
        []
    """

    def __init__(self, seed: Iterable[Product] = ()) -> None:
        """
        Initialize the store.

        Args:
            seed: Products to load as-is, keyed by their own ids
        """
        self._lock = Lock()
        self._products: Dict[int, Product] = {}

        for product in seed:
            self._products[product.id] = product

        if self._products:
            logger.info(f"Seeded product store with {len(self._products)} products")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        with self._lock:
            return list(self._products.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def find_all(self, type: Optional[ProductType]) -> List[Product]:
        """
        Get products whose type equals ``type``.

        Args:
            type: Type filter. None matches no product.

        Returns:
            Matching products in insertion order
        """
        with self._lock:
            return [p for p in self._products.values() if p.type == type]

    def save(self, product: Product) -> int:
        """
        Insert a product under the next key.

        The stored copy carries the assigned key as its id. An occupied key
        leaves the store untouched.

        Args:
            product: Validated product

        Returns:
            Store size after the attempted insert
        """
        with self._lock:
            key = len(self._products) + 1
            if key in self._products:
                logger.warning(f"Key {key} already taken, product '{product.name}' not stored")
            else:
                self._products[key] = product.model_copy(update={"id": key})
                logger.debug(f"Stored product '{product.name}' under key {key}")
            return len(self._products)


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[ProductStore] = None


def get_product_store() -> Optional[ProductStore]:
    """Get the global store instance."""
    return _store_instance


def init_product_store(seed: bool = True) -> ProductStore:
    """
    Initialize the global store instance.

    Args:
        seed: Load the fixed seed products

    Returns:
        ProductStore instance
    """
    global _store_instance
    _store_instance = ProductStore(SEED_PRODUCTS if seed else ())
    return _store_instance
