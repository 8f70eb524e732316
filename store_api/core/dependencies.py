"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the product store.

The store is created once at startup and handed to the HTTP layer through
``get_store_optional``. ``get_store`` builds on it and fails when nothing is
loaded. Tests swap the store out by overriding ``get_store_optional``, which
every endpoint, health included, resolves through.

Usage Examples:
--------------
    @router.get("")
    async def list_products(store: ProductRepository = Depends(get_store)):
        ...

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends

from store_api.catalog.store import ProductStore, get_product_store
from store_api.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_store_optional() -> Optional[ProductStore]:
    """
    FastAPI dependency that provides the product store, if any.

    Returns:
        The store created at application startup, or None
    """
    return get_product_store()


def get_store(store: Optional[ProductStore] = Depends(get_store_optional)) -> ProductStore:
    """
    FastAPI dependency that provides the product store.

    Returns:
        The store created at application startup

    Raises:
        AppException: If the store has not been initialised
    """
    if store is None:
        logger.error("Product store requested before initialisation")
        raise exceptions.catalog_not_loaded()
    return store
