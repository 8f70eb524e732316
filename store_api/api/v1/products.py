"""
==============================================================================
Product Endpoints
==============================================================================

Endpoints for listing and creating products.

==============================================================================
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from store_api.catalog.models import Product, ProductType
from store_api.catalog.store import ProductRepository
from store_api.core import exceptions
from store_api.core.dependencies import get_store
from store_api.core.exceptions import PRODUCTS_PATH
from store_api.schemas.common import ErrorResponse
from store_api.schemas.product import ProductCreatedResponse, ProductDetails
from store_api.utils.validators import ProductValidator


logger = logging.getLogger(__name__)

router = APIRouter(prefix=PRODUCTS_PATH, tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, store: ProductRepository):
        self._store = store
        self._validator = ProductValidator()

    def list_products(self, type: Optional[ProductType]) -> List[Product]:
        """List products of the given type. No type lists nothing."""
        return self._store.find_all(type)

    def create_product(self, payload: ProductDetails) -> dict:
        """Validate and store a product."""
        violations = self._validator.validate(payload)
        if violations:
            raise exceptions.validation_failed(violations)

        size = self._store.save(payload.to_product())
        logger.info(f"Created product '{payload.name}' ({payload.type.value}), store size {size}")

        return {"id": size}


def parse_type_filter(
    type: Optional[str] = Query(None, description="book, food, gadget or other")
) -> Optional[ProductType]:
    """
    Resolve the ``type`` query parameter.

    Absent and empty values both mean no filter. Unknown values are
    validation failures.
    """
    if not type:
        return None
    try:
        return ProductType(type)
    except ValueError:
        raise exceptions.validation_failed([f"type: unknown value '{type}'"])


@router.get("", response_model=List[Product], responses={400: {"model": ErrorResponse}})
async def list_products(
    type: Optional[ProductType] = Depends(parse_type_filter),
    store: ProductRepository = Depends(get_store)
):
    """List products filtered by type."""
    controller = ProductController(store)
    return controller.list_products(type)


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(
    payload: ProductDetails,
    store: ProductRepository = Depends(get_store)
):
    """Create a product."""
    controller = ProductController(store)
    return controller.create_product(payload)
