"""
==============================================================================
Main API Router
==============================================================================

Combines all routes. Routes are mounted at the root, so the product
endpoints live at ``/products``.

==============================================================================
"""

from fastapi import APIRouter

from store_api.api.v1 import health, products


class MainAPIRouter:
    """
    Main API router combining all routes.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter()
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all routers."""
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


api_router = MainAPIRouter().router
