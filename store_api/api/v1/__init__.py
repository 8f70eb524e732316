"""
==============================================================================
API v1 Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product listing and creation

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
