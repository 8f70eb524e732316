"""
==============================================================================
Product Store API
==============================================================================

In-memory product inventory service built on FastAPI.

==============================================================================
"""

__version__ = "1.0.0"
