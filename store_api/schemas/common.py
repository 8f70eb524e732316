"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across API endpoints.

==============================================================================
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Generic error body. Never carries field-level detail."""
    timestamp: str
    status: int = Field(ge=400, le=599)
    error: str
    path: str
