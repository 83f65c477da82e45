"""
keyqueue HTTP data models.

These models describe the JSON bodies the HTTP layer returns.
"""

from enum import Enum

from pydantic import BaseModel, Field


class BackendKind(str, Enum):
    """Queue storage backends."""

    MEMORY = "memory"
    REDIS = "redis"


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str = Field(..., description="Human readable error message")
