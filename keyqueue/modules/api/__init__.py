"""
API Module - Black Box Interface

Purpose: HTTP response models
Interface: ErrorResponse, BackendKind

The HTTP layer only orchestrates - queue logic lives in the queue module.
"""

from .models import BackendKind, ErrorResponse

__all__ = ["BackendKind", "ErrorResponse"]
