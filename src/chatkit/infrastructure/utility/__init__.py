# src/chatkit/infrastructure/utility/__init__.py
"""Shared utility modules for chatkit."""

from chatkit.infrastructure.utility.pydantic_validation import (
    format_validation_error,
    get_validation_action,
)

__all__ = [
    "format_validation_error",
    "get_validation_action",
]
