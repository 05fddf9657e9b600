"""
chatkit - Chat message roles and message models for OpenAI-style chat APIs.
"""

from chatkit.core.model import (
    ChatMessage,
    ChatMessageRole,
    FunctionCall,
    UnknownRoleError,
    UnknownRolePolicy,
    messages_from_wire,
    messages_to_wire,
)

__version__ = "0.1.0"

__all__ = [
    "ChatMessage",
    "ChatMessageRole",
    "FunctionCall",
    "UnknownRoleError",
    "UnknownRolePolicy",
    "messages_from_wire",
    "messages_to_wire",
]
