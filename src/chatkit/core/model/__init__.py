"""
Model module - Message roles and message definitions for chat APIs.
"""


from chatkit.core.model.roles import ChatMessageRole
from chatkit.core.model.role_policy import UnknownRolePolicy
from chatkit.core.model.errors import UnknownRoleError
from chatkit.core.model.chat_message import (
    ChatMessage,
    FunctionCall,
    messages_from_wire,
    messages_to_wire,
)

__all__ = [
    "ChatMessageRole",
    "UnknownRolePolicy",
    "UnknownRoleError",
    "ChatMessage",
    "FunctionCall",
    "messages_from_wire",
    "messages_to_wire",
]
