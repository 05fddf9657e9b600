# src/chatkit/core/model/chat_message.py
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from chatkit.core.model.errors import UnknownRoleError
from chatkit.core.model.role_policy import UnknownRolePolicy
from chatkit.core.model.roles import ChatMessageRole
from chatkit.infrastructure.config import MessageConfig
from chatkit.infrastructure.logging import format_message_for_trace, get_logger
from chatkit.infrastructure.utility.pydantic_validation import format_validation_error

logger = get_logger(__name__)


class FunctionCall(BaseModel):
    """Function the assistant asks the caller to run"""

    name: str = Field(..., min_length=1, description="Name of the function to call")
    arguments: str = Field(
        default="{}", description="JSON-encoded arguments, as generated by the model"
    )


class ChatMessage(BaseModel):
    """Single message of a chat conversation"""

    role: ChatMessageRole = Field(..., description="Role of the message author")
    content: str | None = Field(
        default="", description="Textual content of the message"
    )
    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Author name; for function messages, the function name",
    )
    function_call: FunctionCall | None = Field(
        default=None, description="Function call requested by the assistant"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Creation timestamp"
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Additional metadata, never sent to the API"
    )

    @model_validator(mode="after")
    def validate_role_requirements(self) -> "ChatMessage":
        if self.role == ChatMessageRole.FUNCTION and not self.name:
            raise ValueError("function messages require 'name' (the function that produced the content)")
        if self.content is None and self.role != ChatMessageRole.ASSISTANT:
            raise ValueError(f"{self.role.to_tag()} messages require 'content'")
        if self.function_call is not None and self.role != ChatMessageRole.ASSISTANT:
            raise ValueError("only assistant messages may carry 'function_call'")
        return self

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=ChatMessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str, name: str | None = None) -> "ChatMessage":
        return cls(role=ChatMessageRole.USER, content=content, name=name)

    @classmethod
    def assistant(
        cls, content: str | None, function_call: FunctionCall | None = None
    ) -> "ChatMessage":
        return cls(role=ChatMessageRole.ASSISTANT, content=content, function_call=function_call)

    @classmethod
    def function(cls, name: str, content: str) -> "ChatMessage":
        return cls(role=ChatMessageRole.FUNCTION, content=content, name=name)

    def to_wire(self) -> dict[str, Any]:
        """
        Convert to the dictionary sent to the chat API.

        The role appears as its bare tag. timestamp and metadata are local
        only and never included; name and function_call are included only
        when set.
        """
        wire: dict[str, Any] = {"role": self.role.to_tag(), "content": self.content}
        if self.name is not None:
            wire["name"] = self.name
        if self.function_call is not None:
            wire["function_call"] = self.function_call.model_dump()
        return wire

    @classmethod
    def from_wire(
        cls,
        payload: Mapping[str, Any],
        policy: UnknownRolePolicy | str | None = None,
    ) -> "ChatMessage | None":
        """
        Build a message from a dictionary received from the chat API.

        Args:
            payload: Wire dictionary with "role", "content" and optionally
                     "name" and "function_call". Other keys are ignored.
            policy: What to do when "role" is missing or not recognized.
                    Default: MessageConfig().unknown_role_policy

        Returns:
            The message, or None when the role is unknown and the policy is SKIP

        Raises:
            UnknownRoleError: If the role is unknown and the policy is REJECT
            ValueError: If the remaining fields are invalid for the role
        """
        return _decode(payload, _resolve_policy(policy), context="message")


def messages_to_wire(messages: Iterable[ChatMessage]) -> list[dict[str, Any]]:
    """Convert messages to wire dictionaries, preserving order"""
    return [message.to_wire() for message in messages]


def messages_from_wire(
    payloads: Iterable[Mapping[str, Any]],
    policy: UnknownRolePolicy | str | None = None,
) -> list[ChatMessage]:
    """
    Build messages from wire dictionaries, preserving order.

    Messages with an unknown role are dropped under UnknownRolePolicy.SKIP.

    Raises:
        UnknownRoleError: If a role is unknown and the policy is REJECT
        ValueError: If a message has invalid fields
    """
    resolved = _resolve_policy(policy)
    messages = []
    received = 0
    for index, payload in enumerate(payloads):
        received += 1
        message = _decode(payload, resolved, context=f"message #{index}")
        if message is not None:
            logger.opt(lazy=True).trace("{}", lambda: format_message_for_trace(message))
            messages.append(message)

    logger.debug(f"Decoded {len(messages)}/{received} messages (policy={resolved.value})")
    return messages


def _resolve_policy(policy: UnknownRolePolicy | str | None) -> UnknownRolePolicy:
    if policy is None:
        return MessageConfig().unknown_role_policy
    return UnknownRolePolicy.parse(policy)


def _decode(
    payload: Mapping[str, Any],
    policy: UnknownRolePolicy,
    context: str,
) -> ChatMessage | None:
    raw_role = payload.get("role")
    role = ChatMessageRole.from_tag(raw_role)

    if role is None:
        if policy == UnknownRolePolicy.REJECT:
            raise UnknownRoleError(raw_role)
        if policy == UnknownRolePolicy.SKIP:
            logger.warning(f"Skipping {context}: unknown role {raw_role!r}")
            return None
        role = MessageConfig().default_role
        logger.warning(f"Unknown role {raw_role!r} in {context}, using default '{role.to_tag()}'")

    try:
        return ChatMessage(
            role=role,
            content=payload.get("content", ""),
            name=payload.get("name"),
            function_call=payload.get("function_call"),
        )
    except ValidationError as e:
        raise ValueError(format_validation_error(e, f"{context} (role '{role.to_tag()}')")) from e
