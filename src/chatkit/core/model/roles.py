# src/chatkit/core/model/roles.py
from enum import Enum


class ChatMessageRole(str, Enum):
    """
    Role of a chat message.

    A conversation usually opens with a system message, followed by
    alternating user and assistant messages. The value of each member is the
    tag sent to the chat API.
    """

    # Sets the behavior of the assistant
    SYSTEM = "system"
    # Instructions from end users, or written by a developer
    USER = "user"
    # Prior responses, or developer-written examples of desired behavior
    ASSISTANT = "assistant"
    # Result of a function call, for models with function access
    FUNCTION = "function"

    @classmethod
    def from_tag(cls, tag: str) -> "ChatMessageRole | None":
        """
        Get the role for a raw tag.

        The match is exact and case-sensitive: "system" resolves,
        "System" and " system" do not.

        Args:
            tag: Must be one of "system", "user", "assistant" or "function"

        Returns:
            The matching role, or None if the tag is not recognized
        """
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        """All known tags, in declaration order."""
        return tuple(member.value for member in cls)

    def to_tag(self) -> str:
        """Tag to pass to the API."""
        return self.value

    def __str__(self) -> str:
        return self.value
