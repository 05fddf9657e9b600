# src/chatkit/core/model/errors.py
import difflib
from typing import Any

from chatkit.core.model.roles import ChatMessageRole


class UnknownRoleError(ValueError):
    """Raised when a received message carries a role tag outside the known set"""

    def __init__(self, tag: Any):
        self.tag = tag
        allowed = ChatMessageRole.tags()
        message = f"Unknown message role {tag!r}. Allowed roles: {', '.join(allowed)}"
        if isinstance(tag, str):
            suggestions = difflib.get_close_matches(tag.strip().lower(), allowed, n=1, cutoff=0.6)
            if suggestions:
                message += f" (did you mean '{suggestions[0]}'?)"
        super().__init__(message)
