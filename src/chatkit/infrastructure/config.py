# src/chatkit/infrastructure/config.py
import os
import threading
from typing import Optional

from dotenv import load_dotenv

from chatkit.core.model.role_policy import UnknownRolePolicy
from chatkit.core.model.roles import ChatMessageRole
from chatkit.infrastructure.logging import get_logger

logger = get_logger(__name__)

POLICY_ENV_VAR = "CHATKIT_UNKNOWN_ROLE_POLICY"
DEFAULT_ROLE_ENV_VAR = "CHATKIT_DEFAULT_ROLE"


class MessageConfig:
    """
    Thread-safe singleton holding the process-wide message decoding settings.

    Manages:
    - Policy applied when a received message has an unrecognized role tag
    - Role substituted when that policy is UnknownRolePolicy.DEFAULT
    """

    _instance: Optional["MessageConfig"] = None
    _lock = threading.Lock()

    DEFAULT_POLICY = UnknownRolePolicy.REJECT
    DEFAULT_ROLE = ChatMessageRole.USER

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._unknown_role_policy = cls.DEFAULT_POLICY
                    instance._default_role = cls.DEFAULT_ROLE
                    cls._instance = instance
        return cls._instance

    @property
    def unknown_role_policy(self) -> UnknownRolePolicy:
        return self._unknown_role_policy

    @property
    def default_role(self) -> ChatMessageRole:
        return self._default_role

    def set_unknown_role_policy(self, policy: UnknownRolePolicy | str) -> None:
        """
        Set the policy for unrecognized role tags.

        Args:
            policy: UnknownRolePolicy member or its value ("reject", "default", "skip")

        Raises:
            ValueError: If policy is not a known value
        """
        self._unknown_role_policy = UnknownRolePolicy.parse(policy)
        logger.debug(f"Unknown role policy set to {self._unknown_role_policy.value}")

    def set_default_role(self, role: ChatMessageRole | str) -> None:
        """
        Set the role substituted under UnknownRolePolicy.DEFAULT.

        Args:
            role: ChatMessageRole member or its tag

        Raises:
            ValueError: If role is not a known tag
        """
        resolved = ChatMessageRole.from_tag(role)
        if resolved is None:
            raise ValueError(
                f"Invalid default role {role!r}. "
                f"Allowed values: {', '.join(ChatMessageRole.tags())}"
            )
        self._default_role = resolved
        logger.debug(f"Default role set to {resolved.to_tag()}")

    def reset(self) -> None:
        """Restore the built-in defaults"""
        self._unknown_role_policy = self.DEFAULT_POLICY
        self._default_role = self.DEFAULT_ROLE

    def load_from_env(self, dotenv_path: str | None = None) -> "MessageConfig":
        """
        Load settings from environment variables (and a .env file, if any).

        Variables:
            CHATKIT_UNKNOWN_ROLE_POLICY: "reject" | "default" | "skip"
            CHATKIT_DEFAULT_ROLE: one of the role tags

        Unset variables leave the current value untouched.

        Args:
            dotenv_path: Explicit .env path. Default: python-dotenv lookup

        Returns:
            The configuration singleton

        Raises:
            ValueError: If a variable holds an invalid value
        """
        load_dotenv(dotenv_path)

        policy = os.getenv(POLICY_ENV_VAR)
        if policy:
            self.set_unknown_role_policy(policy)

        default_role = os.getenv(DEFAULT_ROLE_ENV_VAR)
        if default_role:
            self.set_default_role(default_role)

        logger.info(
            f"Message config loaded - policy={self._unknown_role_policy.value}, "
            f"default_role={self._default_role.to_tag()}"
        )
        return self
