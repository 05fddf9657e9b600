# src/chatkit/core/model/role_policy.py
from enum import Enum


class UnknownRolePolicy(str, Enum):
    """What to do with a received message whose role tag is not recognized"""

    REJECT = "reject"
    DEFAULT = "default"
    SKIP = "skip"

    @classmethod
    def parse(cls, value: "UnknownRolePolicy | str") -> "UnknownRolePolicy":
        """
        Get the policy for a member or raw value.

        Raises:
            ValueError: If value is not one of "reject", "default", "skip"
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Invalid unknown role policy {value!r}. Allowed values: {allowed}"
            ) from None
