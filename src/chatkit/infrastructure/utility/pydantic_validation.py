# src/chatkit/infrastructure/utility/pydantic_validation.py
"""
Shared Pydantic validation utilities.

Turns a ValidationError raised while building a ChatMessage into a readable
message with one actionable hint per failing field. For role errors the hint
lists the closest known tags, e.g. 'System' -> Did you mean: system?
"""

import difflib
import re

from pydantic import ValidationError


def _extract_invalid_value(err: dict) -> str | None:
    """Extract the invalid value from a validation error's input context."""
    ctx = err.get("ctx", {})
    input_val = err.get("input")
    if input_val is None:
        input_val = ctx.get("input")
    if input_val is not None:
        return str(input_val)
    return None


def _extract_allowed_values(err: dict) -> list[str]:
    """Extract allowed values from a literal_error or enum error."""
    ctx = err.get("ctx", {})
    expected = ctx.get("expected")
    if expected and isinstance(expected, str):
        return re.findall(r"'([^']+)'", expected)
    return []


def _suggest_similar(invalid: str, allowed: list[str], max_suggestions: int = 3) -> list[str]:
    """Find allowed values most similar to the invalid one."""
    return difflib.get_close_matches(invalid, allowed, n=max_suggestions, cutoff=0.4)


def _format_location(loc: tuple) -> str:
    """Readable path for an error location, e.g. messages[2].role"""
    path_parts = []
    for item in loc:
        if isinstance(item, int):
            path_parts.append(f"[{item}]")
        elif path_parts:
            path_parts.append(f".{item}")
        else:
            path_parts.append(str(item))
    return "".join(path_parts) or "root"


def get_validation_action(err: dict, field_name: str) -> str:
    """
    Get actionable message for a Pydantic validation error.

    Args:
        err: Single error dict from ValidationError.errors()
        field_name: Name of the field that failed validation

    Returns:
        Human-readable action to fix the error
    """
    err_type = err["type"]

    if err_type == "missing":
        return f"Add '{field_name}' - it is required."
    elif err_type.endswith("_type"):
        expected = err_type.replace("_type", "")
        return f"Provide a {expected} value for '{field_name}'."
    elif err_type in ("string_too_short", "string_too_long"):
        return f"Adjust length of '{field_name}'."
    elif err_type == "string_pattern_mismatch":
        return f"Use only letters, digits, '_' and '-' in '{field_name}'."
    elif err_type in ("enum", "literal_error"):
        invalid = _extract_invalid_value(err)
        allowed = _extract_allowed_values(err)
        if invalid is not None and allowed:
            suggestions = _suggest_similar(invalid, allowed)
            if suggestions:
                return (
                    f"'{invalid}' is not valid for '{field_name}'. "
                    f"Did you mean: {', '.join(suggestions)}?"
                )
            return f"'{invalid}' is not valid for '{field_name}'. Check exact spelling."
        return f"Use an allowed value for '{field_name}'."
    elif err_type == "value_error":
        return "Fix the message fields as described above."
    else:
        return f"Fix '{field_name}'."


def format_validation_error(e: ValidationError, context: str) -> str:
    """
    Format a Pydantic ValidationError into a readable, actionable message.

    Args:
        e: The ValidationError exception
        context: Description of what was being validated (e.g., "message #3")

    Returns:
        Formatted error message with details and suggested actions
    """
    error_details = []

    for err in e.errors():
        loc = _format_location(err["loc"])
        field_name = str(err["loc"][-1]) if err["loc"] else "message"
        action = get_validation_action(err, field_name)

        if err["type"] in ("enum", "literal_error"):
            invalid = _extract_invalid_value(err)
            msg = f"Invalid value: '{invalid}'" if invalid is not None else err["msg"]
        else:
            msg = err["msg"]

        error_details.append(f"  - '{loc}': {msg}\n    Action: {action}")

    return f"VALIDATION ERROR for {context}:\n\n" + "\n\n".join(error_details)
