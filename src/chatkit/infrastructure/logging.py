# src/chatkit/infrastructure/logging.py
"""
Logging configuration module for chatkit.

Uses Loguru as backend. This module provides two main functions:
- setup_logging(): configures the logger at application startup
- get_logger(name): gets a logger "bound" with the module name

Loguru has ONE global logger. get_logger() does not create a new one, it
only binds the module name into the record's "extra" context:

    from chatkit.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.warning("Unknown role 'robot', using default 'user'")

Levels used by the package:
    DEBUG   - configuration changes, batch decoding summaries
    INFO    - configuration loaded from the environment
    WARNING - a received message needed a fallback (default role, skipped)
"""

from loguru import logger
from pathlib import Path
import sys


FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | "
    "{extra[name]}:{function}:{line} | {message}"
)
CONSOLE_FORMAT = (
    "<level>{level:<8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | {message}"
)

_is_configured = False


def setup_logging(
    level: str = "DEBUG",
    console_level: str = "INFO",
    log_dir: str = "logs",
    log_filename: str = "chatkit.log"
) -> None:
    """
    Replace Loguru's default stderr handler with chatkit's file and console sinks.

    Only the first call has an effect.

    Args:
        level: Minimum level for the file sink. Default: "DEBUG"
        console_level: Minimum level for stderr. Default: "INFO"
        log_dir: Directory for the log file, created if missing
        log_filename: Name of the log file. Default: "chatkit.log"

    The file sink rotates at 50 MB and keeps 7 days of files. Records
    logged without get_logger() are attributed to "chatkit".
    """
    global _is_configured

    if _is_configured:
        return

    log_file = Path(log_dir) / log_filename
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    # {extra[name]} must resolve for records that never went through bind()
    logger.configure(extra={"name": "chatkit"})
    logger.add(
        sink=log_file,
        level=level,
        format=FILE_FORMAT,
        rotation="50 MB",
        retention="7 days",
        encoding="utf-8",
    )
    logger.add(sink=sys.stderr, level=console_level, format=CONSOLE_FORMAT, colorize=True)

    _is_configured = True

    get_logger(__name__).info(
        f"chatkit logging ready - file={level} ({log_file}), console={console_level}"
    )


def get_logger(name: str):
    """
    Get a logger with the module name bound.

    Args:
        name: Module name. Always use __name__ for consistency.

    Returns:
        Loguru logger with bound name.

    Note:
        If setup_logging() wasn't called, behavior is Loguru's default (stderr)
    """
    return logger.bind(name=name)


def format_message_for_trace(message, max_chars: int = 2500) -> str:
    """
    Format a ChatMessage for TRACE logging.

    Args:
        message: A ChatMessage instance
        max_chars: Maximum characters before truncation. Default: 2500

    Returns:
        Formatted string representation of the message

    Example output:
        system: "You are an expert..."
        user(alice): "Calculate 2+2"
        function(get_weather): "{'temp': 21}"
        assistant: <no content> | function_call=get_weather({"location": "Rome"})
    """
    role = message.role.to_tag() if hasattr(message.role, "to_tag") else str(message.role)
    author = f"{role}({message.name})" if message.name else role
    content = f'"{message.content}"' if message.content is not None else "<no content>"
    formatted = f"{author}: {content}"

    function_call = getattr(message, "function_call", None)
    if function_call is not None:
        formatted += f" | function_call={function_call.name}({function_call.arguments})"

    if len(formatted) > max_chars:
        truncate_marker = " ... [TRUNCATED]"
        formatted = formatted[:max_chars - len(truncate_marker)] + truncate_marker

    return formatted
