"""
Pytest configuration and shared fixtures.

Fixtures provided:
- message_config: the MessageConfig singleton, reset around every test
- log_messages: captures loguru output at WARNING and above
- sample_*_message: one ChatMessage per role
- sample_conversation: a short conversation covering all four roles
- sample_wire_conversation: the same conversation as wire dictionaries
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from chatkit.core.model.chat_message import ChatMessage  # noqa: E402
from chatkit.infrastructure.config import MessageConfig  # noqa: E402


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def message_config():
    """Provides the MessageConfig singleton with built-in defaults."""
    config = MessageConfig()
    config.reset()
    yield config
    config.reset()


@pytest.fixture
def log_messages():
    """Collects formatted loguru messages at WARNING level and above."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)


# ============================================================================
# Message Fixtures
# ============================================================================

@pytest.fixture
def sample_system_message():
    """Provides a sample system ChatMessage."""
    return ChatMessage.system("You are a helpful AI assistant.")


@pytest.fixture
def sample_user_message():
    """Provides a sample user ChatMessage."""
    return ChatMessage.user("What is the weather today?")


@pytest.fixture
def sample_assistant_message():
    """Provides a sample assistant ChatMessage."""
    return ChatMessage.assistant("I can help you with that!")


@pytest.fixture
def sample_function_message():
    """Provides a sample function ChatMessage."""
    return ChatMessage.function("get_weather", '{"location": "Rome", "temp": 21}')


@pytest.fixture
def sample_conversation(
    sample_system_message,
    sample_user_message,
    sample_assistant_message,
    sample_function_message,
):
    """Provides a conversation with one message per role."""
    return [
        sample_system_message,
        sample_user_message,
        sample_function_message,
        sample_assistant_message,
    ]


@pytest.fixture
def sample_wire_conversation():
    """Provides a conversation as received from the chat API."""
    return [
        {"role": "system", "content": "You are a helpful AI assistant."},
        {"role": "user", "content": "What is the weather today?", "name": "alice"},
        {"role": "function", "content": '{"temp": 21}', "name": "get_weather"},
        {"role": "assistant", "content": "It is 21 degrees in Rome."},
    ]


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
