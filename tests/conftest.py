"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def mock_completion_client():
    """Mock completion client answering every prompt with a kanji word."""
    client = Mock()
    client.complete.return_value = "友達\n"
    return client


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI client."""
    client = Mock()
    client.chat.completions.create.return_value = Mock(
        choices=[Mock(message=Mock(content="mocked response"))]
    )
    return client


@pytest.fixture
def mock_gemini_client():
    """Mock Gemini client."""
    client = Mock()
    client.models.generate_content.return_value = Mock(text="mocked response")
    return client


@pytest.fixture
def sample_inputs():
    """Typed romaji with the conversions the UI should offer."""
    return [
        ("konnichiwa", "こんにちわ", "コンニチワ"),
        ("kitte", "きって", "キッテ"),
        ("tomodachi", "ともだち", "トモダチ"),
        ("sushi", "すし", "スシ"),
    ]
