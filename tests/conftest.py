"""
Configuration for pytest tests.
"""

import os
import pytest

# Read when caption_summarizer.config is imported
os.environ.setdefault("ENVIRONMENT", "development")

from caption_summarizer.models.schemas import CaptionFragment


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Provide a fake API key so no test depends on a real .env file."""
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "test_api_key")
    yield


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=abc123"


@pytest.fixture
def caption_fragments():
    """Return the captions of a short test video."""
    return [
        CaptionFragment(text="Hello world.", start=0.0, duration=1.5),
        CaptionFragment(text="This is a test.", start=1.5, duration=2.0),
    ]
