"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import patch, MagicMock

from caption_summarizer.frontend.api_client import ApiClient


def make_response(status_code, json_data):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = json_data
    return response


@pytest.fixture
def api_client():
    return ApiClient("http://localhost:8000")


def test_summarize_video(api_client):
    """Test a successful summary request."""
    with patch("caption_summarizer.frontend.api_client.requests.post") as mock_post:
        mock_post.return_value = make_response(200, {"summary": "Short summary."})
        result = api_client.summarize_video("https://youtu.be/abc123")

    assert result == {"summary": "Short summary."}
    mock_post.assert_called_once_with(
        "http://localhost:8000/api/summarize",
        json={"videoUrl": "https://youtu.be/abc123"},
        timeout=None,
    )


def test_summarize_video_error_details(api_client):
    """Test that error bodies are returned instead of raised."""
    with patch("caption_summarizer.frontend.api_client.requests.post") as mock_post:
        mock_post.return_value = make_response(
            400, {"error": "Invalid YouTube URL", "details": "Use a watch URL"}
        )
        result = api_client.summarize_video("https://youtube.com/")

    assert result == {"error": "Invalid YouTube URL", "details": "Use a watch URL"}


@pytest.mark.parametrize("url, expected", [
    ("https://www.youtube.com/watch?v=abc123", True),
    ("https://youtu.be/abc123", True),
    ("https://vimeo.com/1234", False),
])
def test_is_youtube_url(url, expected):
    assert ApiClient.is_youtube_url(url) is expected
