"""
Tests for YouTube URL parsing.
"""

import pytest

from caption_summarizer.core.url_parser import extract_video_id, require_video_id
from caption_summarizer.utils.error_handling import InvalidYouTubeURLError


@pytest.mark.parametrize("url, expected", [
    ("https://www.youtube.com/watch?v=abc123", "abc123"),
    ("https://youtube.com/watch?v=abc123&t=42s", "abc123"),
    ("https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R", "V3TUEeB0kW0"),
    ("https://youtube.com/shorts/short42#comments", "short42"),
    ("https://www.youtube.com/embed/emb_ed-1?autoplay=1", "emb_ed-1"),
    ("https://m.youtube.com/watch?v=mobile9", "mobile9"),
])
def test_extract_video_id_supported_formats(url, expected):
    """Test extracting IDs from every supported URL shape."""
    assert extract_video_id(url) == expected


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/",
    "https://www.youtube.com/watch",
    "https://vimeo.com/123456",
    "not a url",
    "",
])
def test_extract_video_id_unsupported(url):
    """Test that URLs without an ID marker are rejected."""
    assert extract_video_id(url) is None


def test_extract_video_id_stops_at_newline():
    """Test that the ID ends at a newline."""
    assert extract_video_id("https://youtu.be/abc123\nmore text") == "abc123"


def test_require_video_id_raises_with_supported_formats():
    """Test that the error lists the accepted URL formats."""
    with pytest.raises(InvalidYouTubeURLError) as exc_info:
        require_video_id("https://www.youtube.com/")

    error = exc_info.value
    assert error.status_code == 400
    assert error.error == "Invalid YouTube URL"
    assert "watch?v=VIDEO_ID" in error.details
    assert "youtu.be/VIDEO_ID" in error.details
    assert "shorts/VIDEO_ID" in error.details
