"""
Extraction of video IDs from YouTube URLs.
"""

import re
from typing import Optional

from caption_summarizer.utils.error_handling import InvalidYouTubeURLError

# Tried in order; the first match wins.
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/shorts/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
]


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL, or None if no pattern matches."""
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)

    return None


def require_video_id(url: str) -> str:
    """Like ``extract_video_id`` but raises ``InvalidYouTubeURLError``."""
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidYouTubeURLError(url)
    return video_id
