"""
Module for fetching YouTube captions.
"""

from typing import Iterable, List, Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    NoTranscriptFound,
    TranscriptsDisabled,
)

from caption_summarizer.config import config
from caption_summarizer.models.schemas import CaptionFragment
from caption_summarizer.utils.error_handling import NoCaptionsError
from caption_summarizer.utils.logger import logging


class CaptionFetcher:
    """Class to fetch the caption track of a YouTube video."""

    def __init__(self, language: str = config.CAPTION_LANGUAGE, api: Optional[YouTubeTranscriptApi] = None):
        """
        Initialize the fetcher.

        Args:
            language: Caption language code to request
            api: Transcript API client (a new one is created if None)
        """
        self.language = language
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> List[CaptionFragment]:
        """
        Fetch the ordered caption fragments of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Caption fragments in track order

        Raises:
            NoCaptionsError: The video has no captions in ``self.language``
        """
        logging.info(f"Fetching '{self.language}' captions for video {video_id}")
        try:
            fetched = self.api.fetch(video_id, languages=[self.language])
        except (NoTranscriptFound, TranscriptsDisabled) as e:
            logging.warning(f"No '{self.language}' captions for video {video_id}: {type(e).__name__}")
            raise NoCaptionsError(video_id, reason=type(e).__name__) from e

        fragments = [
            CaptionFragment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched
        ]
        if not fragments:
            raise NoCaptionsError(video_id, reason="empty caption track")

        logging.info(f"Fetched {len(fragments)} caption fragments for video {video_id}")
        return fragments


def assemble_transcript(fragments: Iterable[CaptionFragment]) -> str:
    """Join caption fragment texts with single spaces, keeping their order."""
    return " ".join(fragment.text for fragment in fragments)
