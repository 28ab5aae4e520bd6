"""
Centralized error handling for the application.

Every failure the pipeline can report is a ``SummarizerAppError`` carrying a
short ``error`` summary, optional multi-line ``details`` for the user, and the
HTTP status the API answers with.
"""

import json
from typing import Optional, Dict, Any

from caption_summarizer.config import config
from caption_summarizer.utils.logger import logging


SUPPORTED_URL_FORMATS = (
    "Please provide a valid YouTube video URL in one of these formats:\n"
    "• https://www.youtube.com/watch?v=VIDEO_ID\n"
    "• https://youtu.be/VIDEO_ID\n"
    "• https://youtube.com/shorts/VIDEO_ID"
)

NO_CAPTIONS_DETAILS = (
    "This video does not have English captions available. Please try a different "
    "video that has English captions enabled. You can check if a video has captions "
    "by looking for the CC (Closed Captions) button in the YouTube player."
)


class SummarizerAppError(Exception):
    """Base class for errors reported to the user."""

    status_code = 500
    default_error = "Failed to summarize video"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None):
        self.error = error or self.default_error
        self.details = details
        super().__init__(self.error if details is None else f"{self.error}: {details}")


class InvalidYouTubeURLError(SummarizerAppError):
    """The URL does not match any supported YouTube URL shape."""

    status_code = 400
    default_error = "Invalid YouTube URL"

    def __init__(self, url: str):
        self.url = url
        super().__init__(details=SUPPORTED_URL_FORMATS)


class NoCaptionsError(SummarizerAppError):
    """The video has no captions in the requested language."""

    status_code = 400
    default_error = "No English captions found for this video"

    def __init__(self, video_id: str, reason: Optional[str] = None):
        self.video_id = video_id
        self.reason = reason
        super().__init__(details=NO_CAPTIONS_DETAILS)


class SummarizerConfigurationError(SummarizerAppError):
    """Required configuration (the API key) is missing. Never retried."""

    default_error = "Summarizer is not configured"


class UpstreamServiceError(SummarizerAppError):
    """The inference API could not be reached or answered with a non-2xx status."""

    default_error = "Hugging Face API error"

    def __init__(self, status_code_upstream: Optional[int], reason: str, body: Any = None):
        self.status_code_upstream = status_code_upstream
        self.body = body
        details = reason
        if body:
            details += f" - {body if isinstance(body, str) else json.dumps(body)}"
        super().__init__(details=details)


class InvalidUpstreamResponseError(SummarizerAppError):
    """The inference API answered 2xx but without a summary in the body."""

    default_error = "Invalid response from Hugging Face API"


def build_error_response(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON body returned for a failed request.

    Args:
        error: Short error summary
        details: Optional user guidance or underlying message

    Returns:
        Dictionary with ``error`` and, when present, ``details``
    """
    content = {"error": error}
    if details:
        content["details"] = details
    return content


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
