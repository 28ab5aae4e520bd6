"""
API client for communicating with the YouTube Video Summarizer backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin

from caption_summarizer.config import config


class ApiClient:
    """Client for interacting with the YouTube Video Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: Optional[float] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def is_youtube_url(url: str) -> bool:
        """Cheap client-side check before a request is sent."""
        return "youtube.com" in url or "youtu.be" in url

    def summarize_video(self, url: str) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL

        Returns:
            ``{"summary": ...}`` on success, otherwise ``{"error": ..., "details": ...}``
        """
        response = requests.post(
            self._url("summarize"),
            json={"videoUrl": url},
            timeout=self.timeout,
        )

        try:
            data = response.json()
        except ValueError:
            response.raise_for_status()
            raise

        if not response.ok:
            return {
                "error": data.get("error") or "Failed to summarize video",
                "details": data.get("details"),
            }

        return data
