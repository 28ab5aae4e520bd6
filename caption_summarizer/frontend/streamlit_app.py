"""
Main Streamlit application for YouTube Video Summarizer.
"""

import os
from typing import Any, Dict

import requests
import streamlit as st
from dotenv import load_dotenv

from caption_summarizer.frontend.api_client import ApiClient
from caption_summarizer.frontend.components import (
    header, captions_note, youtube_input, loading_spinner,
    display_error, display_summary,
)
from caption_summarizer.utils.error_handling import SUPPORTED_URL_FORMATS


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(os.getenv("API_URL", "http://localhost:8000"))


def process_youtube_url(url: str) -> Dict[str, Any]:
    """
    Process a YouTube URL to get a summary.

    Args:
        url: YouTube URL

    Returns:
        Summary or error message
    """
    client = st.session_state.api_client

    if not client.is_youtube_url(url):
        return {"error": "Please enter a valid YouTube URL", "details": SUPPORTED_URL_FORMATS}

    try:
        with loading_spinner("Summarizing video. This may take a minute..."):
            return client.summarize_video(url)
    except requests.RequestException as e:
        return {"error": "Error summarizing video. Please try again.", "details": str(e)}


def main():
    """Main application entry point."""
    header()
    init_session_state()
    captions_note()

    url = youtube_input()
    if not url:
        return

    result = process_youtube_url(url)
    if "error" in result:
        display_error(result["error"], result.get("details"))
    else:
        display_summary(result["summary"])


if __name__ == "__main__":
    main()
