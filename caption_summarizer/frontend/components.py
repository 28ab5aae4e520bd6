"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Optional


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Video Summarizer",
        page_icon="🎬",
        layout="centered",
    )

    st.title("🎬 YouTube Video Summarizer")
    st.markdown("Get AI-powered summaries of any YouTube video with English captions")
    st.divider()


def captions_note():
    """Explain which videos can be summarized."""
    st.info(
        "**Important Note**\n\n"
        "This tool only works with YouTube videos that have English captions available. "
        "You can check if a video has captions by looking for the CC (Closed Captions) "
        "button in the YouTube player."
    )


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The submitted YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "YouTube Video URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
        )
        submit = st.form_submit_button("Summarize Video")

    if submit and url:
        return url.strip()

    return None


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: str, details: Optional[str] = None):
    """
    Display an error message with optional guidance.

    Args:
        message: Error message to display
        details: Multi-line details shown below the message
    """
    st.error(message)
    if details:
        st.text(details)


def display_summary(summary: str):
    """
    Display the video summary.

    Args:
        summary: Summary text
    """
    st.markdown("### Summary")
    st.markdown(summary)
