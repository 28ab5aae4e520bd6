"""
YouTube Video Summarizer.

This application fetches the English captions of a YouTube video and produces
a summary of them with a Hugging Face hosted summarization model.
"""

from caption_summarizer.config import config

__version__ = config.APP_VERSION
