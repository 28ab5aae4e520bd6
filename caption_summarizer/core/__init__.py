"""
Core functionality for the YouTube caption summarizer.

This package contains modules for parsing YouTube URLs, fetching captions,
chunking transcripts and summarizing them.
"""
