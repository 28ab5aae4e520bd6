"""
Utilities shared across the caption summarizer: logging, error types and
small text helpers.
"""
