"""
Configuration settings for the YouTube caption summarizer application.
"""

import os
from typing import Dict, Any, Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Summarizer"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # Summarization service
    HUGGINGFACE_MODEL_URL = os.getenv(
        "HUGGINGFACE_MODEL_URL",
        "https://api-inference.huggingface.co/models/facebook/bart-large-cnn",
    )
    SUMMARY_REQUEST_TIMEOUT = _optional_float("SUMMARY_REQUEST_TIMEOUT")

    # Pipeline
    CAPTION_LANGUAGE = "en"
    CHUNK_MAX_LENGTH = int(os.getenv("CHUNK_MAX_LENGTH", "1024"))
    MAX_SUMMARY_PASSES = int(os.getenv("MAX_SUMMARY_PASSES", "3"))
    SUMMARY_MAX_WORKERS = int(os.getenv("SUMMARY_MAX_WORKERS", "1"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @staticmethod
    def get_api_key() -> Optional[str]:
        """Read the Hugging Face API key at call time."""
        return os.getenv("HUGGINGFACE_API_KEY") or None

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # The key is only required when a summary is requested.
        if not cls.get_api_key():
            print("WARNING: HUGGINGFACE_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")

    @classmethod
    def get_settings(cls) -> Dict[str, Any]:
        """Get the pipeline settings (without secrets)."""
        return {
            "model_url": cls.HUGGINGFACE_MODEL_URL,
            "caption_language": cls.CAPTION_LANGUAGE,
            "chunk_max_length": cls.CHUNK_MAX_LENGTH,
            "max_summary_passes": cls.MAX_SUMMARY_PASSES,
            "summary_max_workers": cls.SUMMARY_MAX_WORKERS,
            "request_timeout": cls.SUMMARY_REQUEST_TIMEOUT,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
