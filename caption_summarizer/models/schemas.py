"""
Data models for the YouTube caption summarizer application.
"""
import time
from typing import Optional
from pydantic import BaseModel, Field

from caption_summarizer.config import config


class CaptionFragment(BaseModel):
    """One timed snippet of a video's caption track."""
    text: str
    start: float = 0.0
    duration: float = 0.0

    model_config = {"frozen": True, "from_attributes": True}


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    max_length: int = 150
    min_length: int = 30
    do_sample: bool = False
    num_beams: int = 4
    early_stopping: bool = True
    chunk_max_length: int = Field(default_factory=lambda: config.CHUNK_MAX_LENGTH)
    max_passes: int = Field(default_factory=lambda: config.MAX_SUMMARY_PASSES, ge=1)
    max_workers: int = Field(default_factory=lambda: config.SUMMARY_MAX_WORKERS, ge=1)

    def generation_parameters(self) -> dict:
        """Parameters sent to the inference API with every chunk."""
        return self.model_dump(
            include={"max_length", "min_length", "do_sample", "num_beams", "early_stopping"}
        )


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: str
    summary: str
    transcript_text: Optional[str] = None
    caption_count: int = 0
    chunk_count: int = 0
    summary_passes: int = 0
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
