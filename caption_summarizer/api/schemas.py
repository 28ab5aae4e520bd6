from pydantic import BaseModel, Field
from typing import Optional


class VideoRequest(BaseModel):
    """Model for requesting video summarization."""
    video_url: Optional[str] = Field(default=None, alias="videoUrl")

    model_config = {"populate_by_name": True}


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    summary: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
    details: Optional[str] = None
