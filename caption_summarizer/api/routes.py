"""
API routes for the YouTube Video Summarizer application.
"""

import traceback
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from caption_summarizer.api.schemas import VideoRequest, SummaryResponse, ErrorResponse
from caption_summarizer.main import summarize_youtube_video
from caption_summarizer.utils.error_handling import (
    InvalidYouTubeURLError,
    NoCaptionsError,
    build_error_response,
)
from caption_summarizer.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


@router.post(
    "/summarize",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def summarize_video(request: Optional[VideoRequest] = None):
    """
    Summarize a YouTube video by URL.

    - Fetches the video's English captions
    - Summarizes them chunk by chunk and combines the chunk summaries
    """
    if request is None or not request.video_url:
        return JSONResponse(status_code=400, content=build_error_response("Video URL is required"))

    try:
        summary = summarize_youtube_video(request.video_url)
    except (InvalidYouTubeURLError, NoCaptionsError) as e:
        logging.info(f"Rejected summary request for {request.video_url}: {e.error}")
        return JSONResponse(
            status_code=e.status_code,
            content=build_error_response(e.error, e.details),
        )
    except Exception as e:
        logging.error(f"Error summarizing video: {str(e)}")
        logging.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content=build_error_response("Failed to summarize video", str(e)),
        )

    return SummaryResponse(summary=summary.summary)
