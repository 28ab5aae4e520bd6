"""
Main entry point for the YouTube Video Summarizer application.
"""

import argparse
from pathlib import Path
from typing import Optional

from caption_summarizer.config import config
from caption_summarizer.core.captions import CaptionFetcher
from caption_summarizer.core.summarizer import TranscriptSummarizer
from caption_summarizer.core.url_parser import require_video_id
from caption_summarizer.models.schemas import SummaryConfig, VideoSummary
from caption_summarizer.utils.error_handling import SummarizerAppError, log_diagnostic_info
from caption_summarizer.utils.helpers import save_json
from caption_summarizer.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: str) -> Path:
    """Save the summary to a JSON file."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    save_json(summary.model_dump(), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(
    url: str,
    summary_config: Optional[SummaryConfig] = None,
    output_file: Optional[str] = None,
) -> VideoSummary:
    """
    Process a YouTube video: fetch its English captions and summarize them.

    Args:
        url: YouTube video URL
        summary_config: Chunking and generation configuration
        output_file: Optional file path to save the summary

    Returns:
        VideoSummary object
    """
    summary_config = summary_config or SummaryConfig()

    # 1. Validate the URL
    video_id = require_video_id(url)
    log_diagnostic_info({"video_id": video_id, "settings": config.get_settings()})

    # 2. Fetch captions
    fetcher = CaptionFetcher(language=config.CAPTION_LANGUAGE)
    fragments = fetcher.fetch(video_id)

    # 3. Summarize transcript
    summarizer = TranscriptSummarizer(summary_config=summary_config)
    summary = summarizer.create_summary(video_id, fragments)
    logging.info(
        f"Summarized video {video_id}: {summary.caption_count} captions, "
        f"{summary.chunk_count} chunks, {summary.summary_passes} pass(es)"
    )

    # 4. Save summary
    if output_file:
        save_summary(summary, output_file)

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--max-length", type=int, default=config.CHUNK_MAX_LENGTH,
                        help="Maximum chunk length in characters")
    parser.add_argument("--workers", type=int, default=config.SUMMARY_MAX_WORKERS,
                        help="Number of chunks summarized concurrently")
    parser.add_argument("--output", help="Output file path for the summary")

    args = parser.parse_args()

    summary_config = SummaryConfig(chunk_max_length=args.max_length, max_workers=args.workers)

    try:
        summary = summarize_youtube_video(args.url, summary_config, args.output)
    except SummarizerAppError as e:
        print(f"Error: {e.error}")
        if e.details:
            print(e.details)
        raise SystemExit(1)

    print("\n" + "=" * 80)
    print(f"Summary of video {summary.video_id}")
    print("=" * 80)
    print(summary.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
