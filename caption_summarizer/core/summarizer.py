"""
Module for summarizing transcripts with the Hugging Face Inference API.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional

import requests

from caption_summarizer.config import config
from caption_summarizer.core.captions import assemble_transcript
from caption_summarizer.core.chunker import split_text_into_chunks
from caption_summarizer.models.schemas import CaptionFragment, SummaryConfig, VideoSummary
from caption_summarizer.utils.error_handling import (
    InvalidUpstreamResponseError,
    SummarizerConfigurationError,
    UpstreamServiceError,
)
from caption_summarizer.utils.helpers import truncate_text
from caption_summarizer.utils.logger import logging


class HuggingFaceSummarizer:
    """Client for a summarization model served by the Hugging Face Inference API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_url: str = config.HUGGINGFACE_MODEL_URL,
        summary_config: Optional[SummaryConfig] = None,
        timeout: Optional[float] = config.SUMMARY_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Hugging Face API key (if None, read from the environment
                on every call)
            model_url: Inference endpoint of the summarization model
            summary_config: Generation parameters
            timeout: Request timeout in seconds (None keeps the transport default)
            session: HTTP session to send requests with
        """
        self.api_key = api_key
        self.model_url = model_url
        self.summary_config = summary_config or SummaryConfig()
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_api_key(self) -> str:
        api_key = self.api_key or config.get_api_key()
        if not api_key:
            raise SummarizerConfigurationError(
                details="Hugging Face API key is not configured. "
                "Please add HUGGINGFACE_API_KEY to your .env file"
            )
        return api_key

    @staticmethod
    def _read_body(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def summarize(self, text: str) -> str:
        """
        Summarize one chunk of text.

        Args:
            text: Chunk to summarize

        Returns:
            The model's summary of the chunk
        """
        api_key = self._get_api_key()
        payload = {
            "inputs": text,
            "parameters": self.summary_config.generation_parameters(),
        }

        logging.debug(f"Requesting summary of {len(text)} characters from {self.model_url}")
        try:
            response = self.session.post(
                self.model_url,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamServiceError(None, str(e)) from e

        if not response.ok:
            raise UpstreamServiceError(
                response.status_code,
                response.reason or f"HTTP {response.status_code}",
                self._read_body(response),
            )

        try:
            result = response.json()
        except ValueError as e:
            raise InvalidUpstreamResponseError(details="Response body is not valid JSON") from e

        if (
            not isinstance(result, list)
            or not result
            or not isinstance(result[0], dict)
            or not isinstance(result[0].get("summary_text"), str)
            or not result[0]["summary_text"]
        ):
            raise InvalidUpstreamResponseError(details=f"Unexpected response: {str(result)[:200]}")

        return result[0]["summary_text"]


class TranscriptSummarizer:
    """Class to summarize transcripts of any length chunk by chunk."""

    def __init__(
        self,
        client: Optional[HuggingFaceSummarizer] = None,
        summary_config: Optional[SummaryConfig] = None,
    ):
        """
        Initialize the summarizer.

        Args:
            client: Client used to summarize single chunks
            summary_config: Chunking and generation configuration
        """
        self.summary_config = summary_config or SummaryConfig()
        self.client = client or HuggingFaceSummarizer(summary_config=self.summary_config)
        self.chunk_count = 0
        self.passes_used = 0

    def summarize_chunks(self, chunks: List[str]) -> List[str]:
        """Summarize chunks, returning one summary per chunk in chunk order."""
        workers = min(self.summary_config.max_workers, len(chunks))
        if workers <= 1:
            return [self.client.summarize(chunk) for chunk in chunks]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self.client.summarize, chunks))

    def _summarize_pass(self, text: str, pass_number: int) -> str:
        chunks = split_text_into_chunks(text, self.summary_config.chunk_max_length)
        if not chunks:
            raise ValueError("Transcript contains no text to summarize")

        if pass_number == 1:
            self.chunk_count = len(chunks)
        self.passes_used = pass_number

        logging.info(f"Summary pass {pass_number}: {len(chunks)} chunk(s) from {len(text)} characters")
        summaries = self.summarize_chunks(chunks)
        return self.combine_summaries(summaries, pass_number)

    def combine_summaries(self, summaries: List[str], pass_number: int = 1) -> str:
        """
        Combine per-chunk summaries into one summary.

        A single summary is returned unchanged. Several summaries are joined
        with spaces; when the result is still longer than the chunk bound it is
        summarized again, for at most ``max_passes`` passes in total. Once the
        pass budget is spent the joined text is truncated to the bound.

        Args:
            summaries: Per-chunk summaries in chunk order
            pass_number: Number of the pass that produced ``summaries``

        Returns:
            Combined summary
        """
        if len(summaries) == 1:
            return summaries[0]

        max_length = self.summary_config.chunk_max_length
        combined = " ".join(summaries)
        if len(combined) <= max_length:
            return combined

        if pass_number >= self.summary_config.max_passes:
            logging.warning(
                f"Combined summary still {len(combined)} characters after {pass_number} "
                f"pass(es); truncating to {max_length}"
            )
            return truncate_text(combined, max_length)

        return self._summarize_pass(combined, pass_number + 1)

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize

        Returns:
            Summarized text
        """
        self.chunk_count = 0
        self.passes_used = 0
        return self._summarize_pass(transcript_text, 1)

    def create_summary(self, video_id: str, fragments: List[CaptionFragment]) -> VideoSummary:
        """
        Create a full video summary.

        Args:
            video_id: YouTube video ID
            fragments: Caption fragments of the video

        Returns:
            VideoSummary object
        """
        transcript_text = assemble_transcript(fragments)
        summary = self.summarize(transcript_text)

        return VideoSummary(
            video_id=video_id,
            summary=summary,
            transcript_text=transcript_text,
            caption_count=len(fragments),
            chunk_count=self.chunk_count,
            summary_passes=self.passes_used,
        )
