"""
Module for turning video transcripts into blog post drafts using LLM models.

Two agents run in strict order: the extractor condenses the transcript into
key points, and the writer turns those key points into a JSON blog draft.
"""

import itertools
import json
import random
from time import sleep
from typing import Any, Optional

from langchain.chat_models import init_chat_model
from pydantic import ValidationError
from retry.api import retry_call

from portfolio.config import config
from portfolio.core.prompts import EXTRACTOR_PROMPT, WRITER_PROMPT
from portfolio.core.youtube import WATCH_URL
from portfolio.models.schemas import BlogDraft, GenerationConfig
from portfolio.utils.error_handling import (
    ConfigurationError,
    GenerationError,
    ModelOverloadedError,
    status_code_of,
)
from portfolio.utils.helpers import find_json_object, slugify, truncate_text
from portfolio.utils.logger import logging

# Rate limited / service unavailable
RETRYABLE_STATUS_CODES = (429, 503)


def backoff_delay(retry_number: int) -> float:
    """
    Seconds to wait before a retry: base * backoff**retry_number plus jitter.

    Jitter is drawn fresh for every retry from the configured [low, high) range.
    """
    low, high = config.GENERATION_RETRY_JITTER
    base = config.GENERATION_RETRY_DELAY * config.GENERATION_RETRY_BACKOFF ** retry_number
    return base + low + random.random() * (high - low)


def response_text(response: Any) -> str:
    """
    Get the text of a chat model response.

    Some providers return a list of content parts instead of a string; only
    the text parts are kept.
    """
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content

    text = ""
    for part in content or []:
        if isinstance(part, str):
            text += part
        elif isinstance(part, dict) and part.get("text"):
            text += part["text"]
    return text


class BlogGenerator:
    """Class to handle blog draft generation from transcripts."""

    def __init__(self, api_key: Optional[str] = None, generation_config: Optional[GenerationConfig] = None):
        """
        Initialize the generator with API key.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
            generation_config: Model settings (defaults from config)
        """
        self.api_key = api_key or config.GROQ_API_KEY
        if not self.api_key:
            raise ConfigurationError("Groq API key is required. Set it in .env file or pass directly.")

        self.generation_config = generation_config or GenerationConfig()
        self.llm = init_chat_model(
            model=self.generation_config.model,
            model_provider=self.generation_config.model_provider,
            temperature=self.generation_config.temperature,
            max_tokens=self.generation_config.max_tokens,
            api_key=self.api_key,
        )

    def _invoke(self, messages) -> str:
        """Call the model once, flagging rate-limit and overload errors as retryable."""
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            status = status_code_of(e)
            if status in RETRYABLE_STATUS_CODES:
                logging.warning(f"Model API overloaded ({status}).")
                raise ModelOverloadedError(status, str(e)) from e
            raise

        return response_text(response)

    def _invoke_with_retry(self, messages) -> str:
        """Call the model, retrying 429/503 with exponential backoff plus fresh jitter."""
        attempts = itertools.count()

        def attempt():
            n = next(attempts)
            if n:
                delay = backoff_delay(n - 1)
                logging.warning(f"Retrying model call in {delay:.2f} seconds (attempt {n + 1}/{config.GENERATION_RETRIES})")
                sleep(delay)
            return self._invoke(messages)

        # Delays are slept in attempt(), so retry_call only counts tries
        return retry_call(
            attempt,
            exceptions=ModelOverloadedError,
            tries=config.GENERATION_RETRIES,
            delay=0,
            logger=None,
        )

    def extract_key_points(self, transcript_text: str) -> str:
        """
        Extract structured key points from a transcript (extractor agent).

        Args:
            transcript_text: Full transcript text

        Returns:
            Key points as free-form markdown
        """
        transcript = truncate_text(transcript_text, self.generation_config.transcript_char_limit)
        messages = EXTRACTOR_PROMPT.format_messages(transcript=transcript)

        logging.info("Step 1: Extracting key information...")
        key_points = self._invoke_with_retry(messages)
        if not key_points.strip():
            raise GenerationError("Failed to extract information from transcript")
        return key_points

    def write_draft(self, key_points: str, video_id: str) -> BlogDraft:
        """
        Write a blog draft from extracted key points (writer agent).

        Args:
            key_points: Output of the extractor agent
            video_id: YouTube video ID, linked from the prompt

        Returns:
            BlogDraft with every field populated
        """
        messages = WRITER_PROMPT.format_messages(
            key_points=key_points,
            video_url=WATCH_URL.format(video_id=video_id),
        )

        logging.info("Step 2: Writing blog post...")
        output = self._invoke_with_retry(messages)
        if not output.strip():
            raise GenerationError("Failed to generate blog content")

        return self.parse_draft(output)

    @staticmethod
    def parse_draft(output: str) -> BlogDraft:
        """Parse the writer agent's JSON answer into a BlogDraft."""
        raw_json = find_json_object(output)
        if not raw_json:
            raise GenerationError("Failed to parse JSON response from Writer Agent")

        try:
            data = json.loads(raw_json)
        except ValueError as e:
            raise GenerationError(f"Writer Agent returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise GenerationError("Writer Agent returned invalid JSON: expected an object")

        try:
            draft = BlogDraft(
                title=data.get("title") or "",
                slug=data.get("slug") or "",
                excerpt=data.get("excerpt") or "",
                content=data.get("content") or "",
            )
        except ValidationError as e:
            raise GenerationError(f"Writer Agent response is missing required fields: {e}") from e

        draft.slug = slugify(draft.slug) or slugify(draft.title)
        if not draft.slug:
            raise GenerationError("Writer Agent returned a slug with no URL-safe characters")

        # Cover images are added by hand in the editor
        draft.cover_image = ""
        return draft

    def generate(self, transcript_text: str, video_id: str) -> BlogDraft:
        """
        Generate a complete blog draft from a transcript.

        Args:
            transcript_text: Full transcript text
            video_id: YouTube video ID

        Returns:
            BlogDraft

        Raises:
            GenerationError: If a model call or the final parse fails
        """
        key_points = self.extract_key_points(transcript_text)
        return self.write_draft(key_points, video_id)
