"""
Tests for the blog generator module.
"""

import json
import pytest
from unittest.mock import patch, MagicMock

from portfolio.core.generator import BlogGenerator, backoff_delay, response_text
from portfolio.models.schemas import BlogDraft, GenerationConfig
from portfolio.utils.error_handling import ConfigurationError, GenerationError, ModelOverloadedError


WRITER_JSON = json.dumps({
    "title": "Understanding Python Decorators",
    "slug": "Understanding Python Decorators!",
    "excerpt": "Decorators wrap functions. Here is how they work.",
    "content": "> **Image Prompt:** A cover\n\n## Intro\n\nDecorators are functions.",
})


class ApiStatusError(Exception):
    """Stand-in for an SDK error carrying an HTTP status."""

    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(f"status {status_code}")


def ai_message(content):
    message = MagicMock()
    message.content = content
    return message


@pytest.fixture
def mock_langchain_model():
    """Fixture to mock the langchain chat model."""
    with patch("portfolio.core.generator.init_chat_model") as mock_init_model:
        mock_model = MagicMock()
        mock_init_model.return_value = mock_model
        yield mock_model


@pytest.fixture
def no_sleep():
    """Skip the retry backoff delays."""
    with patch("portfolio.core.generator.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def generator(mock_langchain_model):
    return BlogGenerator(api_key="test_api_key")


def test_init_generator(mock_langchain_model):
    with patch("portfolio.core.generator.init_chat_model") as mock_init_model:
        BlogGenerator(api_key="test_api_key", generation_config=GenerationConfig(model="some-model"))

    kwargs = mock_init_model.call_args.kwargs
    assert kwargs["model"] == "some-model"
    assert kwargs["model_provider"] == "groq"
    assert kwargs["api_key"] == "test_api_key"


def test_init_without_api_key(monkeypatch):
    from portfolio.config import config
    monkeypatch.setattr(config, "GROQ_API_KEY", None)

    with pytest.raises(ConfigurationError):
        BlogGenerator()


def test_generate_full_draft(generator, mock_langchain_model):
    mock_langchain_model.invoke.side_effect = [
        ai_message("1. Core Topic: decorators"),
        ai_message(f"Here you go:\n```json\n{WRITER_JSON}\n```"),
    ]

    draft = generator.generate("a transcript about decorators", "abc123")

    assert isinstance(draft, BlogDraft)
    assert draft.title == "Understanding Python Decorators"
    assert draft.slug == "understanding-python-decorators"
    assert draft.excerpt
    assert draft.content.startswith("> **Image Prompt:**")
    assert draft.cover_image == ""

    # The writer prompt carries the extractor output and the video link
    writer_messages = mock_langchain_model.invoke.call_args_list[1].args[0]
    assert "1. Core Topic: decorators" in writer_messages[0].content
    assert "https://www.youtube.com/watch?v=abc123" in writer_messages[0].content


def test_transcript_is_truncated(mock_langchain_model):
    generator = BlogGenerator(
        api_key="test_api_key",
        generation_config=GenerationConfig(transcript_char_limit=10),
    )
    mock_langchain_model.invoke.return_value = ai_message("key points")

    generator.extract_key_points("x" * 50)

    prompt = mock_langchain_model.invoke.call_args.args[0][0].content
    assert "x" * 10 + "..." in prompt
    assert "x" * 11 not in prompt


def test_empty_extraction_raises(generator, mock_langchain_model):
    mock_langchain_model.invoke.return_value = ai_message("   ")

    with pytest.raises(GenerationError):
        generator.generate("transcript", "abc123")


def test_writer_without_json_raises(generator, mock_langchain_model):
    mock_langchain_model.invoke.side_effect = [ai_message("points"), ai_message("Sorry, I cannot help.")]

    with pytest.raises(GenerationError, match="Failed to parse JSON"):
        generator.generate("transcript", "abc123")


@pytest.mark.parametrize("output", [
    '{"title": "T", "slug": "t", "excerpt": "E"}',
    '{"title": "", "slug": "t", "excerpt": "E", "content": "C"}',
    '{"title": "T", "slug": "t", "excerpt": "E", "content": "C"',
    '{"title": "T", "slug": "!!!", "excerpt": "E", "content": "C"} trailing }',
])
def test_parse_draft_rejects_incomplete(output):
    with pytest.raises(GenerationError):
        BlogGenerator.parse_draft(output)


def test_parse_draft_slug_from_title():
    draft = BlogGenerator.parse_draft('{"title": "Hello World", "slug": "!!!", "excerpt": "E", "content": "C"}')
    assert draft.slug == "hello-world"


def test_retries_on_rate_limit(generator, mock_langchain_model, no_sleep):
    mock_langchain_model.invoke.side_effect = [ApiStatusError(429), ApiStatusError(503), ai_message("points")]

    assert generator.extract_key_points("transcript") == "points"
    assert mock_langchain_model.invoke.call_count == 3
    assert no_sleep.call_count == 2


def test_gives_up_after_three_tries(generator, mock_langchain_model, no_sleep):
    mock_langchain_model.invoke.side_effect = ApiStatusError(429)

    with pytest.raises(ModelOverloadedError) as exc_info:
        generator.extract_key_points("transcript")

    assert exc_info.value.status_code == 429
    assert mock_langchain_model.invoke.call_count == 3


def test_no_retry_on_other_errors(generator, mock_langchain_model, no_sleep):
    mock_langchain_model.invoke.side_effect = ApiStatusError(401)

    with pytest.raises(ApiStatusError):
        generator.extract_key_points("transcript")

    assert mock_langchain_model.invoke.call_count == 1
    no_sleep.assert_not_called()


def test_response_text_handles_content_parts():
    assert response_text(ai_message("plain")) == "plain"
    assert response_text(ai_message([{"type": "text", "text": "a"}, "b", {"type": "image"}])) == "ab"


def test_retry_delays_get_fresh_jitter(generator, mock_langchain_model, no_sleep):
    mock_langchain_model.invoke.side_effect = [ApiStatusError(429), ApiStatusError(503), ai_message("points")]

    with patch("portfolio.core.generator.random.random", side_effect=[0.25, 0.75]):
        generator.extract_key_points("transcript")

    delays = [c.args[0] for c in no_sleep.call_args_list]
    assert delays == [1.25, 2.75]


def test_retry_delays_stay_in_window(generator, mock_langchain_model, no_sleep):
    mock_langchain_model.invoke.side_effect = ApiStatusError(503)

    with pytest.raises(ModelOverloadedError):
        generator.extract_key_points("transcript")

    delays = [c.args[0] for c in no_sleep.call_args_list]
    assert len(delays) == 2
    for i, delay in enumerate(delays):
        assert 2 ** i <= delay < 2 ** i + 1


def test_backoff_delay_first_retry_has_jitter():
    with patch("portfolio.core.generator.random.random", return_value=0.5):
        assert backoff_delay(0) == 1.5
        assert backoff_delay(1) == 2.5
