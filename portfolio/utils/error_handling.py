"""
Centralized error handling for the application.
"""

import json
from typing import Optional, Dict, Any

from portfolio.config import config
from portfolio.utils.logger import logging


class PortfolioError(Exception):
    """Base class for application errors."""


class ConfigurationError(PortfolioError):
    """A required setting (secret, credential, API key) is missing."""


class DuplicateSlugError(PortfolioError):
    """Another blog post already uses the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__("A blog with this slug already exists")


class InvalidVideoURLError(PortfolioError):
    """The URL does not contain a YouTube video ID."""


class TranscriptUnavailableError(PortfolioError):
    """No caption transcript could be obtained for a video."""


class GenerationError(PortfolioError):
    """The language model did not produce a usable blog draft."""


class ModelOverloadedError(GenerationError):
    """The model API answered with a rate-limit or overload status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"Model API overloaded ({status_code}): {message}")


class ImageUploadError(PortfolioError):
    """The image host rejected the upload or did not answer in time."""


def status_code_of(error: Exception) -> Optional[int]:
    """
    Get the HTTP status code carried by an upstream client error.

    SDKs disagree on where they keep it, so this checks the usual attributes
    and finally the attached response object.

    Args:
        error: Exception raised by an API client

    Returns:
        Status code or None if the error has none
    """
    for attr in ("status_code", "status", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int):
            return value

    response = getattr(error, "response", None)
    value = getattr(response, "status_code", None)
    if isinstance(value, int):
        return value
    return None


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
