"""
Helper utility functions for the portfolio and blog application.
"""

import json
import re
from typing import Dict, Any, Optional


def slugify(text: str, max_length: int = 255) -> str:
    """
    Turn a string into a URL-safe slug.

    Args:
        text: Title or candidate slug
        max_length: Maximum slug length (matches the slug column)

    Returns:
        Lowercase slug made of letters, digits and single hyphens
    """
    slug = text.strip().lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    return slug[:max_length].rstrip("-")


def find_json_object(text: str) -> Optional[str]:
    """
    Locate the JSON object embedded in a model response.

    Takes everything from the first "{" to the last "}", which skips code
    fences and chatter around the object.
    """
    match = re.search(r"\{[\s\S]*\}", text)
    return match.group(0) if match else None


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)


def load_json(filepath: str) -> Dict[str, Any]:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, then append the suffix.

    Args:
        text: Text to truncate
        max_length: Number of characters kept from the original text
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix
