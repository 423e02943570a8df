"""
Portfolio & Blog Application.

This application serves a personal portfolio page and a single-author blog,
and can draft blog posts from YouTube video transcripts using LLM models.
"""

from portfolio.config import config

__version__ = config.APP_VERSION
