"""
Core functionality for the portfolio and blog application.

This package contains the admin session store, the YouTube transcript
extractor, the LLM blog generator and the image host client.
"""
