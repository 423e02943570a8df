"""
Data models for the portfolio and blog application.
"""
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator
from portfolio.config import config


class TranscriptItem(BaseModel):
    """One caption line as returned by the captions API."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class VideoTranscript(BaseModel):
    """Caption transcript for a single YouTube video."""
    video_id: str
    title: str
    transcript_text: str
    duration: float = 0.0


class GenerationConfig(BaseModel):
    """Configuration for blog generation operations."""
    model: str = config.DEFAULT_GENERATION_MODEL
    model_provider: str = config.MODEL_PROVIDER
    temperature: float = config.GENERATION_TEMPERATURE
    max_tokens: int = config.GENERATION_MAX_TOKENS
    transcript_char_limit: int = config.TRANSCRIPT_CHAR_LIMIT


class BlogDraft(BaseModel):
    """Blog post draft produced by the writer agent."""
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image: str = ""

    @field_validator('title', 'slug', 'excerpt', 'content')
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v.strip()


class UploadResult(BaseModel):
    """Hosted image returned by the image host."""
    url: str
    public_id: str
    width: Optional[int] = None
    height: Optional[int] = None


class PlaylistVideos(BaseModel):
    """Video IDs found in a playlist."""
    playlist_id: Optional[str] = None
    video_ids: List[str] = Field(default_factory=list)
