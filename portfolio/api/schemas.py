import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional


def strip_required(v: Optional[str]) -> Optional[str]:
    """Strip a required text field and reject whitespace-only values. None means the field was not sent."""
    if v is None:
        return v
    if not v.strip():
        raise ValueError('must not be empty')
    return v.strip()


class LoginRequest(BaseModel):
    """Model for admin login requests."""
    password: str


class LoginResponse(BaseModel):
    """Model for admin login responses."""
    token: str


class VerifyResponse(BaseModel):
    valid: bool = True


class MessageResponse(BaseModel):
    message: str


class BlogCreate(BaseModel):
    """Model for creating a blog post."""
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    excerpt: Optional[str] = None
    content: str = Field(..., min_length=1)
    cover_image: Optional[str] = Field(None, max_length=500)
    published: Optional[bool] = False

    @field_validator('title', 'slug', 'content')
    def not_blank(cls, v):
        return strip_required(v)


class BlogUpdate(BaseModel):
    """Model for partially updating a blog post. Omitted or null fields are kept."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    excerpt: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    cover_image: Optional[str] = Field(None, max_length=500)
    published: Optional[bool] = None

    @field_validator('title', 'slug', 'content')
    def not_blank(cls, v):
        return strip_required(v)


class BlogResponse(BaseModel):
    """Model for blog post responses."""
    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: str
    cover_image: Optional[str] = None
    published: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class GenerateRequest(BaseModel):
    """Model for requesting a blog draft from a YouTube video."""
    url: str
    model: Optional[str] = None
