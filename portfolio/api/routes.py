"""
API routes for the portfolio and blog application.
"""

import traceback
from typing import List, Dict, Any, Optional
from fastapi import APIRouter, HTTPException, Depends, File, UploadFile, Query, Path

from portfolio.api.dependencies import optional_admin, require_admin
from portfolio.api.schemas import (
    LoginRequest,
    LoginResponse,
    VerifyResponse,
    MessageResponse,
    BlogCreate,
    BlogUpdate,
    BlogResponse,
    GenerateRequest,
)
from portfolio.content import get_portfolio
from portfolio.core.auth import session_store
from portfolio.core.images import upload_image, delete_image
from portfolio.core.youtube import YouTubeTranscriptExtractor
from portfolio.db import crud
from portfolio.db.database import get_db, init_db, DBSession
from portfolio.models.schemas import BlogDraft, UploadResult, PlaylistVideos
from portfolio.utils.error_handling import (
    ConfigurationError,
    DuplicateSlugError,
    ImageUploadError,
    InvalidVideoURLError,
    log_diagnostic_info,
)
from portfolio.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["portfolio"])


# Auth

@router.post("/auth", response_model=LoginResponse)
async def login(request: LoginRequest):
    """Exchange the admin password for a session token."""
    try:
        valid = session_store.verify_password(request.password)
    except ConfigurationError as e:
        logging.error(str(e))
        raise HTTPException(status_code=500, detail="Server authentication is not configured")

    if not valid:
        logging.warning("Admin login failed: invalid password")
        raise HTTPException(status_code=401, detail="Invalid password")

    return LoginResponse(token=session_store.create_session())


@router.get("/auth/verify", response_model=VerifyResponse)
async def verify_session(token: str = Depends(require_admin)):
    """Check that the bearer token is still a valid session."""
    return VerifyResponse(valid=True)


@router.post("/auth/logout", response_model=MessageResponse)
async def logout(token: str = Depends(require_admin)):
    session_store.delete_session(token)
    return MessageResponse(message="Logged out")


# Blogs

@router.get("/blogs", response_model=List[BlogResponse])
async def list_blogs(
    show_all: bool = Query(False, alias="all", description="Include drafts (admin only)"),
    is_admin: bool = Depends(optional_admin),
    db: DBSession = Depends(get_db),
):
    """
    List blog posts, newest first.

    - Public callers only see published posts
    - Admins passing all=true also see drafts
    """
    try:
        return crud.list_blogs(db, published_only=not (show_all and is_admin))
    except Exception as e:
        logging.error(f"Error fetching blogs: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to fetch blogs")


@router.get("/blogs/{identifier}", response_model=BlogResponse)
async def get_blog(
    identifier: str = Path(..., description="Blog ID or slug"),
    db: DBSession = Depends(get_db),
):
    """Get a single blog post by ID or slug."""
    try:
        blog = crud.get_blog(db, identifier)
    except Exception as e:
        logging.error(f"Error fetching blog: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to fetch blog")

    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.post("/blogs", response_model=BlogResponse, status_code=201)
async def create_blog(
    request: BlogCreate,
    token: str = Depends(require_admin),
    db: DBSession = Depends(get_db),
):
    """Create a new blog post."""
    try:
        return crud.create_blog(db, request.model_dump())
    except DuplicateSlugError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        db.rollback()
        logging.error(f"Error creating blog: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to create blog")


@router.put("/blogs/{blog_id}", response_model=BlogResponse)
async def update_blog(
    request: BlogUpdate,
    blog_id: int = Path(..., description="Blog ID"),
    token: str = Depends(require_admin),
    db: DBSession = Depends(get_db),
):
    """Update a blog post. Fields left out of the request keep their value."""
    try:
        blog = crud.update_blog(db, blog_id, request.model_dump(exclude_unset=True))
    except DuplicateSlugError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        db.rollback()
        logging.error(f"Error updating blog: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to update blog")

    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.delete("/blogs/{blog_id}", response_model=MessageResponse)
async def delete_blog(
    blog_id: int = Path(..., description="Blog ID"),
    token: str = Depends(require_admin),
    db: DBSession = Depends(get_db),
):
    """Delete a blog post."""
    try:
        deleted = crud.delete_blog(db, blog_id)
    except Exception as e:
        db.rollback()
        logging.error(f"Error deleting blog: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to delete blog")

    if not deleted:
        raise HTTPException(status_code=404, detail="Blog not found")
    return MessageResponse(message="Blog deleted successfully")


# Images

@router.post("/upload", response_model=UploadResult, status_code=201)
async def upload(
    file: Optional[UploadFile] = File(None),
    token: str = Depends(require_admin),
):
    """Upload an image to the image host."""
    if file is None:
        logging.info("Upload failed: No file provided")
        raise HTTPException(status_code=400, detail="No file provided")

    content_type = file.content_type or ""
    logging.info(f"File received: {file.filename} {content_type}")
    if not content_type.startswith("image/"):
        logging.info(f"Upload failed: Invalid file type {content_type}")
        raise HTTPException(status_code=400, detail="File must be an image")

    data = await file.read()
    try:
        return await upload_image(data, content_type)
    except (ConfigurationError, ImageUploadError) as e:
        logging.error(f"Error uploading image: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to upload image")


@router.delete("/upload/{public_id:path}", response_model=MessageResponse)
def remove_upload(
    public_id: str,
    token: str = Depends(require_admin),
):
    """Delete a previously uploaded image."""
    try:
        delete_image(public_id)
    except Exception as e:
        logging.error(f"Error deleting image {public_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to delete image: {str(e)}")
    return MessageResponse(message="Image deleted successfully")


# AI generation

@router.post("/ai/generate", response_model=BlogDraft)
def generate_blog(
    request: GenerateRequest,
    token: str = Depends(require_admin),
):
    """
    Draft a blog post from a YouTube video.

    Runs synchronously in the threadpool; retries back off with blocking sleeps.
    """
    from portfolio.main import generate_blog_from_youtube

    if not request.url:
        raise HTTPException(status_code=400, detail="YouTube URL is required")

    try:
        return generate_blog_from_youtube(request.url, request.model)
    except InvalidVideoURLError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error(f"AI Generation Error: {str(e)}")
        logging.error(traceback.format_exc())
        log_diagnostic_info({"url": request.url, "model": request.model, "error": type(e).__name__})
        raise HTTPException(status_code=500, detail=str(e) or "Internal Server Error")


@router.get("/ai/playlist", response_model=PlaylistVideos)
def playlist_videos(
    url: str = Query(..., description="YouTube playlist URL"),
    token: str = Depends(require_admin),
):
    """List the video IDs of a playlist so each can be drafted."""
    extractor = YouTubeTranscriptExtractor()
    if not extractor.is_playlist(url):
        raise HTTPException(status_code=400, detail="URL is not a YouTube playlist")

    return PlaylistVideos(
        playlist_id=extractor.extract_playlist_id(url),
        video_ids=extractor.get_playlist_videos(url),
    )


# Admin

@router.post("/init", response_model=MessageResponse)
async def initialize_database(
    token: str = Depends(require_admin),
    db: DBSession = Depends(get_db),
):
    """Create the database schema."""
    try:
        init_db(db.get_bind())
    except Exception as e:
        logging.error(f"Error initializing database: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to initialize database")

    return MessageResponse(message="Database initialized successfully")


# Portfolio

@router.get("/portfolio")
async def portfolio() -> Dict[str, Any]:
    """Content for the portfolio page."""
    return get_portfolio()
