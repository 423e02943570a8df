"""
CRUD operations for the portfolio blog database.
"""

from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
import datetime

from portfolio.db.models import Blog
from portfolio.utils.error_handling import DuplicateSlugError
from portfolio.utils.logger import logging

UPDATABLE_FIELDS = ("title", "slug", "excerpt", "content", "cover_image", "published")


def ensure_blogs_table(db: Session) -> None:
    """Create the blogs table on first use if it does not exist yet."""
    Blog.__table__.create(bind=db.get_bind(), checkfirst=True)


def list_blogs(db: Session, published_only: bool = True) -> List[Blog]:
    """List blog posts, newest first."""
    ensure_blogs_table(db)

    query = db.query(Blog)
    if published_only:
        query = query.filter(Blog.published.is_(True))
    return query.order_by(Blog.created_at.desc(), Blog.id.desc()).all()


def get_blog_by_id(db: Session, blog_id: int) -> Optional[Blog]:
    """Get a blog post by ID."""
    return db.query(Blog).filter(Blog.id == blog_id).first()


def get_blog_by_slug(db: Session, slug: str) -> Optional[Blog]:
    """Get a blog post by slug."""
    return db.query(Blog).filter(Blog.slug == slug).first()


def get_blog(db: Session, identifier: str) -> Optional[Blog]:
    """
    Get a blog post by ID or slug.

    An all-ASCII-digit identifier is treated as the numeric ID, anything else as the slug.
    """
    if identifier.isascii() and identifier.isdigit():
        return get_blog_by_id(db, int(identifier))
    return get_blog_by_slug(db, identifier)


def slug_exists(db: Session, slug: str, exclude_id: Optional[int] = None) -> bool:
    """Check if a slug is used by a blog post other than exclude_id."""
    query = db.query(Blog.id).filter(Blog.slug == slug)
    if exclude_id is not None:
        query = query.filter(Blog.id != exclude_id)
    return query.first() is not None


def create_blog(db: Session, data: Dict[str, Any]) -> Blog:
    """
    Create a new blog post.

    Raises:
        DuplicateSlugError: If another post already uses the slug
    """
    ensure_blogs_table(db)

    if slug_exists(db, data["slug"]):
        raise DuplicateSlugError(data["slug"])

    blog = Blog(
        title=data["title"],
        slug=data["slug"],
        excerpt=data.get("excerpt") or None,
        content=data["content"],
        cover_image=data.get("cover_image") or None,
        published=bool(data.get("published") or False),
    )
    db.add(blog)
    db.commit()
    db.refresh(blog)
    logging.info(f"Created blog {blog.id} with slug '{blog.slug}'")
    return blog


def update_blog(db: Session, blog_id: int, data: Dict[str, Any]) -> Optional[Blog]:
    """
    Partially update a blog post.

    Fields that are missing from data or set to None keep their current value.

    Returns:
        The updated post, or None if no post has this ID

    Raises:
        DuplicateSlugError: If the new slug belongs to a different post
    """
    blog = get_blog_by_id(db, blog_id)
    if not blog:
        return None

    changes = {
        field: value
        for field, value in data.items()
        if field in UPDATABLE_FIELDS and value is not None
    }

    if "slug" in changes and slug_exists(db, changes["slug"], exclude_id=blog_id):
        raise DuplicateSlugError(changes["slug"])

    for field, value in changes.items():
        setattr(blog, field, value)
    blog.updated_at = datetime.datetime.utcnow()

    db.commit()
    db.refresh(blog)
    logging.info(f"Updated blog {blog.id}: {sorted(changes)}")
    return blog


def delete_blog(db: Session, blog_id: int) -> bool:
    """Delete a blog post. Returns False if no post has this ID."""
    blog = get_blog_by_id(db, blog_id)
    if not blog:
        return False

    db.delete(blog)
    db.commit()
    logging.info(f"Deleted blog {blog_id}")
    return True
