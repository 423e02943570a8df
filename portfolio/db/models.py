"""
SQLAlchemy models for the portfolio blog database.
"""

import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean

from portfolio.db.database import Base


class Blog(Base):
    """Model representing a blog post."""
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    cover_image = Column(String(500), nullable=True)
    published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    def __repr__(self):
        return f"<Blog(id={self.id}, slug='{self.slug}')>"
