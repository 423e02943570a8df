"""
Tests for the blog persistence layer.
"""

import pytest
from sqlalchemy import inspect

from portfolio.db import crud
from portfolio.utils.error_handling import DuplicateSlugError


def make_blog(db, **overrides):
    data = {
        "title": "First Post",
        "slug": "first-post",
        "excerpt": "An excerpt",
        "content": "Hello **world**",
        "cover_image": None,
        "published": True,
    }
    data.update(overrides)
    return crud.create_blog(db, data)


def test_table_created_lazily(db, engine):
    assert not inspect(engine).has_table("blogs")

    assert crud.list_blogs(db) == []
    assert inspect(engine).has_table("blogs")


def test_create_and_get_by_id_or_slug(db):
    blog = make_blog(db)

    assert blog.id is not None
    assert blog.created_at is not None
    assert crud.get_blog(db, str(blog.id)).slug == "first-post"
    assert crud.get_blog(db, "first-post").id == blog.id
    assert crud.get_blog(db, "missing") is None


def test_create_normalizes_optional_fields(db):
    blog = make_blog(db, excerpt="", cover_image="", published=None)

    assert blog.excerpt is None
    assert blog.cover_image is None
    assert blog.published is False


def test_duplicate_slug_rejected(db):
    make_blog(db)

    with pytest.raises(DuplicateSlugError):
        make_blog(db, title="Another")


def test_list_published_only(db):
    make_blog(db, slug="published")
    make_blog(db, slug="draft", published=False)

    assert [b.slug for b in crud.list_blogs(db)] == ["published"]
    assert {b.slug for b in crud.list_blogs(db, published_only=False)} == {"published", "draft"}


def test_list_newest_first(db):
    make_blog(db, slug="older")
    make_blog(db, slug="newer")

    assert [b.slug for b in crud.list_blogs(db)] == ["newer", "older"]


def test_partial_update_keeps_other_fields(db):
    blog = make_blog(db)

    updated = crud.update_blog(db, blog.id, {"title": "Renamed", "content": None})

    assert updated.title == "Renamed"
    assert updated.slug == "first-post"
    assert updated.excerpt == "An excerpt"
    assert updated.content == "Hello **world**"
    assert updated.published is True


def test_update_slug_collision(db):
    make_blog(db, slug="taken")
    blog = make_blog(db, slug="mine")

    with pytest.raises(DuplicateSlugError):
        crud.update_blog(db, blog.id, {"slug": "taken"})

    # Keeping its own slug is not a collision
    assert crud.update_blog(db, blog.id, {"slug": "mine"}).slug == "mine"


def test_update_missing(db):
    make_blog(db)
    assert crud.update_blog(db, 999, {"title": "x"}) is None


def test_delete(db):
    blog = make_blog(db)

    assert crud.delete_blog(db, blog.id) is True
    assert crud.delete_blog(db, blog.id) is False
    assert crud.list_blogs(db, published_only=False) == []


def test_get_blog_only_treats_ascii_digits_as_id(db):
    make_blog(db, slug="١٢")

    assert crud.get_blog(db, "²") is None
    assert crud.get_blog(db, "١٢").slug == "١٢"


def test_update_can_clear_optional_fields(db):
    blog = make_blog(db, cover_image="https://res.cloudinary.com/demo/cover.png")

    updated = crud.update_blog(db, blog.id, {"excerpt": "", "cover_image": ""})

    assert updated.excerpt == ""
    assert updated.cover_image == ""
    assert updated.title == "First Post"
