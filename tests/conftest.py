"""Shared fixtures for blog_pages tests."""

from __future__ import annotations

import typing as typ

import pytest


def make_template() -> dict[str, typ.Any]:
    """Return a listing template with one zeroed paging section."""
    return {
        "title": "Blog",
        "sections": [
            {
                "hasPagingParams": True,
                "numberOfBlogs": 0,
                "numberOfPages": 0,
                "pageLength": 0,
                "pageStart": 0,
                "pageNumber": 0,
            }
        ],
    }


def make_collection(
    post_count: int, *, directory: str = "blog/", template_key: str = "blog.md"
) -> dict[str, typ.Any]:
    """Return a collection holding the template and ``post_count`` posts."""
    files: dict[str, typ.Any] = {template_key: make_template()}
    for index in range(1, post_count + 1):
        files[f"{directory}post{index}.md"] = {"title": f"Post {index}"}
    return files


@pytest.fixture
def blog_files() -> dict[str, typ.Any]:
    """Collection with the listing template and seven posts under ``blog/``."""
    return make_collection(7)


@pytest.fixture
def collection_factory() -> typ.Callable[..., dict[str, typ.Any]]:
    """Return a builder for collections with a chosen number of posts."""
    return make_collection
