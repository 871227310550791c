"""Unit tests for configuration and collection preconditions."""

from __future__ import annotations

import typing as typ

import pytest

from blog_pages.config import PaginationConfig
from blog_pages.errors import (
    ConfigError,
    MissingPaginationSectionError,
    MissingTemplateError,
)
from blog_pages.validation import validate_collection, validate_config


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"pages_per_page": 0}, "pagesPerPage must be greater than 0"),
        ({"pages_per_page": -1}, "pagesPerPage must be greater than 0"),
        ({"pages_per_page": "3"}, "pagesPerPage must be an integer"),
        ({"pages_per_page": True}, "pagesPerPage must be an integer"),
        ({"item_directory": 5}, "blogDirectory must be a string"),
        ({"template_key": 123}, "mainTemplate must be a string"),
    ],
)
def test_invalid_options_raise_config_error(
    overrides: dict[str, typ.Any], message: str
) -> None:
    """Each invalid option should fail with a specific message."""
    config = PaginationConfig().merged(**overrides)
    with pytest.raises(ConfigError) as excinfo:
        validate_config(config)
    assert str(excinfo.value) == message, (
        f"expected message {message!r}, got {str(excinfo.value)!r}"
    )


def test_default_options_are_valid() -> None:
    """The defaults pass validation."""
    validate_config(PaginationConfig())


def test_missing_template_is_reported(blog_files: dict[str, typ.Any]) -> None:
    """A collection without the template key should be rejected."""
    del blog_files["blog.md"]
    with pytest.raises(MissingTemplateError, match="blog.md template file is required"):
        validate_collection(blog_files, "blog.md")


def test_missing_paging_section_is_reported(blog_files: dict[str, typ.Any]) -> None:
    """A template whose sections are not marked should be rejected."""
    blog_files["blog.md"]["sections"] = [{"hasPagingParams": False}]
    with pytest.raises(
        MissingPaginationSectionError,
        match="blog.md must contain a section with hasPagingParams: true",
    ):
        validate_collection(blog_files, "blog.md")


def test_validation_does_not_mutate(blog_files: dict[str, typ.Any]) -> None:
    """Validation is a pure check."""
    before = repr(blog_files)
    validate_collection(blog_files, "blog.md")
    assert repr(blog_files) == before, "expected validation to leave files unchanged"
