"""Paginate blog listing pages for a static content build.

This package takes a collection of documents (keyed by path), finds the
listing template, and generates ``blog/2.md``, ``blog/3.md`` ... as patched
clones of it so each page knows its item offset and page number. It also
ships the ``blog-pages`` CLI that runs the pass over a source directory.

Exports
-------
- ``paginate``: Run one pass and report failures in the returned result.
- ``blog_pages_plugin``: Build a pipeline plugin from option overrides.
- ``BlogPaginator``: Raising variant for in-process callers.
- ``PaginationConfig``: Immutable options value.

Examples
--------
>>> from blog_pages import PaginationConfig, paginate
>>> files = {"blog.md": {"sections": [{"hasPagingParams": True}]}}
>>> paginate(files, PaginationConfig(pages_per_page=3)).ok
True
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, PaginationConfig, load_pagination_config
from .errors import (
    BlogPagesError,
    CloneError,
    CollectionError,
    ConfigError,
    MissingPaginationSectionError,
    MissingTemplateError,
    PageGenerationError,
)
from .paginator import (
    BlogPaginator,
    PaginationResult,
    PaginationState,
    blog_pages_plugin,
    paginate,
)

__all__ = [
    "DEFAULT_CONFIG",
    "BlogPagesError",
    "BlogPaginator",
    "CloneError",
    "CollectionError",
    "ConfigError",
    "MissingPaginationSectionError",
    "MissingTemplateError",
    "PageGenerationError",
    "PaginationConfig",
    "PaginationResult",
    "PaginationState",
    "blog_pages_plugin",
    "load_pagination_config",
    "paginate",
]
