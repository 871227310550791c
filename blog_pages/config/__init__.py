"""Configuration for blog listing pagination.

This subpackage defines the immutable :class:`PaginationConfig` value, the
defaults the pipeline falls back to, and :func:`load_pagination_config`, which
reads the ``pagination`` block of a site YAML file and merges it over those
defaults.

Examples
--------
>>> from blog_pages.config import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.pages_per_page
6
>>> DEFAULT_CONFIG.merged(pagesPerPage=3).pages_per_page
3
"""

from .loader import load_pagination_config
from .models import DEFAULT_CONFIG, OPTION_ALIASES, PaginationConfig

__all__ = [
    "DEFAULT_CONFIG",
    "OPTION_ALIASES",
    "PaginationConfig",
    "load_pagination_config",
]
