"""Exception hierarchy raised by the blog pagination pipeline.

Every error derives from :class:`BlogPagesError` so host pipelines can catch
the whole family at the plugin boundary, while the mixin bases (``ValueError``,
``LookupError``, ``RuntimeError``) keep the errors meaningful to callers that
only know the builtin taxonomy.
"""

from __future__ import annotations


class BlogPagesError(Exception):
    """Base class for every failure reported by blog_pages."""


class ConfigError(BlogPagesError, ValueError):
    """Raised when a pagination option holds an invalid value."""


class MissingTemplateError(BlogPagesError, LookupError):
    """Raised when the collection has no document at the template key."""

    def __init__(self, template_key: str) -> None:
        super().__init__(f"{template_key} template file is required")
        self.template_key = template_key


class MissingPaginationSectionError(BlogPagesError, LookupError):
    """Raised when the template carries no section marked for pagination."""

    def __init__(self, template_key: str, marker: str) -> None:
        super().__init__(f"{template_key} must contain a section with {marker}: true")
        self.template_key = template_key
        self.marker = marker


class CloneError(BlogPagesError, ValueError):
    """Raised when a document cannot be copied by value (e.g. it has a cycle)."""


class PageGenerationError(BlogPagesError, RuntimeError):
    """Raised when building a specific listing page fails.

    Attributes
    ----------
    page : int
        One-based number of the page that could not be generated.
    """

    def __init__(self, page: int, cause: BaseException) -> None:
        super().__init__(f"Failed to create page {page}: {cause}")
        self.page = page


class CollectionError(BlogPagesError, ValueError):
    """Raised when a source file cannot be read into a collection document."""


__all__ = [
    "BlogPagesError",
    "CloneError",
    "CollectionError",
    "ConfigError",
    "MissingPaginationSectionError",
    "MissingTemplateError",
    "PageGenerationError",
]
