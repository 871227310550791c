"""Precondition checks run before the paginator mutates anything."""

from __future__ import annotations

import typing as typ

from ._constants import PAGING_MARKER
from .errors import ConfigError, MissingPaginationSectionError, MissingTemplateError
from .tree import find_paging_section

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import PaginationConfig


def validate_config(config: PaginationConfig) -> None:
    """Raise :class:`ConfigError` when an option value is unusable."""
    pages_per_page = config.pages_per_page
    if isinstance(pages_per_page, bool) or not isinstance(pages_per_page, int):
        msg = "pagesPerPage must be an integer"
        raise ConfigError(msg)
    if pages_per_page <= 0:
        msg = "pagesPerPage must be greater than 0"
        raise ConfigError(msg)
    if not isinstance(config.item_directory, str):
        msg = "blogDirectory must be a string"
        raise ConfigError(msg)
    if not isinstance(config.template_key, str):
        msg = "mainTemplate must be a string"
        raise ConfigError(msg)


def validate_collection(
    collection: cabc.Mapping[str, typ.Any], template_key: str
) -> None:
    """Check that the template exists and carries a paging section.

    Raises
    ------
    MissingTemplateError
        If ``collection`` has no (or an empty) document at ``template_key``.
    MissingPaginationSectionError
        If the template holds no mapping with ``hasPagingParams: true``.
    """
    template = collection.get(template_key)
    if not template:
        raise MissingTemplateError(template_key)
    if find_paging_section(template) is None:
        raise MissingPaginationSectionError(template_key, PAGING_MARKER)


__all__ = ["validate_collection", "validate_config"]
