"""Locate paging sections and overwrite pagination fields in place.

The patcher works on any tree of mappings and sequences. It does not know
about the paging marker: given a subtree and a mapping of field names to
values, it overwrites every matching key at every depth. Callers decide which
subtree to hand over (normally the first section found by
:func:`find_paging_section`).

Examples
--------
>>> doc = {"sections": [{"hasPagingParams": True, "pageNumber": 0,
...                      "summary": {"pageNumber": 0}}]}
>>> section = find_paging_section(doc)
>>> patch_fields(section, {"pageNumber": 2})
>>> section["pageNumber"], section["summary"]["pageNumber"]
(2, 2)
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from blog_pages._constants import (
    CURRENT_FIELD,
    DESCRIPTOR_FIELD,
    PAGE_SIZE_FIELD,
    PAGES_FIELD,
    PAGING_MARKER,
    START_FIELD,
    TOTAL_FIELD,
)

from ._nodes import child_nodes, is_container, is_mapping
from .clone import clone_document

if typ.TYPE_CHECKING:
    from blog_pages.window import PageWindow


def patch_fields(subtree: typ.Any, field_values: cabc.Mapping[str, typ.Any]) -> None:
    """Overwrite every occurrence of the named fields below ``subtree``.

    Parameters
    ----------
    subtree : Any
        Root of the walk. Anything other than a mapping or sequence is
        ignored.
    field_values : Mapping[str, Any]
        Field name to replacement value. Container values are copied for each
        occurrence so patched locations never alias one another.

    Notes
    -----
    The walk uses an explicit stack and visits each container once, so deep
    or self-referencing trees are handled without recursion errors. Values
    written during the walk are descended into as well.
    """
    if not is_container(subtree):
        return

    visited: dict[int, typ.Any] = {}
    stack: list[typ.Any] = [subtree]
    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited[id(node)] = node
        if isinstance(node, cabc.MutableMapping):
            for name, value in field_values.items():
                if name in node:
                    node[name] = clone_document(value)
        stack.extend(reversed(child_nodes(node)))


def iter_paging_sections(
    document: typ.Any, marker: str = PAGING_MARKER
) -> cabc.Iterator[cabc.Mapping[str, typ.Any]]:
    """Yield mappings whose ``marker`` is ``True``, in natural nested order.

    Order is depth-first pre-order: a mapping is reported before anything it
    contains, mapping values follow insertion order, and sequence elements
    follow index order.
    """
    visited: set[int] = set()
    stack: list[typ.Any] = [document]
    while stack:
        node = stack.pop()
        if not is_container(node) or id(node) in visited:
            continue
        visited.add(id(node))
        if is_mapping(node) and node.get(marker) is True:
            yield node
        stack.extend(reversed(child_nodes(node)))


def find_paging_section(
    document: typ.Any, marker: str = PAGING_MARKER
) -> cabc.Mapping[str, typ.Any] | None:
    """Return the first section marked for pagination, or ``None``."""
    return next(iter_paging_sections(document, marker), None)


def pagination_field_values(
    window: PageWindow, *, include_descriptor: bool = False
) -> dict[str, typ.Any]:
    """Map document field names to the values describing ``window``."""
    values: dict[str, typ.Any] = {
        TOTAL_FIELD: window.total,
        PAGES_FIELD: window.pages,
        PAGE_SIZE_FIELD: window.page_size,
        START_FIELD: window.start,
        CURRENT_FIELD: window.current,
    }
    if include_descriptor:
        values[DESCRIPTOR_FIELD] = window.descriptor.as_mapping()
    return values


__all__ = [
    "find_paging_section",
    "iter_paging_sections",
    "pagination_field_values",
    "patch_fields",
]
