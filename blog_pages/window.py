"""Page arithmetic for listing pagination.

The helpers here are pure: they derive the page count from an item count and
page size, and describe where a single page sits within the full set. Inputs
are assumed to be validated non-negative integers.

Examples
--------
>>> compute_page_count(7, 3)
3
>>> window = compute_page_window(2, 7, 3, 3)
>>> (window.start, window.current)
(3, 2)
>>> window.descriptor.next_page
3
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Navigation details for one page of a paginated set."""

    is_first_page: bool
    is_last_page: bool
    previous_page: int | None
    next_page: int | None
    page_numbers: tuple[int, ...]

    def as_mapping(self) -> dict[str, object]:
        """Return the descriptor with the field names used in documents."""
        return {
            "isFirstPage": self.is_first_page,
            "isLastPage": self.is_last_page,
            "previousPage": self.previous_page,
            "nextPage": self.next_page,
            "pageNumbers": list(self.page_numbers),
        }


@dc.dataclass(frozen=True, slots=True)
class PageWindow:
    """Position of one page within the paginated set.

    Attributes
    ----------
    total : int
        Number of items across every page.
    pages : int
        Number of pages in the set.
    page_size : int
        Items per page.
    start : int
        Zero-based offset of the first item on this page.
    current : int
        One-based number of this page.
    descriptor : PageDescriptor
        First/last flags and neighbouring page numbers.
    """

    total: int
    pages: int
    page_size: int
    start: int
    current: int
    descriptor: PageDescriptor


def compute_page_count(item_count: int, page_size: int) -> int:
    """Return ``ceil(item_count / page_size)`` using integer arithmetic."""
    return -(-item_count // page_size)


def compute_page_window(
    page_number: int, item_count: int, page_count: int, page_size: int
) -> PageWindow:
    """Describe page ``page_number`` of a set of ``page_count`` pages."""
    descriptor = PageDescriptor(
        is_first_page=page_number == 1,
        is_last_page=page_number == page_count,
        previous_page=page_number - 1 if page_number > 1 else None,
        next_page=page_number + 1 if page_number < page_count else None,
        page_numbers=tuple(range(1, page_count + 1)),
    )
    return PageWindow(
        total=item_count,
        pages=page_count,
        page_size=page_size,
        start=(page_number - 1) * page_size,
        current=page_number,
        descriptor=descriptor,
    )


__all__ = ["PageDescriptor", "PageWindow", "compute_page_count", "compute_page_window"]
