"""Unit tests for page count and page window arithmetic."""

from __future__ import annotations

import pytest

from blog_pages.window import compute_page_count, compute_page_window


@pytest.mark.parametrize(
    ("item_count", "page_size", "expected"),
    [
        (0, 3, 0),
        (1, 3, 1),
        (3, 3, 1),
        (4, 3, 2),
        (7, 3, 3),
        (7, 10, 1),
        (100, 10, 10),
        (101, 10, 11),
        (5, 1, 5),
    ],
)
def test_page_count_is_ceiling_division(
    item_count: int, page_size: int, expected: int
) -> None:
    """Page count should round partial pages up."""
    actual = compute_page_count(item_count, page_size)
    assert actual == expected, (
        f"expected {expected} pages for {item_count} items of {page_size}, got {actual}"
    )


@pytest.mark.parametrize("page", [1, 2, 3])
def test_window_start_offset_follows_page_number(page: int) -> None:
    """Start offset for page k should be (k - 1) * page size."""
    window = compute_page_window(page, 7, 3, 3)
    assert window.start == (page - 1) * 3, (
        f"expected start {(page - 1) * 3} for page {page}, got {window.start}"
    )
    assert window.current == page, f"expected current {page}, got {window.current}"
    assert (window.total, window.pages, window.page_size) == (7, 3, 3), (
        "expected totals to be identical across pages"
    )


def test_descriptor_for_first_middle_and_last_pages() -> None:
    """Descriptors should flag the ends and point at neighbouring pages."""
    first = compute_page_window(1, 7, 3, 3).descriptor
    middle = compute_page_window(2, 7, 3, 3).descriptor
    last = compute_page_window(3, 7, 3, 3).descriptor

    assert first.is_first_page, "expected page 1 to be flagged as first"
    assert not first.is_last_page, "expected page 1 of 3 not to be last"
    assert first.previous_page is None, "expected no previous page before page 1"
    assert first.next_page == 2, f"expected next page 2, got {first.next_page}"

    assert (middle.previous_page, middle.next_page) == (1, 3), (
        "expected middle page to link both neighbours"
    )
    assert last.is_last_page, "expected page 3 of 3 to be flagged as last"
    assert last.next_page is None, "expected no next page after the last page"
    assert last.page_numbers == (1, 2, 3), (
        f"expected page numbers 1..3, got {last.page_numbers!r}"
    )


def test_descriptor_mapping_uses_document_field_names() -> None:
    """Descriptor mappings should use the camelCase document field names."""
    mapping = compute_page_window(2, 7, 3, 3).descriptor.as_mapping()
    assert mapping == {
        "isFirstPage": False,
        "isLastPage": False,
        "previousPage": 1,
        "nextPage": 3,
        "pageNumbers": [1, 2, 3],
    }, f"unexpected descriptor mapping {mapping!r}"
