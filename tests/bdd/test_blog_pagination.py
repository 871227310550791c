"""Behaviour tests for paginating blog listing pages using pytest-bdd.

These scenarios run :func:`blog_pages.paginate` over in-memory collections to
show how the template becomes page 1, how further pages are keyed and
numbered, and that every failure or single-page case leaves the collection
exactly as it was supplied.

Usage
-----
Run ``pytest tests/bdd/test_blog_pagination.py -v``. The feature file lives
at ``features/blog_pagination.feature``; no fixtures beyond the shared
``scenario_state`` dictionary are needed.
"""

from __future__ import annotations

import copy
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from blog_pages import PaginationConfig, PaginationResult, paginate

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "blog_pagination.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


def _files(scenario_state: ScenarioState) -> dict[str, typ.Any]:
    return typ.cast("dict[str, typ.Any]", scenario_state["files"])


def _result(scenario_state: ScenarioState) -> PaginationResult:
    return typ.cast("PaginationResult", scenario_state["result"])


@given("a blog template with a paging section")
def given_template(scenario_state: ScenarioState) -> None:
    """Start a collection holding a template with one zeroed paging section."""
    scenario_state["files"] = {
        "blog.md": {
            "sections": [
                {
                    "hasPagingParams": True,
                    "numberOfBlogs": 0,
                    "numberOfPages": 0,
                    "pageLength": 0,
                    "pageStart": 0,
                    "pageNumber": 0,
                }
            ]
        }
    }


@given("a blog template without a paging section")
def given_template_without_section(scenario_state: ScenarioState) -> None:
    """Start a collection whose template has no marked section."""
    scenario_state["files"] = {
        "blog.md": {"sections": [{"hasPagingParams": False, "numberOfBlogs": 0}]}
    }


@given(parsers.parse('{count:d} posts under "{directory}"'))
def given_posts(scenario_state: ScenarioState, count: int, directory: str) -> None:
    """Add ``count`` empty posts below ``directory``."""
    files = _files(scenario_state)
    for index in range(1, count + 1):
        files[f"{directory}post{index}.md"] = {}


@when(parsers.parse("I paginate with {pages_per_page:d} posts per page"))
def when_paginate(scenario_state: ScenarioState, pages_per_page: int) -> None:
    """Snapshot the collection, then run one pagination pass over it."""
    files = _files(scenario_state)
    scenario_state["before"] = copy.deepcopy(files)
    scenario_state["result"] = paginate(
        files, PaginationConfig(pages_per_page=pages_per_page)
    )


@then("the pass succeeds")
def then_succeeds(scenario_state: ScenarioState) -> None:
    """The completion result carries no error."""
    result = _result(scenario_state)
    assert result.ok, f"expected success, got {result.error!r}"


@then(parsers.parse("the pass fails with {error_name}"))
def then_fails(scenario_state: ScenarioState, error_name: str) -> None:
    """The completion result carries an error of the named type."""
    error = _result(scenario_state).error
    assert error is not None, f"expected {error_name}, got success"
    assert type(error).__name__ == error_name, (
        f"expected {error_name}, got {type(error).__name__}: {error}"
    )


@then("the collection is unchanged")
def then_unchanged(scenario_state: ScenarioState) -> None:
    """The collection equals the snapshot taken before the pass."""
    assert _files(scenario_state) == scenario_state["before"], (
        "expected the collection to be left exactly as supplied"
    )


@then(parsers.parse('the collection gains the keys "{keys}"'))
def then_gains_keys(scenario_state: ScenarioState, keys: str) -> None:
    """Exactly the listed keys were added."""
    expected = {key.strip() for key in keys.split(",")}
    added = set(_files(scenario_state)) - set(scenario_state["before"])
    assert added == expected, f"expected new keys {expected!r}, got {added!r}"


@then(
    parsers.parse(
        "the template section reports {total:d} posts over {pages:d} pages of {size:d}"
    )
)
def then_template_totals(
    scenario_state: ScenarioState, total: int, pages: int, size: int
) -> None:
    """The template section carries the totals shared by every page."""
    section = _files(scenario_state)["blog.md"]["sections"][0]
    actual = (section["numberOfBlogs"], section["numberOfPages"], section["pageLength"])
    assert actual == (total, pages, size), (
        f"expected totals {(total, pages, size)}, got {actual}"
    )


@then(parsers.parse('"{key}" reports start {start:d} and page number {number:d}'))
def then_page_window(
    scenario_state: ScenarioState, key: str, start: int, number: int
) -> None:
    """The page's section carries its own start offset and page number."""
    section = _files(scenario_state)[key]["sections"][0]
    actual = (section["pageStart"], section["pageNumber"])
    assert actual == (start, number), (
        f"expected {key} to report {(start, number)}, got {actual}"
    )
