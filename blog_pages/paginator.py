"""High-level orchestration for listing page generation.

This module turns one template document plus the items in a collection into
numbered listing pages. :class:`BlogPaginator` validates the configuration and
collection, counts items under the configured directory, patches the
template's paging section as page 1, and inserts a patched clone of the
template for every further page under ``{item_directory}/{n}.md``.

Host pipelines normally go through :func:`paginate` or a callable built by
:func:`blog_pages_plugin`; both report failures in the returned
:class:`PaginationResult` instead of raising.

Example
-------
>>> files = {
...     "blog.md": {"sections": [{"hasPagingParams": True, "pageNumber": 0}]},
...     **{f"blog/post{i}.md": {} for i in range(7)},
... }
>>> result = paginate(files, PaginationConfig(pages_per_page=3))
>>> result.written
['blog/2.md', 'blog/3.md']
>>> files["blog/3.md"]["sections"][0]["pageNumber"]
3
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import logging
import typing as typ

from ._constants import PAGE_KEY_TEMPLATE
from .config import DEFAULT_CONFIG, PaginationConfig
from .errors import BlogPagesError, PageGenerationError
from .tree import (
    clone_document,
    iter_paging_sections,
    pagination_field_values,
    patch_fields,
)
from .validation import validate_collection, validate_config
from .window import compute_page_count, compute_page_window

_LOGGER = logging.getLogger(__name__)

DebugSink = cabc.Callable[..., None]
Collection = cabc.MutableMapping[str, typ.Any]


class PaginationState(enum.Enum):
    """Stages a pagination pass moves through."""

    PENDING = "pending"
    VALIDATING = "validating"
    COUNTING = "counting"
    DECIDING = "deciding"
    PATCHING_FIRST_PAGE = "patching-first-page"
    GENERATING_PAGE = "generating-page"
    DONE = "done"
    ERRORED = "errored"


@dc.dataclass(slots=True)
class PaginationResult:
    """Outcome of one pagination pass.

    Attributes
    ----------
    state : PaginationState
        ``DONE`` on success, ``ERRORED`` otherwise.
    item_count : int
        Items counted under the item directory (0 when validation failed,
        otherwise set even when a later page fails).
    page_count : int
        Pages in the set; ``0`` or ``1`` means nothing was generated.
    written : list[str]
        Keys inserted into the collection, in page order. On failure this
        holds the pages generated before the failing one.
    error : BlogPagesError | None
        The failure that ended the pass, if any.
    """

    state: PaginationState
    item_count: int = 0
    page_count: int = 0
    written: list[str] = dc.field(default_factory=list)
    error: BlogPagesError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the pass finished without error."""
        return self.error is None


class BlogPaginator:
    """Generate numbered listing pages from a template document."""

    def __init__(
        self, config: PaginationConfig = DEFAULT_CONFIG, *, debug: DebugSink | None = None
    ) -> None:
        """Initialize the paginator.

        Parameters
        ----------
        config : PaginationConfig, optional
            Options for page size, item directory, and template key.
        debug : callable, optional
            Diagnostic sink called as ``debug(message, *args)``; defaults to
            the module logger's ``debug`` method.
        """
        self.config = config
        self.debug: DebugSink = debug or _LOGGER.debug
        self.state = PaginationState.PENDING
        self.written: list[str] = []
        self.item_count = 0
        self.page_count = 0

    def run(self, collection: Collection) -> PaginationResult:
        """Paginate ``collection`` in place.

        Returns
        -------
        PaginationResult
            Counts and keys written by this pass.

        Raises
        ------
        ConfigError
            If an option value is invalid. Nothing is mutated.
        MissingTemplateError, MissingPaginationSectionError
            If the template or its paging section is absent. Nothing is
            mutated.
        PageGenerationError
            If cloning or patching fails for a page; earlier pages stay in
            the collection.
        """
        self.written = []
        self.item_count = 0
        self.page_count = 0
        try:
            return self._run(collection)
        except BlogPagesError:
            self.state = PaginationState.ERRORED
            raise

    def _run(self, collection: Collection) -> PaginationResult:
        config = self.config
        self.state = PaginationState.VALIDATING
        validate_config(config)
        validate_collection(collection, config.template_key)
        self.debug("Running with options: %r", config)

        self.state = PaginationState.COUNTING
        item_count = self.item_count = len(self._item_keys(collection))
        if item_count == 0:
            self.debug("No items found in %s", config.item_directory)
            return self._finish(item_count, 0)

        self.state = PaginationState.DECIDING
        page_count = self.page_count = compute_page_count(
            item_count, config.pages_per_page
        )
        self.debug("Found %d items, creating %d pages", item_count, page_count)
        if page_count <= 1:
            self.debug("Only one page needed, skipping pagination")
            return self._finish(item_count, page_count)

        self.state = PaginationState.PATCHING_FIRST_PAGE
        template = collection[config.template_key]
        self._patch_page(template, 1, item_count, page_count)
        self.debug(
            "Updated template %s with pagination parameters", config.template_key
        )

        self.state = PaginationState.GENERATING_PAGE
        for page in range(2, page_count + 1):
            key = PAGE_KEY_TEMPLATE.format(
                directory=config.output_directory, number=page
            )
            try:
                document = clone_document(template)
                self._patch_page(document, page, item_count, page_count)
            except Exception as exc:
                raise PageGenerationError(page, exc) from exc
            collection[key] = document
            self.written.append(key)
            self.debug("Created pagination page %s", key)

        return self._finish(item_count, page_count)

    def _item_keys(self, collection: cabc.Mapping[str, typ.Any]) -> list[str]:
        prefix = self.config.item_directory
        template_key = self.config.template_key
        return [
            key
            for key in collection
            if key.startswith(prefix) and key != template_key
        ]

    def _patch_page(
        self, document: typ.Any, page: int, item_count: int, page_count: int
    ) -> None:
        sections = list(iter_paging_sections(document))
        if len(sections) > 1 and page == 1:
            self.debug(
                "Template has %d marked sections; only the first is patched",
                len(sections),
            )
        section = sections[0] if sections else None
        window = compute_page_window(
            page, item_count, page_count, self.config.pages_per_page
        )
        patch_fields(
            section,
            pagination_field_values(
                window, include_descriptor=self.config.include_descriptor
            ),
        )

    def _finish(self, item_count: int, page_count: int) -> PaginationResult:
        self.state = PaginationState.DONE
        return PaginationResult(
            state=self.state,
            item_count=item_count,
            page_count=page_count,
            written=list(self.written),
        )


def paginate(
    collection: Collection,
    config: PaginationConfig | None = None,
    *,
    debug: DebugSink | None = None,
) -> PaginationResult:
    """Run one pagination pass and report failures in the result.

    Parameters
    ----------
    collection : MutableMapping[str, Any]
        Documents keyed by path; mutated in place.
    config : PaginationConfig, optional
        Options; defaults to :data:`~blog_pages.config.DEFAULT_CONFIG`.
    debug : callable, optional
        Diagnostic sink; see :class:`BlogPaginator`.

    Returns
    -------
    PaginationResult
        ``error`` is set (and ``state`` is ``ERRORED``) when the pass failed.
    """
    paginator = BlogPaginator(config or DEFAULT_CONFIG, debug=debug)
    try:
        return paginator.run(collection)
    except BlogPagesError as exc:
        _LOGGER.debug("Pagination failed: %s", exc)
        return PaginationResult(
            state=paginator.state,
            item_count=paginator.item_count,
            page_count=paginator.page_count,
            written=list(paginator.written),
            error=exc,
        )


def blog_pages_plugin(
    **options: typ.Any,
) -> cabc.Callable[..., PaginationResult]:
    """Build a pipeline plugin with ``options`` merged over the defaults.

    Options use either the Python field names of :class:`PaginationConfig`
    or the camelCase spellings (``pagesPerPage``, ``blogDirectory``,
    ``mainTemplate``). Option values are validated when the plugin runs.

    Raises
    ------
    ConfigError
        If an option name is not recognised.
    """
    config = DEFAULT_CONFIG.merged(**options)

    def plugin(
        collection: Collection, *, debug: DebugSink | None = None
    ) -> PaginationResult:
        return paginate(collection, config, debug=debug)

    plugin.__name__ = "blog_pages"
    return plugin


__all__ = [
    "BlogPaginator",
    "DebugSink",
    "PaginationResult",
    "PaginationState",
    "blog_pages_plugin",
    "paginate",
]
