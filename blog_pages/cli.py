"""Cyclopts CLI entrypoint for paginating blog listing pages.

The ``blog-pages`` console script loads a source tree into a collection,
generates numbered listing pages from the template document, and writes the
collection to a build directory together with a small JSON manifest of the
generated pages. Options come from flags, ``INPUT_*`` environment variables,
or the ``pagination`` block of ``config/pages.yaml``.

Examples
--------
Paginate ``content/`` into ``build/`` with three posts per page:

>>> from blog_pages.cli import app
>>> app(
...     ["paginate", "--source", "content", "--pages-per-page", "3"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .collection import load_collection, write_collection, write_page_manifest
from .config import DEFAULT_CONFIG, load_pagination_config
from .paginator import paginate

DEFAULT_CONFIG_PATH = Path("config/pages.yaml")

app = App(name="blog-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(
    name="paginate", help="Generate numbered listing pages from the blog template."
)
def paginate_command(
    *,
    source: typ.Annotated[
        Path, Parameter(help="Directory holding the source documents")
    ] = Path("content"),
    destination: typ.Annotated[
        Path, Parameter(help="Directory receiving the built documents")
    ] = Path("build"),
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    pages_per_page: typ.Annotated[
        int | None, Parameter(help="Items shown on each listing page")
    ] = None,
    item_directory: typ.Annotated[
        str | None, Parameter(help="Key prefix of the items to paginate")
    ] = None,
    template_key: typ.Annotated[
        str | None, Parameter(help="Key of the listing template document")
    ] = None,
    descriptor: typ.Annotated[
        bool | None,
        Parameter(help="Also patch 'pagination' fields with page navigation"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log debug diagnostics")] = False,
) -> None:
    """Paginate a source tree and write the result to ``destination``.

    Parameters
    ----------
    source : Path, optional
        Directory loaded into the collection; keys are relative POSIX paths.
    destination : Path, optional
        Output directory for every document in the collection.
    config : Path or None, optional
        Site configuration file; ``config/pages.yaml`` is used when present.
    pages_per_page, item_directory, template_key, descriptor : optional
        Overrides for the matching ``pagination`` options.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when pagination fails; the error goes to stderr.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config_path = config
    if config_path is None and DEFAULT_CONFIG_PATH.exists():
        config_path = DEFAULT_CONFIG_PATH
    base = load_pagination_config(config_path) if config_path else DEFAULT_CONFIG
    settings = base.merged(
        pages_per_page=pages_per_page,
        item_directory=item_directory,
        template_key=template_key,
        include_descriptor=descriptor,
    )

    collection = load_collection(source)
    result = paginate(collection, settings)
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        raise SystemExit(1)

    for path in write_collection(collection, destination):
        print(f"wrote {_format_path(path)}")
    manifest_path = write_page_manifest(destination, result)
    print(f"wrote {_format_path(manifest_path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
