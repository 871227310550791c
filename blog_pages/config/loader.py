"""Load the ``pagination`` block of a site YAML file into a config value."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from blog_pages.errors import ConfigError

from .models import DEFAULT_CONFIG, PaginationConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

PAGINATION_BLOCK = "pagination"


def load_pagination_config(
    path: Path, *, base: PaginationConfig = DEFAULT_CONFIG
) -> PaginationConfig:
    """Load pagination options from a site configuration file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).
    base : PaginationConfig, optional
        Values used for options the file does not set.

    Returns
    -------
    PaginationConfig
        ``base`` with the file's ``pagination`` block merged over it. A file
        without that block yields ``base`` unchanged.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If the top-level document or the ``pagination`` block is not a
        mapping, or the block names an unknown option.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_pagination_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> config.pages_per_page  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)

    block = loaded.get(PAGINATION_BLOCK)
    match block:
        case None:
            return base
        case dict():
            return base.merged(**{str(key): value for key, value in block.items()})
        case _:
            msg = f"'{PAGINATION_BLOCK}' must be a mapping in '{path}'."
            raise ConfigError(msg)


__all__ = ["load_pagination_config"]
