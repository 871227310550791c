"""Typed configuration value consumed by the pagination pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from blog_pages.errors import ConfigError

# Option spellings accepted from host pipelines that still use the
# camelCase names of the original plugin options.
OPTION_ALIASES: dict[str, str] = {
    "pagesPerPage": "pages_per_page",
    "blogDirectory": "item_directory",
    "itemDirectory": "item_directory",
    "blog_directory": "item_directory",
    "mainTemplate": "template_key",
    "templateKey": "template_key",
    "main_template": "template_key",
    "includeDescriptor": "include_descriptor",
}


@dc.dataclass(frozen=True, slots=True)
class PaginationConfig:
    """Options controlling how listing pages are generated.

    Attributes
    ----------
    pages_per_page : int
        Number of items shown on each listing page.
    item_directory : str
        Key prefix (with trailing ``/``) that identifies items to count.
    template_key : str
        Collection key of the listing template that becomes page 1.
    include_descriptor : bool
        Also patch ``pagination`` fields with the full page descriptor.
    """

    pages_per_page: int = 6
    item_directory: str = "blog/"
    template_key: str = "blog.md"
    include_descriptor: bool = False

    @property
    def output_directory(self) -> str:
        """Return the item directory without its trailing separator."""
        return self.item_directory.removesuffix("/")

    def merged(self, **overrides: typ.Any) -> PaginationConfig:
        """Return a copy with caller overrides applied over these values.

        ``None`` overrides are ignored so CLI flags left unset keep the
        underlying value. Unknown option names raise :class:`ConfigError`.
        """
        known = {field.name for field in dc.fields(self)}
        changes: dict[str, typ.Any] = {}
        for name, value in overrides.items():
            target = OPTION_ALIASES.get(name, name)
            if target not in known:
                msg = f"Unknown pagination option '{name}'."
                raise ConfigError(msg)
            if value is None:
                continue
            changes[target] = value
        return dc.replace(self, **changes)


DEFAULT_CONFIG = PaginationConfig()


__all__ = ["DEFAULT_CONFIG", "OPTION_ALIASES", "PaginationConfig"]
