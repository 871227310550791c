"""Generic document tree helpers: value cloning and field patching."""

from .clone import clone_document
from .patch import (
    find_paging_section,
    iter_paging_sections,
    pagination_field_values,
    patch_fields,
)

__all__ = [
    "clone_document",
    "find_paging_section",
    "iter_paging_sections",
    "pagination_field_values",
    "patch_fields",
]
