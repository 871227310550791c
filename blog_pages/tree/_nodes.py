"""Node classification shared by the tree cloner and patcher.

Documents are trees of mappings, sequences, and opaque scalars. Text and
binary sequences (``str``, ``bytes``, ``bytearray``) are leaves even though
they implement :class:`collections.abc.Sequence`.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

_ATOMIC_SEQUENCES = (str, bytes, bytearray, memoryview, range)


def is_mapping(value: object) -> typ.TypeGuard[cabc.Mapping[typ.Any, typ.Any]]:
    """Return ``True`` for map-like nodes."""
    return isinstance(value, cabc.Mapping)


def is_sequence(value: object) -> bool:
    """Return ``True`` for ordered or unordered collections of child nodes."""
    if isinstance(value, _ATOMIC_SEQUENCES):
        return False
    return isinstance(value, cabc.Sequence | cabc.Set)


def is_container(value: object) -> bool:
    """Return ``True`` when ``value`` may hold child nodes."""
    return is_mapping(value) or is_sequence(value)


def child_nodes(node: object) -> list[typ.Any]:
    """Return the container-typed children of ``node`` in natural order."""
    values: cabc.Iterable[typ.Any]
    if is_mapping(node):
        values = node.values()
    elif is_sequence(node):
        values = typ.cast("cabc.Iterable[typ.Any]", node)
    else:
        return []
    return [value for value in values if is_container(value)]


__all__ = ["child_nodes", "is_container", "is_mapping", "is_sequence"]
