"""Value-copy documents without sharing mutable structure.

:func:`clone_document` walks a document with an explicit stack so deeply
nested trees do not exhaust the interpreter's call stack. Containers are
rebuilt with their original shape (mapping, list, tuple, set); leaves are
deep-copied so mutable opaque values such as ``bytearray`` buffers are never
shared between the source and the copy.

Examples
--------
>>> source = {"sections": [{"hasPagingParams": True, "pageNumber": 0}]}
>>> copy = clone_document(source)
>>> copy == source, copy["sections"] is source["sections"]
(True, False)
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import copy
import dataclasses as dc
import typing as typ

from blog_pages.errors import CloneError

from ._nodes import is_container, is_mapping


@dc.dataclass(slots=True)
class _Frame:
    """A container being copied, with the children copied so far."""

    source: typ.Any
    key: typ.Any = None
    entries: list[tuple[typ.Any, typ.Any]] = dc.field(default_factory=list)
    pending: cabc.Iterator[tuple[typ.Any, typ.Any]] = dc.field(init=False)

    def __post_init__(self) -> None:
        if is_mapping(self.source):
            self.pending = iter(list(self.source.items()))
        else:
            self.pending = enumerate(list(self.source))

    def build(self) -> typ.Any:
        if is_mapping(self.source):
            return _rebuild_mapping(self.source, self.entries)
        return _rebuild_sequence(self.source, [value for _, value in self.entries])


def clone_document(document: typ.Any) -> typ.Any:
    """Return a structurally independent, value-equal copy of ``document``.

    Parameters
    ----------
    document : Any
        Mapping, sequence, or scalar to copy.

    Returns
    -------
    Any
        The copy. Mappings and sequences are new objects at every depth.

    Raises
    ------
    CloneError
        If ``document`` contains itself (transitively), or holds a leaf value
        that cannot be copied.
    """
    if not is_container(document):
        return _copy_leaf(document)

    active: set[int] = {id(document)}
    stack = [_Frame(document)]
    result: typ.Any = None
    while stack:
        frame = stack[-1]
        try:
            key, value = next(frame.pending)
        except StopIteration:
            stack.pop()
            active.discard(id(frame.source))
            built = frame.build()
            if stack:
                stack[-1].entries.append((frame.key, built))
            else:
                result = built
            continue

        if not is_container(value):
            frame.entries.append((key, _copy_leaf(value)))
            continue
        if id(value) in active:
            msg = f"Cannot clone a document containing a reference cycle (at key {key!r})."
            raise CloneError(msg)
        active.add(id(value))
        stack.append(_Frame(value, key=key))
    return result


def _copy_leaf(value: typ.Any) -> typ.Any:
    # deepcopy hands back immutable binary data as the same object.
    if type(value) is bytes:
        return bytes(bytearray(value))
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        msg = f"Cannot clone value of type {type(value).__name__}: {exc}"
        raise CloneError(msg) from exc


def _rebuild_mapping(
    source: cabc.Mapping[typ.Any, typ.Any], entries: list[tuple[typ.Any, typ.Any]]
) -> cabc.Mapping[typ.Any, typ.Any]:
    match source:
        case collections.defaultdict():
            return collections.defaultdict(source.default_factory, entries)
        case dict() if type(source) is dict:
            return dict(entries)
    try:
        return type(source)(entries)
    except TypeError:
        return dict(entries)


def _rebuild_sequence(source: typ.Any, values: list[typ.Any]) -> typ.Any:
    match source:
        case list() if type(source) is list:
            return values
        case tuple() if hasattr(source, "_fields"):
            return type(source)(*values)
    try:
        return type(source)(values)
    except TypeError:
        return list(values)


__all__ = ["clone_document"]
