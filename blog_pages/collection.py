"""Read and write a source tree as a collection of front-matter documents.

A collection maps POSIX relative paths (``"blog/post1.md"``) to documents.
Each document is the file's YAML front matter mapping with the remaining body
stored under ``contents`` as bytes, which is the shape static site builders
hand to their plugins. These helpers are the host side of the pipeline: the
paginator itself never touches the filesystem.

Examples
--------
>>> from pathlib import Path
>>> files = load_collection(Path("content"))  # doctest: +SKIP
>>> files["blog.md"]["sections"][0]["hasPagingParams"]  # doctest: +SKIP
True
>>> write_collection(files, Path("build"), keys=["blog/2.md"])  # doctest: +SKIP
[PosixPath('build/blog/2.md')]
"""

from __future__ import annotations

import io
import json
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import CONTENTS_KEY, FRONT_MATTER_FENCE, PAGE_META_FILENAME
from .errors import CollectionError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .paginator import PaginationResult

_FENCE_BYTES = FRONT_MATTER_FENCE.encode("utf-8")


def load_collection(source_dir: Path) -> dict[str, dict[str, typ.Any]]:
    """Load every file below ``source_dir`` into a collection.

    Raises
    ------
    FileNotFoundError
        If ``source_dir`` does not exist.
    CollectionError
        If a file's front matter is not valid YAML or not a mapping.
    """
    if not source_dir.is_dir():
        msg = f"Source directory '{source_dir}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    collection: dict[str, dict[str, typ.Any]] = {}
    for path in sorted(source_dir.rglob("*")):
        if not path.is_file():
            continue
        key = path.relative_to(source_dir).as_posix()
        collection[key] = _read_document(path, key, loader)
    return collection


def _read_document(path: Path, key: str, loader: YAML) -> dict[str, typ.Any]:
    raw = path.read_bytes()
    front_matter, body = _split_front_matter(raw)
    document: dict[str, typ.Any] = {}
    if front_matter is not None:
        try:
            loaded = loader.load(front_matter.decode("utf-8"))
        except (YAMLError, UnicodeDecodeError) as exc:
            msg = f"Invalid front matter in '{key}': {exc}"
            raise CollectionError(msg) from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            msg = f"Front matter in '{key}' must be a mapping."
            raise CollectionError(msg)
        document.update(loaded)
    document[CONTENTS_KEY] = body
    return document


def _split_front_matter(raw: bytes) -> tuple[bytes | None, bytes]:
    """Return ``(front_matter, body)``; front matter is ``None`` when absent."""
    lines = raw.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _FENCE_BYTES:
        return None, raw
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == _FENCE_BYTES:
            return b"".join(lines[1:index]), b"".join(lines[index + 1 :])
    return None, raw


def write_collection(
    collection: cabc.Mapping[str, cabc.Mapping[str, typ.Any]],
    destination: Path,
    *,
    keys: cabc.Iterable[str] | None = None,
) -> list[Path]:
    """Write documents back to disk as front matter followed by contents.

    Parameters
    ----------
    collection : Mapping[str, Mapping[str, Any]]
        Documents keyed by relative path.
    destination : Path
        Output root; parent directories are created as needed.
    keys : Iterable[str], optional
        Subset of keys to write; defaults to every key.

    Returns
    -------
    list[Path]
        Paths written, in the order the keys were given.
    """
    dumper = _build_roundtrip_yaml()
    written: list[Path] = []
    for key in keys if keys is not None else list(collection):
        document = collection[key]
        target = destination / key
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(_render_document(document, dumper))
        written.append(target)
    return written


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _render_document(document: cabc.Mapping[str, typ.Any], dumper: YAML) -> bytes:
    contents = document.get(CONTENTS_KEY, b"")
    if isinstance(contents, str):
        contents = contents.encode("utf-8")
    front_matter = {
        key: value
        for key, value in document.items()
        if key != CONTENTS_KEY and not isinstance(value, bytes | bytearray)
    }
    if not front_matter:
        return bytes(contents)
    buffer = io.StringIO()
    dumper.dump(front_matter, buffer)
    header = f"{FRONT_MATTER_FENCE}\n{buffer.getvalue()}{FRONT_MATTER_FENCE}\n"
    return header.encode("utf-8") + bytes(contents)


def write_page_manifest(destination: Path, result: PaginationResult) -> Path:
    """Record the keys generated by a pagination pass next to the output."""
    destination.mkdir(parents=True, exist_ok=True)
    manifest_path = destination / PAGE_META_FILENAME
    payload = {
        "item_count": result.item_count,
        "page_count": result.page_count,
        "generated": list(result.written),
    }
    manifest_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return manifest_path


__all__ = ["load_collection", "write_collection", "write_page_manifest"]
