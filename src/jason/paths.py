"""Path traversal helpers for JSON document trees.

A path is a dot-separated string. Each segment is a key when the container
at that point is a dict and an index when it is a list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONContainer: TypeAlias = dict[str, JSONValue] | list[JSONValue]
PathKey: TypeAlias = str | int


class _PathMissing:
    """Sentinel for missing document paths."""

    def __repr__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: _PathMissing = _PathMissing()


def _as_index(segment: PathKey) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if segment.isascii() and segment.isdecimal() and segment == str(int(segment)):
        return int(segment)
    return None


def lookup(container: JSONValue, segment: PathKey) -> JSONValue | _PathMissing:
    """Return the child of ``container`` addressed by one segment."""

    match container:
        case dict():
            return container.get(str(segment), PATH_MISSING)
        case list():
            index = _as_index(segment)
            if index is None or index >= len(container):
                return PATH_MISSING
            return container[index]
        case _:
            return PATH_MISSING


def _walk(document: JSONValue, segments: list[str]) -> JSONValue | _PathMissing:
    current: JSONValue = document
    for segment in segments:
        found = lookup(current, segment)
        if found is PATH_MISSING:
            return PATH_MISSING
        current = found
    return current


def get_path(document: JSONContainer, path: PathKey) -> JSONValue | _PathMissing:
    """Resolve ``path`` against ``document``.

    An exact top-level key wins over the dotted interpretation, so a key
    stored literally as ``"a.b"`` shadows ``document["a"]["b"]``.
    Returns ``PATH_MISSING`` if any segment is unavailable.
    """

    found = lookup(document, path)
    if found is not PATH_MISSING:
        return found
    if not isinstance(path, str) or "." not in path:
        return PATH_MISSING
    return _walk(document, path.split("."))


def has_paths(document: JSONContainer, paths: PathKey | Iterable[PathKey]) -> bool:
    """Return True when every path in ``paths`` resolves.

    An empty document or an empty collection of paths never matches.
    """

    if isinstance(paths, (str, int)):
        paths = [paths]
    keys = list(paths)
    if not document or not keys:
        return False
    return all(get_path(document, key) is not PATH_MISSING for key in keys)


def _claim_slot(container: JSONContainer, segment: str) -> tuple[JSONContainer, PathKey]:
    # A list only takes in-range indices or an append at len(); anything
    # else turns it into a dict keyed by the former positions.
    if isinstance(container, list):
        index = _as_index(segment)
        if index is not None and index <= len(container):
            return container, index
        container = {str(i): item for i, item in enumerate(container)}
    return container, segment


def _read_slot(container: JSONContainer, slot: PathKey) -> JSONValue | _PathMissing:
    if isinstance(container, list):
        assert isinstance(slot, int)
        return container[slot] if slot < len(container) else PATH_MISSING
    return container.get(str(slot), PATH_MISSING)


def _write_slot(container: JSONContainer, slot: PathKey, value: JSONValue) -> None:
    if isinstance(container, list):
        assert isinstance(slot, int)
        if slot == len(container):
            container.append(value)
        else:
            container[slot] = value
        return
    container[str(slot)] = value


def set_path(document: JSONContainer, path: PathKey, value: JSONValue) -> JSONContainer:
    """Assign ``value`` at ``path``, creating dicts along the way.

    Missing or scalar intermediates are replaced with empty dicts. Unlike
    ``get_path``, a dotted key is always split; it is never stored as a
    literal key. Returns the root, which differs from ``document`` only when
    a list root had to become a dict.
    """

    segments = str(path).split(".")
    root, slot = _claim_slot(document, segments[0])
    container = root
    for segment in segments[1:]:
        child = _read_slot(container, slot)
        if not isinstance(child, (dict, list)):
            child = {}
        child, child_slot = _claim_slot(child, segment)
        _write_slot(container, slot, child)
        container, slot = child, child_slot
    _write_slot(container, slot, value)
    return root


__all__ = [
    "PATH_MISSING",
    "JSONContainer",
    "JSONScalar",
    "JSONValue",
    "PathKey",
    "get_path",
    "has_paths",
    "lookup",
    "set_path",
]
