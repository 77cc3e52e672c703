"""Dot-path resolution and enumeration over nested translation documents."""

import re
from typing import Any, List, Optional

_INDEX_SEGMENT = re.compile(r'^[0-9]+$')

# Returned by _lookup when a segment cannot be followed; None is a real value.
_MISSING = object()


def _lookup(document: Any, path: str) -> Any:
    current = document

    for segment in path.split('.'):
        if isinstance(current, list):
            if not _INDEX_SEGMENT.match(segment):
                return _MISSING
            index = int(segment)
            if index >= len(current):
                return _MISSING
            current = current[index]
        elif isinstance(current, dict):
            if segment not in current:
                return _MISSING
            current = current[segment]
        else:
            return _MISSING

    return current


def has_key(document: Any, path: str) -> bool:
    """
    Check whether every segment of ``path`` can be followed.

    A ``null`` leaf (JSON ``null``, an empty YAML value) still counts as
    declared.
    """
    return _lookup(document, path) is not _MISSING


def resolve_key(document: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dot-delimited key path against a nested document.

    List nodes are indexed by base-10 segments (``items.0.title``); a
    non-numeric or out-of-range segment against a list is "not found".

    Args:
        document: Parsed translation document (dicts, lists, scalars)
        path: Key path, e.g. ``screen.buttons.0.label``
        default: Returned when a segment cannot be followed

    Returns:
        The node at ``path`` (may be a dict, list, scalar or None), or
        ``default``. Use ``has_key`` to tell a null leaf from a missing key.
    """
    value = _lookup(document, path)
    return default if value is _MISSING else value


def extract_all_keys(document: Any, prefix: Optional[str] = None) -> List[str]:
    """
    Enumerate every leaf key path of a nested document, depth-first.

    Dict keys are visited in insertion order, list elements in index order.
    Empty dicts and lists contribute nothing.

    Examples:
        >>> extract_all_keys({'a': [{'b': 1}, 'x']})
        ['a.0.b', 'a.1']
    """
    if isinstance(document, dict):
        children = ((str(key), value) for key, value in document.items())
    elif isinstance(document, list):
        children = ((str(index), value) for index, value in enumerate(document))
    else:
        return [prefix] if prefix is not None else []

    keys: List[str] = []
    for segment, value in children:
        full_key = f"{prefix}.{segment}" if prefix is not None else segment
        keys.extend(extract_all_keys(value, full_key))
    return keys
