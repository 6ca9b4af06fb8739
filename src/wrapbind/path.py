"""Dot-separated key paths into nested values.

"outer.inner" walks ``value["outer"]["inner"]`` for mappings, list indexes
for sequences ("items.0"), and attributes for everything else.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from wrapbind.errors import TraversalWarning

logger = logging.getLogger("wrapbind.path")

_MISSING = object()
_SCALARS = (str, bytes, int, float, complex, bool)
_INDEX = re.compile(r"-?[0-9]+")


def _is_sequence(container: Any) -> bool:
    return isinstance(container, Sequence) and not isinstance(container, (str, bytes))


def _index(segment: str) -> int | None:
    """segment as a list index, or None if it is not a plain decimal integer."""
    return int(segment) if _INDEX.fullmatch(segment) else None


def _lookup(container: Any, segment: str) -> Any:
    if isinstance(container, Mapping):
        return container[segment]
    index = _index(segment)
    if _is_sequence(container) and index is not None:
        return container[index]
    return getattr(container, segment)


def _lookup_stored(container: Any, segment: str) -> Any:
    """Like _lookup, but returns _MISSING instead of raising."""
    if isinstance(container, Mapping):
        return container[segment] if segment in container else _MISSING
    index = _index(segment)
    if _is_sequence(container) and index is not None:
        return container[index] if -len(container) <= index < len(container) else _MISSING
    return getattr(container, segment, _MISSING)


def _assign(container: Any, segment: str, value: Any) -> None:
    index = _index(segment)
    if isinstance(container, MutableMapping):
        container[segment] = value
    elif isinstance(container, MutableSequence) and index is not None:
        container[index] = value
    else:
        setattr(container, segment, value)


def get_path(container: Any, path: str | None = None) -> Any:
    """Return the value at path inside container, or container itself if path is None.

    Missing segments raise the underlying KeyError/IndexError/AttributeError.
    """
    if path is None:
        return container
    *parents, last = path.split(".")
    target = container
    for part in parents:
        target = _lookup(target, part)
    return _lookup(target, last)


def set_path(container: Any, path: str, value: Any) -> None:
    """Assign value at path inside container, mutating it in place."""
    *parents, last = path.split(".")
    target = container
    for part in parents:
        target = _lookup(target, part)
    _assign(target, last, value)


def traverse(container: Any, path: str) -> Any:
    """Soft walk used by default transfer functions.

    Each segment must already be stored. On the first missing one a
    TraversalWarning is logged and whatever was reached so far is returned,
    which may be an intermediate container rather than the leaf.
    Scalars (None, numbers, strings) are returned untouched.
    """
    if container is None or isinstance(container, _SCALARS):
        return container
    target = container
    for part in path.split("."):
        found = _lookup_stored(target, part)
        if found is _MISSING:
            warning = TraversalWarning(path, part)
            logger.warning("%s", warning, extra={"traversal_warning": warning})
            return target
        target = found
    return target
