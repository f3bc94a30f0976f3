"""Property resolution over an object and its prototype chain."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .errors import PrototypeCycleError
from .values import Absent, Lazy, Value

logger = logging.getLogger(__name__)


def walk_chain(obj: Any) -> Iterator[Any]:
    """Yield *obj*, then each prototype in turn until the chain ends.

    Raises PrototypeCycleError when an object is met twice.
    """
    seen: set[int] = set()
    while obj is not None:
        if id(obj) in seen:
            logger.debug("cycle detected at object %#x", id(obj))
            raise PrototypeCycleError(obj)
        seen.add(id(obj))
        yield obj
        obj = object.__getattribute__(obj, "_proto")


def read(obj: Any, name: object) -> Value:
    """Resolve *name* on *obj*, falling back to its prototypes.

    - Own property: returned directly. A Lazy value is computed with *obj*
      as the reader and the result replaces it in the owning table.
    - Inherited property: the first ancestor holding *name* wins.
    - Missing everywhere: returns Absent.
    """
    name = str(name)
    for owner in walk_chain(obj):
        table = object.__getattribute__(owner, "_table")
        if name not in table:
            continue
        value = table[name]
        if isinstance(value, Lazy):
            return _resolve_lazy(owner, name, value, obj)
        return value
    return Absent


def _resolve_lazy(owner: Any, name: str, value: Lazy, reader: Any) -> Value:
    from .setter import write

    logger.debug("resolving lazy property %r", name)
    resolved = value.resolve(reader)
    write(owner, name, resolved)
    return resolved


def has_own(obj: Any, name: object) -> bool:
    """True when *name* is in the own table of *obj*."""
    return str(name) in object.__getattribute__(obj, "_table")


def is_in(obj: Any, name: object) -> bool:
    """True when *name* is an own property of *obj* or of any ancestor."""
    if obj is None:
        return False
    return any(has_own(owner, name) for owner in walk_chain(obj))
