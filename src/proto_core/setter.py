"""Property mutation: write and delete."""

from __future__ import annotations

from typing import Any

from . import accessors
from .getter import walk_chain
from .values import Function, Value


def write(obj: Any, name: object, value: Value) -> None:
    """Store *value* as an own property of *obj*.

    A Function is rebound to *obj*. Accessors for *name* are synthesized on
    the first write only.
    """
    name = str(name)
    if isinstance(value, Function):
        value.bind(obj)
    object.__getattribute__(obj, "_table")[name] = value
    if accessors.needs_accessors(obj, name):
        accessors.synthesize(obj, name)


def delete(obj: Any, name: object) -> None:
    """Remove the own property *name* from *obj*.

    Inherited values become visible again. When *name* was never an own
    property, a pass-through getter is still registered for it.
    """
    name = str(name)
    table = object.__getattribute__(obj, "_table")
    if name in table:
        del table[name]
    elif name not in accessors.registry_of(obj):
        accessors.synthesize_getter(obj, name)


def delete_through_chain(obj: Any, name: object, depth: int | None = None) -> None:
    """Delete *name* from *obj* and from up to *depth* of its prototypes."""
    for level, owner in enumerate(walk_chain(obj)):
        if depth is not None and level > depth:
            break
        delete(owner, name)
