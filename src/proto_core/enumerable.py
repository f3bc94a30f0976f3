"""Traversal of an object and its prototype chain.

Every function takes an optional ``depth``: 0 covers the object alone, 1 the
object and its prototype, and so on. ``None`` covers the whole chain.

Callbacks receive ``(name, value)``. The ``*_inplace`` variants write their
result back to the object that owns each property, so a prototype can be
changed through a descendant. The plain variants work on :func:`dup`.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .getter import read, walk_chain
from .object import ProtoObject
from .reflect import dup, properties_of, table_of
from .setter import delete, write
from .values import Absent, Value, _Absent

Callback = Callable[[str, Value], Any]


def each_pair(obj: ProtoObject, depth: int | None = None) -> Iterator[tuple[ProtoObject, str, Value]]:
    """Yield ``(owner, name, value)`` for every own property along the chain."""
    for level, owner in enumerate(walk_chain(obj)):
        if depth is not None and level > depth:
            return
        for name in properties_of(owner):
            if name not in table_of(owner):
                continue
            yield owner, name, read(owner, name)


def each(obj: ProtoObject, depth: int | None = None) -> Iterator[tuple[str, Value]]:
    """Yield ``(name, value)`` pairs; shallower names shadow deeper ones."""
    seen: set[str] = set()
    for _, name, value in each_pair(obj, depth):
        if name in seen:
            continue
        seen.add(name)
        yield name, value


# ---------------------------------------------------------------------------
# In place
# ---------------------------------------------------------------------------

def map_inplace(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    for owner, name, value in each_pair(obj, depth):
        write(owner, name, fn(name, value))
    return obj


def select_inplace(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    for owner, name, value in each_pair(obj, depth):
        if not fn(name, value):
            delete(owner, name)
    return obj


def reject_inplace(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    for owner, name, value in each_pair(obj, depth):
        if fn(name, value):
            delete(owner, name)
    return obj


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def map_(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    return map_inplace(dup(obj), fn, depth)


def select(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    return select_inplace(dup(obj), fn, depth)


def reject(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject:
    return reject_inplace(dup(obj), fn, depth)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def any_(obj: ProtoObject, fn: Callback, depth: int | None = None) -> bool:
    for _, name, value in each_pair(obj, depth):
        if fn(name, value):
            return True
    return False


def all_(obj: ProtoObject, fn: Callback, depth: int | None = None) -> bool:
    for _, name, value in each_pair(obj, depth):
        if not fn(name, value):
            return False
    return True


def find(obj: ProtoObject, fn: Callback, depth: int | None = None) -> ProtoObject | _Absent:
    """Return the owner of the first property matching *fn*, or Absent."""
    for owner, name, value in each_pair(obj, depth):
        if fn(name, value):
            return owner
    return Absent
