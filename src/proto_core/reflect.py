"""Reflection helpers: prototypes, tables, assign and dup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from . import accessors
from .getter import read, walk_chain
from .object import ProtoObject
from .setter import write
from .values import Function, Lazy, Value


# ---------------------------------------------------------------------------
# Prototypes
# ---------------------------------------------------------------------------

def prototype_of(obj: ProtoObject) -> ProtoObject | None:
    return object.__getattribute__(obj, "_proto")


def set_prototype_of(obj: ProtoObject, prototype: ProtoObject | None) -> None:
    """Replace the prototype of *obj*. No cycle check is made here."""
    object.__setattr__(obj, "_proto", prototype)


def prototype_chain_of(obj: ProtoObject) -> list[ProtoObject]:
    """Return the ancestors of *obj*, nearest first."""
    return list(walk_chain(obj))[1:]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def table_of(obj: ProtoObject) -> dict[str, Value]:
    return object.__getattribute__(obj, "_table")


def set_table_of(obj: ProtoObject, table: dict[str, Value]) -> None:
    object.__setattr__(obj, "_table", table)


def properties_of(obj: ProtoObject) -> list[str]:
    return list(table_of(obj))


def clear(obj: ProtoObject) -> None:
    table_of(obj).clear()


def to_dict(obj: ProtoObject, recursive: bool = True) -> dict[str, Value]:
    return ProtoObject.to_dict(obj, recursive)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_proto_object(value: object) -> bool:
    return isinstance(value, ProtoObject)


def is_function(value: object) -> bool:
    return isinstance(value, Function)


def is_lazy(value: object) -> bool:
    return isinstance(value, Lazy)


def equals(a: object, b: object) -> bool:
    """Compare own tables; prototypes are ignored.

    *b* may also be a mapping. Anything else compares unequal.
    """
    if not isinstance(a, ProtoObject):
        return False
    return ProtoObject.__eq__(a, b)


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def assign(target: ProtoObject, *sources: ProtoObject | Mapping[Any, Value]) -> ProtoObject:
    """Copy the own properties of each source onto *target*, left to right.

    Sources are snapshotted first, so *target* may appear among them.
    """
    snapshots = [list(_pairs(source).items()) for source in sources]
    for pairs in snapshots:
        for key, value in pairs:
            write(target, key, value)
    return target


def dup(obj: ProtoObject) -> ProtoObject:
    """Duplicate *obj* and every object in its prototype chain.

    Tables are copied; values are shared. Functions keep their receiver.
    """
    copies = [_dup_one(owner) for owner in walk_chain(obj)]
    for copy, prototype in zip(copies, copies[1:]):
        set_prototype_of(copy, prototype)
    return copies[0]


def _dup_one(obj: ProtoObject) -> ProtoObject:
    copy = ProtoObject()
    set_table_of(copy, dict(table_of(obj)))
    for name in table_of(copy):
        accessors.synthesize(copy, name)
    return copy


def _pairs(source: ProtoObject | Mapping[Any, Value]) -> Mapping[Any, Value]:
    if isinstance(source, ProtoObject):
        return table_of(source)
    return source


# ---------------------------------------------------------------------------
# Dispatch and display
# ---------------------------------------------------------------------------

def call_method(obj: ProtoObject, name: object, *args: Any,
                block: Callable[..., Any] | None = None) -> Any:
    """Invoke *name* on *obj* the way a method call would.

    Synthesized accessors run first, so a protocol name with a stored
    property reads it when called bare and runs the protocol method when
    given arguments or a block. Unknown names read through the chain.
    """
    name = str(name)
    accessor = accessors.registry_of(obj).get(name)
    if accessor is not None:
        return accessor.get(*args, block=block)
    if name in accessors.PROTOCOL_NAMES:
        return accessors.call_protocol(obj, name, *args, block=block)
    if args or block is not None:
        raise TypeError(f"property {name!r} takes no arguments")
    return read(obj, name)


def inspect_object(obj: ProtoObject) -> str:
    return ProtoObject.inspect(obj)
