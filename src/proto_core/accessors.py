"""Per-object accessor registry.

Every property written to a ProtoObject gets an :class:`Accessor` in that
object's registry: a getter that reads the property and, unless the name ends
in :data:`QUERY_SUFFIX`, a setter that writes it. Attribute syntax goes
through the registry first and falls back to a plain read.

Names in :data:`PROTOCOL_NAMES` are methods of ProtoObject itself. Their
getter branches on how it is invoked: with no arguments and no block it reads
the property, otherwise it runs the original method.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .getter import read
from .values import Value

logger = logging.getLogger(__name__)

PROTOCOL_NAMES = frozenset({"tap", "inspect", "eql", "respond_to", "to_dict"})
QUERY_SUFFIX = "?"


@dataclass
class Accessor:
    name: str
    getter: Callable[..., Value]
    setter: Callable[[Value], None] | None = None

    def get(self, *args: Any, block: Callable[..., Any] | None = None) -> Value:
        return self.getter(*args, block=block)

    def set(self, value: Value) -> None:
        if self.setter is None:
            raise AttributeError(f"property {self.name!r} has no setter")
        self.setter(value)


def registry_of(obj: Any) -> dict[str, Accessor]:
    return object.__getattribute__(obj, "_accessors")


def needs_accessors(obj: Any, name: str) -> bool:
    """True unless *name* already has every accessor it should have."""
    accessor = registry_of(obj).get(name)
    if accessor is None:
        return True
    return accessor.setter is None and not name.endswith(QUERY_SUFFIX)


def synthesize(obj: Any, name: str) -> Accessor:
    """Define the getter/setter pair for *name* on *obj*.

    An existing getter is kept; only the missing half is added.
    """
    registry = registry_of(obj)
    accessor = registry.get(name)
    if accessor is None:
        accessor = Accessor(name, _make_getter(obj, name))
        registry[name] = accessor
    if accessor.setter is None and not name.endswith(QUERY_SUFFIX):
        accessor.setter = _make_setter(obj, name)
    logger.debug("synthesized accessors for %r on object %#x", name, id(obj))
    return accessor


def synthesize_getter(obj: Any, name: str) -> Accessor:
    """Define a pass-through getter for *name* with no setter."""
    accessor = Accessor(name, _make_getter(obj, name))
    registry_of(obj)[name] = accessor
    return accessor


def call_protocol(obj: Any, name: str, *args: Any, block: Callable[..., Any] | None = None) -> Any:
    """Run the ProtoObject method *name*, bypassing any stored property."""
    method = getattr(type(obj), name)
    if block is not None:
        args = (*args, block)
    return method(obj, *args)


def _make_getter(obj: Any, name: str) -> Callable[..., Value]:
    if name in PROTOCOL_NAMES:
        def getter(*args: Any, block: Callable[..., Any] | None = None) -> Value:
            if not args and block is None:
                return read(obj, name)
            return call_protocol(obj, name, *args, block=block)
    else:
        def getter(*args: Any, block: Callable[..., Any] | None = None) -> Value:
            if args or block is not None:
                raise TypeError(f"accessor {name!r} takes no arguments")
            return read(obj, name)
    return getter


def _make_setter(obj: Any, name: str) -> Callable[[Value], None]:
    def setter(value: Value) -> None:
        obj[name] = value
    return setter
