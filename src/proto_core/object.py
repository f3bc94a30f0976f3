"""ProtoObject — an object with its own property table and a prototype."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from .accessors import PROTOCOL_NAMES, QUERY_SUFFIX, registry_of
from .getter import has_own, is_in, read
from .setter import delete, write
from .values import Value

_SLOTS = frozenset({"_table", "_proto", "_accessors"})


class ProtoObject:
    """Property table plus an optional prototype for unresolved reads.

    Instances are built with :func:`proto_core.create` or
    :func:`proto_core.from_`. Attribute access is sugar over the engine::

        point.x          # read(point, "x")
        point.x = 1      # write(point, "x", 1)
        del point.x      # delete(point, "x")

    The only public methods are the protocol names (``tap``, ``inspect``,
    ``eql``, ``respond_to``, ``to_dict``). A property written under one of
    those names hides the method for attribute access while it resolves;
    use :func:`proto_core.call_method` with arguments to reach the method.
    Properties named after the internal slots read as properties once
    stored; the engine reads the slots directly.
    """

    __slots__ = ("_table", "_proto", "_accessors")

    def __init__(self, prototype: ProtoObject | None = None) -> None:
        object.__setattr__(self, "_table", {})
        object.__setattr__(self, "_proto", prototype)
        object.__setattr__(self, "_accessors", {})

    # -- Attribute sugar ------------------------------------------------

    def __getattribute__(self, name: str) -> Any:
        if name in PROTOCOL_NAMES:
            accessor = registry_of(self).get(name)
            if accessor is not None and is_in(self, name):
                return accessor.get()
        elif name in _SLOTS and has_own(self, name):
            return read(self, name)
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Value:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        accessor = registry_of(self).get(name)
        if accessor is not None:
            return accessor.get()
        return read(self, name)

    def __setattr__(self, name: str, value: Value) -> None:
        accessor = registry_of(self).get(name)
        if accessor is not None and accessor.setter is not None:
            accessor.set(value)
        elif name.endswith(QUERY_SUFFIX):
            raise AttributeError(f"property {name!r} cannot be assigned as an attribute")
        else:
            write(self, name, value)

    def __delattr__(self, name: str) -> None:
        delete(self, name)

    def __dir__(self) -> list[str]:
        return sorted(set(registry_of(self)) | PROTOCOL_NAMES)

    # -- Item access ----------------------------------------------------

    def __getitem__(self, name: object) -> Value:
        return read(self, name)

    def __setitem__(self, name: object, value: Value) -> None:
        write(self, name, value)

    def __delitem__(self, name: object) -> None:
        delete(self, name)

    def __contains__(self, name: object) -> bool:
        return is_in(self, name)

    # -- Equality and display -------------------------------------------

    def __eq__(self, other: object) -> bool:
        table = object.__getattribute__(self, "_table")
        if isinstance(other, ProtoObject):
            return table == object.__getattribute__(other, "_table")
        if isinstance(other, Mapping):
            return table == {str(k): v for k, v in other.items()}
        return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return ProtoObject.inspect(self)

    # -- Protocol methods -----------------------------------------------

    def tap(self, block: Callable[[ProtoObject], Any]) -> ProtoObject:
        """Call *block* with this object and return the object."""
        block(self)
        return self

    def inspect(self) -> str:
        proto = object.__getattribute__(self, "_proto")
        table = object.__getattribute__(self, "_table")
        return f"<ProtoObject object={id(self):#x} proto={proto!r} table={table!r}>"

    def eql(self, other: object) -> bool:
        return ProtoObject.__eq__(self, other)

    def respond_to(self, name: object) -> bool:
        return str(name) in registry_of(self) or is_in(self, name)

    def to_dict(self, recursive: bool = True) -> dict[str, Value]:
        table = object.__getattribute__(self, "_table")
        if not recursive:
            return dict(table)
        return {key: _plain(value) for key, value in table.items()}


def _plain(value: Value) -> Value:
    if isinstance(value, ProtoObject):
        return ProtoObject.to_dict(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value
