"""Error types raised by proto_core."""

from __future__ import annotations


class ProtoError(Exception):
    """Base class for proto_core errors."""


class ConstructionError(ProtoError, TypeError):
    """The builder was given a source it cannot walk."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(
            f"{type(source).__name__} does not implement items() or __iter__"
        )


class PrototypeCycleError(ProtoError):
    """A prototype chain leads back to an object already visited."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(f"prototype chain of object at {id(obj):#x} is cyclic")
