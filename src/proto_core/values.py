"""Value types stored in a ProtoObject's table."""

from __future__ import annotations

from typing import Any, Callable


class _Absent:
    """Singleton for properties that cannot be resolved."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Absent"


Absent = _Absent()


class Function:
    """A callable whose receiver is the object it was last written into.

    The body is called as ``body(receiver, *args, **kwargs)``, so it reads
    like a method::

        area = Function(lambda self: self.width * self.height)
        rect = create(None, {"width": 2, "height": 3, "area": area})
        rect.area()  # → 6
    """

    __slots__ = ("body", "receiver")

    def __init__(self, body: Callable[..., Any]) -> None:
        self.body = body
        self.receiver: Any = None

    def bind(self, receiver: Any) -> None:
        self.receiver = receiver

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.body(self.receiver, *args, **kwargs)

    def __repr__(self) -> str:
        name = getattr(self.body, "__name__", "function")
        return f"Function({name})"


class Lazy:
    """A deferred value, computed on first read of the slot holding it.

    ``compute`` receives the object that triggered the read. The thunk keeps
    no result: the read replaces it in its table slot, so copies of a table
    each compute their own value.
    """

    __slots__ = ("compute",)

    def __init__(self, compute: Callable[[Any], Any]) -> None:
        self.compute = compute

    def resolve(self, reader: Any) -> Any:
        return self.compute(reader)

    def __repr__(self) -> str:
        name = getattr(self.compute, "__name__", "compute")
        return f"Lazy({name})"


# Scalar, ProtoObject, list, Function or Lazy
Value = Any
