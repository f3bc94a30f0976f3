"""Factories for Function and Lazy property values."""

from __future__ import annotations

from typing import Any, Callable

from .values import Function, Lazy


def fn(body: Callable[..., Any]) -> Function:
    """Wrap *body* as a Function; usable as a decorator.

    ::

        @fn
        def describe(self, unit):
            return f"{self.x}{unit}"
    """
    return Function(body)


def lazy(compute: Callable[[Any], Any]) -> Lazy:
    """Defer *compute* until the property is first read.

    *compute* receives the object the read was made through.
    """
    return Lazy(compute)


function = fn
memo = lazy
