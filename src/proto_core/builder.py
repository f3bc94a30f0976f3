"""Builder: construct ProtoObjects from properties or nested data.

``create`` makes a single object. ``from_`` walks nested data (typically the
output of a JSON or YAML loader) and converts every mapping it meets into an
independent ProtoObject::

    from_({"point": {"x": 0, "y": 0}}).point.x   # → 0
    from_([{"x": 1}, "foo"])                     # → [ProtoObject, "foo"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import SimpleNamespace
from typing import Any

from .errors import ConstructionError
from .object import ProtoObject
from .reflect import prototype_of, table_of
from .setter import write
from .values import Value

logger = logging.getLogger(__name__)


def create(
    prototype: ProtoObject | None = None,
    properties: ProtoObject | Mapping[Any, Value] | None = None,
) -> ProtoObject:
    """Create a ProtoObject with *prototype*, writing each of *properties*.

    When *properties* is itself a ProtoObject its table is copied, and its
    prototype is used unless *prototype* is given.
    """
    if isinstance(properties, ProtoObject):
        source = properties
        properties = dict(table_of(source))
        if prototype is None:
            prototype = prototype_of(source)
    obj = ProtoObject(prototype)
    for key, value in (properties or {}).items():
        write(obj, key, value)
    return obj


def from_(source: Any, prototype: ProtoObject | None = None) -> ProtoObject | list[Value]:
    """Recursively convert *source* into ProtoObjects.

    - ProtoObject: duplicated; its prototype is kept unless overridden.
    - Mapping (anything with ``items()``, or a SimpleNamespace): a new
      ProtoObject with each value converted.
    - Other iterables (not str/bytes): a list; mapping elements are
      converted, everything else passes through.
    - Anything else raises ConstructionError.

    Only the outermost object receives *prototype*.
    """
    if isinstance(source, ProtoObject):
        return from_(table_of(source), prototype or prototype_of(source))

    pairs = _pairs_of(source)
    if pairs is not None:
        logger.debug("building object from %s", type(source).__name__)
        visited = {key: _convert(value) for key, value in pairs}
        return create(prototype, visited)

    if _is_sequence(source):
        return [_convert_element(item) for item in source]

    raise ConstructionError(source)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _pairs_of(value: Any) -> Iterable[tuple[Any, Value]] | None:
    if isinstance(value, ProtoObject):
        return None
    if isinstance(value, SimpleNamespace):
        return vars(value).items()
    items = getattr(value, "items", None)
    if callable(items):
        return items()
    return None


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, ProtoObject)):
        return False
    return isinstance(value, Iterable)


def _convert(value: Value) -> Value:
    """Convert a mapping value: nested maps and sequences are walked."""
    if isinstance(value, ProtoObject):
        return value
    if _pairs_of(value) is not None:
        return from_(value)
    if _is_sequence(value):
        return [_convert(item) for item in value]
    return value


def _convert_element(item: Value) -> Value:
    """Convert a top-level sequence element: only mappings are walked."""
    if _pairs_of(item) is not None:
        return from_(item)
    return item
