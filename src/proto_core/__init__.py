"""proto_core — prototype-based dynamic objects."""

from .errors import ConstructionError, PrototypeCycleError, ProtoError
from .values import Absent, Function, Lazy, Value, _Absent
from .accessors import PROTOCOL_NAMES, QUERY_SUFFIX, Accessor
from .getter import has_own, is_in, read
from .setter import delete, delete_through_chain, write
from .object import ProtoObject
from .reflect import (
    assign,
    call_method,
    clear,
    dup,
    equals,
    inspect_object,
    is_function,
    is_lazy,
    is_proto_object,
    properties_of,
    prototype_chain_of,
    prototype_of,
    set_prototype_of,
    set_table_of,
    table_of,
    to_dict,
)
from .builder import create, from_
from .enumerable import (
    all_,
    any_,
    each,
    each_pair,
    find,
    map_,
    map_inplace,
    reject,
    reject_inplace,
    select,
    select_inplace,
)
from .keywords import fn, function, lazy, memo

__all__ = [
    "create",
    "from_",
    "read",
    "write",
    "delete",
    "delete_through_chain",
    "has_own",
    "is_in",
    "equals",
    "assign",
    "dup",
    "prototype_of",
    "set_prototype_of",
    "prototype_chain_of",
    "properties_of",
    "table_of",
    "set_table_of",
    "clear",
    "to_dict",
    "call_method",
    "inspect_object",
    "is_proto_object",
    "is_function",
    "is_lazy",
    "each_pair",
    "each",
    "map_",
    "map_inplace",
    "select",
    "select_inplace",
    "reject",
    "reject_inplace",
    "any_",
    "all_",
    "find",
    "fn",
    "function",
    "lazy",
    "memo",
    "ProtoObject",
    "Accessor",
    "Function",
    "Lazy",
    "Value",
    "Absent",
    "PROTOCOL_NAMES",
    "QUERY_SUFFIX",
    "ProtoError",
    "ConstructionError",
    "PrototypeCycleError",
]
