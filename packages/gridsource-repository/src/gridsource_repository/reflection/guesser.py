from __future__ import annotations

import collections.abc
import datetime
import decimal
import enum
import types
from typing import Any, Literal, Union, get_args, get_origin

UNKNOWN = "unknown"

_NAMED_TYPES = {
    "int": "int",
    "integer": "int",
    "smallint": "int",
    "bigint": "int",
    "tinyint": "int",
    "bool": "bool",
    "boolean": "bool",
    "float": "float",
    "double": "float",
    "real": "float",
    "decimal": "decimal",
    "numeric": "decimal",
    "price": "decimal",
    "str": "string",
    "string": "string",
    "varchar": "string",
    "char": "string",
    "text": "text",
    "mediumtext": "text",
    "longtext": "text",
    "datetime": "datetime",
    "timestamp": "datetime",
    "date": "date",
    "array": "array",
    "list": "array",
    "dict": "object",
    "object": "object",
}

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.Set,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping)

# checked in order, subclasses before their bases
_CLASS_TYPES = (
    (bool, "bool"),
    (int, "int"),
    (float, "float"),
    (decimal.Decimal, "decimal"),
    (str, "string"),
    (enum.Enum, "string"),
    (datetime.datetime, "datetime"),
    (datetime.date, "date"),
    ((list, tuple, set, frozenset), "array"),
    (dict, "object"),
)


class DefaultDataTypeGuesser:
    """
    Maps Python type hints and backend type names to canonical type codes.

    Codes: int, float, decimal, bool, string, text, datetime, date, array,
    object and unknown.
    """

    def type_to_type_code(self, raw_type: Any) -> str:
        if raw_type is None or raw_type is Any or raw_type is type(None):
            return UNKNOWN
        if isinstance(raw_type, str):
            return self._name_to_type_code(raw_type)

        origin = get_origin(raw_type)
        if origin in (Union, types.UnionType):
            members = [arg for arg in get_args(raw_type) if arg is not type(None)]
            return self.type_to_type_code(members[0]) if len(members) == 1 else UNKNOWN
        if origin is Literal:
            values = get_args(raw_type)
            return self.type_to_type_code(type(values[0])) if values else UNKNOWN
        if origin in _SEQUENCE_ORIGINS:
            return "array"
        if origin in _MAPPING_ORIGINS:
            return "object"

        if isinstance(raw_type, type):
            for klass, type_code in _CLASS_TYPES:
                if issubclass(raw_type, klass):
                    return type_code
            return "object"
        return UNKNOWN

    def _name_to_type_code(self, name: str) -> str:
        normalized = name.strip().lower()
        if normalized.endswith("[]"):
            return "array"
        return _NAMED_TYPES.get(normalized, UNKNOWN)
