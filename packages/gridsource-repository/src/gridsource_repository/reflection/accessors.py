from __future__ import annotations

import dataclasses
from typing import Any, Dict, List, Optional, get_type_hints

from pydantic import BaseModel

from gridsource_sdk import AccessorNotFoundError

EXTENSION_ATTRIBUTES_FIELD = "extension_attributes"
CUSTOM_ATTRIBUTES_FIELD = "custom_attributes"
RESERVED_FIELDS = frozenset({EXTENSION_ATTRIBUTES_FIELD, CUSTOM_ATTRIBUTES_FIELD})


def _is_model(record_type: Any) -> bool:
    return isinstance(record_type, type) and issubclass(record_type, BaseModel)


def _properties(record_type: type) -> Dict[str, property]:
    """Public properties in declaration order, base classes first."""
    found: Dict[str, property] = {}
    for klass in reversed(record_type.__mro__):
        for name, member in vars(klass).items():
            if isinstance(member, property) and not name.startswith("_"):
                found[name] = member
    return found


def declared_type(record_type: Any, name: str) -> Optional[Any]:
    """
    Returns the declared type of attribute ``name`` on ``record_type``.

    Pydantic fields and computed fields, dataclass fields, annotated class
    attributes and property return annotations are considered, in that order.
    Returns None when nothing is declared.
    """
    if _is_model(record_type):
        if name in record_type.model_fields:
            return record_type.model_fields[name].annotation
        if name in record_type.model_computed_fields:
            return record_type.model_computed_fields[name].return_type

    hints = get_type_hints(record_type)
    if name in hints:
        return hints[name]

    prop = _properties(record_type).get(name)
    if prop is not None and prop.fget is not None:
        return get_type_hints(prop.fget).get("return")
    return None


class ModelAccessorReflector:
    """
    Reflects the fixed accessors of a record type.

    Pydantic models expose their fields and computed fields, dataclasses their
    fields, and any other class its public properties. The reserved
    ``extension_attributes`` and ``custom_attributes`` names belong to the other
    two attribute subsystems and are never reported as fields here.
    """

    def field_names(self, record_type: Any) -> List[str]:
        if _is_model(record_type):
            names = [*record_type.model_fields, *record_type.model_computed_fields]
        elif dataclasses.is_dataclass(record_type):
            names = [f.name for f in dataclasses.fields(record_type)]
        else:
            names = list(_properties(record_type))
        return [name for name in names if name not in RESERVED_FIELDS and not name.startswith("_")]

    def field_type(self, record_type: Any, key: str) -> Any:
        if key not in self.field_names(record_type):
            raise AccessorNotFoundError(
                f"{getattr(record_type, '__name__', record_type)} has no accessor for '{key}'",
                details={"key": key},
            )
        return declared_type(record_type, key)

    def get_value(self, record: Any, key: str) -> Any:
        try:
            return getattr(record, key)
        except AttributeError as exc:
            raise AccessorNotFoundError(
                f"{type(record).__name__} has no accessor for '{key}'",
                details={"key": key},
            ) from exc
