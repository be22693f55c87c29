from __future__ import annotations

import types
from typing import Any, Optional, Union, get_args, get_origin

from gridsource_sdk import AccessorNotFoundError

from .accessors import EXTENSION_ATTRIBUTES_FIELD, ModelAccessorReflector, declared_type


def _unwrap_optional(hint: Any) -> Any:
    if get_origin(hint) in (Union, types.UnionType):
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return hint


class ExtensionAttributesReflector:
    """
    Reflects the extension sub-shape declared by a record type.

    The sub-shape is the declared type of the record's ``extension_attributes``
    attribute. Its fields are read with the same accessor reflector used for the
    record type itself.
    """

    def __init__(self, accessor_reflector: Optional[ModelAccessorReflector] = None):
        self._accessors = accessor_reflector or ModelAccessorReflector()

    def for_type(self, record_type: Any) -> Optional[type]:
        hint = _unwrap_optional(declared_type(record_type, EXTENSION_ATTRIBUTES_FIELD))
        return hint if isinstance(hint, type) else None

    def field_type(self, record_type: Any, key: str) -> Any:
        extension_type = self.for_type(record_type)
        if extension_type is None:
            raise AccessorNotFoundError(
                f"{getattr(record_type, '__name__', record_type)} declares no extension attributes",
                details={"key": key},
            )
        return self._accessors.field_type(extension_type, key)

    def get_value(self, record_type: Any, record: Any, key: str) -> Any:
        extension_attributes = getattr(record, EXTENSION_ATTRIBUTES_FIELD, None)
        if extension_attributes is None:
            return None
        return self._accessors.get_value(extension_attributes, key)
