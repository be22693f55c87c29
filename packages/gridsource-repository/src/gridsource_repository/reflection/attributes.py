from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .accessors import CUSTOM_ATTRIBUTES_FIELD

MULTISELECT_INPUT = "multiselect"
ARRAY_BACKEND_TYPE = "array"


class AttributeMetadata(BaseModel):
    """Definition of one flexible attribute of a record type."""

    code: str
    backend_type: Optional[str] = Field(default="varchar", description="Storage type of the attribute value.")
    frontend_input: Optional[str] = Field(default=None, description="Input kind, e.g. 'select' or 'multiselect'.")
    label: Optional[str] = None
    options: List[Dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)


class InMemoryAttributeStore:
    """Flexible attribute store keeping attribute definitions per record type in memory."""

    def __init__(self):
        self._attributes: Dict[Any, Dict[str, AttributeMetadata]] = defaultdict(dict)

    def register(self, record_type: Any, attribute: AttributeMetadata) -> None:
        self._attributes[record_type][attribute.code] = attribute

    def field_names(self, record_type: Any) -> List[str]:
        return list(self._attributes.get(record_type, {}))

    def backend_type(self, record_type: Any, key: str) -> Optional[str]:
        attribute = self._find(record_type, key)
        if attribute is None:
            return None
        if attribute.frontend_input == MULTISELECT_INPUT:
            return ARRAY_BACKEND_TYPE
        return attribute.backend_type

    def label(self, record_type: Any, key: str) -> Optional[str]:
        attribute = self._find(record_type, key)
        return attribute.label if attribute else None

    def options(self, record_type: Any, key: str) -> List[Dict[str, Any]]:
        attribute = self._find(record_type, key)
        return [dict(option) for option in attribute.options] if attribute else []

    def get_value(self, record: Any, key: str) -> Any:
        """
        Reads a flexible attribute value from a record.

        ``custom_attributes`` may be a mapping of code to value, or a list of
        ``{"attribute_code": ..., "value": ...}`` entries (mappings or objects).
        """
        custom_attributes = getattr(record, CUSTOM_ATTRIBUTES_FIELD, None)
        if custom_attributes is None:
            return None
        if isinstance(custom_attributes, Mapping):
            return custom_attributes.get(key)
        for entry in custom_attributes:
            if _entry_field(entry, "attribute_code") == key:
                return _entry_field(entry, "value")
        return None

    def _find(self, record_type: Any, key: str) -> Optional[AttributeMetadata]:
        return self._attributes.get(record_type, {}).get(key)


def _entry_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)
