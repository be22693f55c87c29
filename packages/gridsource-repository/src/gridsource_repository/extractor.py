from __future__ import annotations

from typing import Any, Callable, List

from gridsource_sdk import (
    AccessorReflector,
    CustomAttributeStore,
    ExtensionAttributeReflector,
    RawGridSourceContainer,
    unbox,
)

from gridsource_repository.catalog import AttributeKeyCatalog, Provenance
from gridsource_repository.columns import ColumnDefinitionBuilder

ARRAY_TYPE = "array"
MULTI_VALUE_SEPARATOR = ","


class ValueExtractor:
    """Reads records and cell values out of fetched repository results."""

    def __init__(
        self,
        record_type: Callable[[], Any],
        catalog: AttributeKeyCatalog,
        columns: ColumnDefinitionBuilder,
        accessor_reflector: AccessorReflector,
        extension_reflector: ExtensionAttributeReflector,
        attribute_store: CustomAttributeStore,
    ):
        self._record_type = record_type
        self._catalog = catalog
        self._columns = columns
        self._accessors = accessor_reflector
        self._extensions = extension_reflector
        self._attributes = attribute_store

    def records(self, container: RawGridSourceContainer) -> List[Any]:
        return list(unbox(container).items)

    def total_count(self, container: RawGridSourceContainer) -> int:
        """Total reported by the repository, not the size of the current page."""
        return unbox(container).total_count

    def value(self, record: Any, key: str) -> Any:
        provenance = self._catalog.provenance(key)
        if provenance is Provenance.NATIVE:
            return self._accessors.get_value(record, key)
        if provenance is Provenance.EXTENSION:
            return self._extensions.get_value(self._record_type(), record, key)
        if provenance is Provenance.CUSTOM:
            return self._custom_attribute_value(record, key)
        return None

    def _custom_attribute_value(self, record: Any, key: str) -> Any:
        value = self._attributes.get_value(record, key)
        # multiselect attributes are persisted as comma-joined text
        if self._columns.get(key).type == ARRAY_TYPE and isinstance(value, str):
            return value.split(MULTI_VALUE_SEPARATOR)
        return value
