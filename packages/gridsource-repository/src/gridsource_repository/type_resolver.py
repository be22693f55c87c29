from __future__ import annotations

from typing import Any, Callable

from gridsource_sdk import (
    AccessorReflector,
    CustomAttributeStore,
    DataTypeGuesser,
    ExtensionAttributeReflector,
)

from gridsource_repository.catalog import AttributeKeyCatalog, Provenance

UNKNOWN_TYPE = "unknown"


class TypeResolver:
    """Resolves the canonical type code of a column key."""

    def __init__(
        self,
        record_type: Callable[[], Any],
        catalog: AttributeKeyCatalog,
        accessor_reflector: AccessorReflector,
        extension_reflector: ExtensionAttributeReflector,
        attribute_store: CustomAttributeStore,
        type_guesser: DataTypeGuesser,
    ):
        self._record_type = record_type
        self._catalog = catalog
        self._accessors = accessor_reflector
        self._extensions = extension_reflector
        self._attributes = attribute_store
        self._type_guesser = type_guesser

    def column_type(self, key: str) -> str:
        return self._type_guesser.type_to_type_code(self.raw_type(key))

    def raw_type(self, key: str) -> Any:
        """Returns the unnormalized type reported by the subsystem owning ``key``."""
        provenance = self._catalog.provenance(key)
        if provenance is Provenance.UNKNOWN:
            return UNKNOWN_TYPE

        record_type = self._record_type()
        if provenance is Provenance.NATIVE:
            return self._accessors.field_type(record_type, key)
        if provenance is Provenance.EXTENSION:
            return self._extensions.field_type(record_type, key)
        return self._attributes.backend_type(record_type, key)
