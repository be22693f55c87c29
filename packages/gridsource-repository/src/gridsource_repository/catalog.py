from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from gridsource_sdk import AccessorReflector, CustomAttributeStore, ExtensionAttributeReflector

from gridsource_repository.common.logger import get_logger
from gridsource_repository.lazy import Lazy

logger = get_logger(__name__)


class Provenance(str, Enum):
    """Attribute subsystem that supplies a column's type and value."""
    NATIVE = "native"
    EXTENSION = "extension"
    CUSTOM = "custom"
    UNKNOWN = "unknown"


class AttributeKeyCatalog:
    """
    Discovers the column keys of a record type across the three attribute subsystems.

    Every key set is computed once per catalog and never recomputed. The catalog also
    owns the key-to-provenance index used by both type resolution and value extraction.
    Precedence is native, then extension, then custom.
    """

    def __init__(
        self,
        record_type: Callable[[], Any],
        accessor_reflector: AccessorReflector,
        extension_reflector: ExtensionAttributeReflector,
        attribute_store: CustomAttributeStore,
    ):
        """
        Args:
            record_type: Zero-argument callable returning the record type.
            accessor_reflector: Reflects fixed accessors of a type.
            extension_reflector: Resolves the extension sub-shape of a type.
            attribute_store: Flexible attribute store.
        """
        self._record_type = record_type
        self._accessors = accessor_reflector
        self._extensions = extension_reflector
        self._attributes = attribute_store

        self._native_keys: Lazy[Tuple[str, ...]] = Lazy(self._load_native_keys)
        self._extension_keys: Lazy[Tuple[str, ...]] = Lazy(self._load_extension_keys)
        self._custom_keys: Lazy[Tuple[str, ...]] = Lazy(self._load_custom_keys)
        self._all_keys: Lazy[Tuple[str, ...]] = Lazy(self._merge_keys)
        self._provenance_index: Lazy[Dict[str, Provenance]] = Lazy(self._index_provenance)

    def native_keys(self) -> List[str]:
        return list(self._native_keys.get())

    def extension_keys(self) -> List[str]:
        return list(self._extension_keys.get())

    def custom_keys(self) -> List[str]:
        return list(self._custom_keys.get())

    def all_keys(self) -> List[str]:
        """Custom, extension and native keys, first occurrence of a name wins."""
        return list(self._all_keys.get())

    def provenance(self, key: str) -> Provenance:
        return self._provenance_index.get().get(key, Provenance.UNKNOWN)

    def _load_native_keys(self) -> Tuple[str, ...]:
        keys = tuple(self._accessors.field_names(self._record_type()))
        logger.debug("Reflected %d native keys", len(keys))
        return keys

    def _load_extension_keys(self) -> Tuple[str, ...]:
        extension_type = self._extensions.for_type(self._record_type())
        if not extension_type:
            return ()
        keys = tuple(self._accessors.field_names(extension_type))
        logger.debug("Reflected %d extension keys from %s", len(keys), extension_type)
        return keys

    def _load_custom_keys(self) -> Tuple[str, ...]:
        keys = tuple(self._attributes.field_names(self._record_type()))
        logger.debug("Loaded %d custom attribute keys", len(keys))
        return keys

    def _merge_keys(self) -> Tuple[str, ...]:
        merged = (*self._custom_keys.get(), *self._extension_keys.get(), *self._native_keys.get())
        return tuple(dict.fromkeys(merged))

    def _index_provenance(self) -> Dict[str, Provenance]:
        index: Dict[str, Provenance] = {}
        for provenance, keys in (
            (Provenance.NATIVE, self._native_keys.get()),
            (Provenance.EXTENSION, self._extension_keys.get()),
            (Provenance.CUSTOM, self._custom_keys.get()),
        ):
            for key in keys:
                index.setdefault(key, provenance)
        return index
