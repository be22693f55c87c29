from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .models import ColumnDefinition, SearchCriteria

RecordType = Any
RepositoryListMethod = Callable[[SearchCriteria], Any]


@runtime_checkable
class RepositorySourceResolver(Protocol):
    """Turns a configured repository list method into a record type and a callable."""

    def entity_type(self, list_method: str) -> RecordType:
        """Return the type of the records the list method produces."""
        ...

    def create(self, list_method: str) -> RepositoryListMethod:
        """Return a callable taking SearchCriteria and returning a paged result."""
        ...


@runtime_checkable
class AccessorReflector(Protocol):
    """Reflects the fixed accessors of a record type."""

    def field_names(self, record_type: RecordType) -> List[str]:
        ...

    def field_type(self, record_type: RecordType, key: str) -> Any:
        ...

    def get_value(self, record: Any, key: str) -> Any:
        ...


@runtime_checkable
class ExtensionAttributeReflector(Protocol):
    """Reflects the optional extension sub-shape of a record type."""

    def for_type(self, record_type: RecordType) -> Optional[RecordType]:
        """Return the extension sub-shape, or None when the type has none."""
        ...

    def field_type(self, record_type: RecordType, key: str) -> Any:
        ...

    def get_value(self, record_type: RecordType, record: Any, key: str) -> Any:
        ...


@runtime_checkable
class CustomAttributeStore(Protocol):
    """Flexible attribute store holding attributes outside the static record shape."""

    def field_names(self, record_type: RecordType) -> List[str]:
        ...

    def backend_type(self, record_type: RecordType, key: str) -> Optional[str]:
        ...

    def label(self, record_type: RecordType, key: str) -> Optional[str]:
        ...

    def options(self, record_type: RecordType, key: str) -> List[Dict[str, Any]]:
        """Return the choice list as ``{"value": ..., "label": ...}`` mappings."""
        ...

    def get_value(self, record: Any, key: str) -> Any:
        ...


@runtime_checkable
class DataTypeGuesser(Protocol):
    def type_to_type_code(self, raw_type: Any) -> str:
        """Normalize a raw type into a canonical type code."""
        ...


@runtime_checkable
class ColumnDefinitionFactory(Protocol):
    def create(self, arguments: Mapping[str, Any]) -> ColumnDefinition:
        """Build a column definition from the fields present in ``arguments``."""
        ...
