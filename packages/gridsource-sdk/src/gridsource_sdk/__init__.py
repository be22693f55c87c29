from .interfaces import GridSourceType
from .models import (
    ColumnDefinition,
    ColumnOption,
    Filter,
    FilterGroup,
    SortOrder,
    SearchCriteria,
    SearchResults,
    RawGridSourceContainer,
    unbox,
)
from .protocols import (
    AccessorReflector,
    ColumnDefinitionFactory,
    CustomAttributeStore,
    DataTypeGuesser,
    ExtensionAttributeReflector,
    RepositorySourceResolver,
)
from .errors import (
    ErrorCode,
    GridSourceError,
    RepositoryConfigurationError,
    AccessorNotFoundError,
)

__all__ = [
    "GridSourceType",
    "ColumnDefinition",
    "ColumnOption",
    "Filter",
    "FilterGroup",
    "SortOrder",
    "SearchCriteria",
    "SearchResults",
    "RawGridSourceContainer",
    "unbox",
    "AccessorReflector",
    "ColumnDefinitionFactory",
    "CustomAttributeStore",
    "DataTypeGuesser",
    "ExtensionAttributeReflector",
    "RepositorySourceResolver",
    "ErrorCode",
    "GridSourceError",
    "RepositoryConfigurationError",
    "AccessorNotFoundError",
]
