from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from gridsource_sdk import (
    AccessorReflector,
    ColumnDefinition,
    ColumnDefinitionFactory,
    CustomAttributeStore,
    DataTypeGuesser,
    ExtensionAttributeReflector,
    GridSourceType,
    RawGridSourceContainer,
    RepositorySourceResolver,
    SearchCriteria,
)

from gridsource_repository.catalog import AttributeKeyCatalog
from gridsource_repository.columns import ColumnDefinitionBuilder
from gridsource_repository.common.logger import get_logger, grid_context
from gridsource_repository.configs import GridConfig, RepositorySourceConfig
from gridsource_repository.extractor import ValueExtractor
from gridsource_repository.fetcher import RecordFetcher
from gridsource_repository.lazy import Lazy
from gridsource_repository.reflection import (
    DefaultDataTypeGuesser,
    ExtensionAttributesReflector,
    InMemoryAttributeStore,
    ModelAccessorReflector,
)
from gridsource_repository.type_resolver import TypeResolver

logger = get_logger(__name__)


class RepositoryGridSource(GridSourceType):
    """
    Grid source backed by a repository list method.

    Columns are discovered by reflecting over the record type returned by the
    repository: its own accessors, its extension attributes and the flexible
    attributes registered for it. An instance is bound to one snapshot of the
    record type's shape; nothing it has computed is ever invalidated.
    """

    def __init__(
        self,
        grid_name: str,
        source_config: Union[RepositorySourceConfig, Mapping[str, Any]],
        repository_resolver: RepositorySourceResolver,
        accessor_reflector: AccessorReflector,
        extension_reflector: ExtensionAttributeReflector,
        attribute_store: CustomAttributeStore,
        column_definition_factory: ColumnDefinitionFactory,
        type_guesser: DataTypeGuesser,
    ):
        if not isinstance(source_config, RepositorySourceConfig):
            source_config = RepositorySourceConfig.model_validate(dict(source_config))
        self._grid_name = grid_name
        self._source_config = source_config

        list_method = source_config.repository_list_method
        record_type = Lazy(lambda: repository_resolver.entity_type(list_method)).get

        self.catalog = AttributeKeyCatalog(record_type, accessor_reflector, extension_reflector, attribute_store)
        self.type_resolver = TypeResolver(
            record_type, self.catalog, accessor_reflector, extension_reflector, attribute_store, type_guesser
        )
        self.columns = ColumnDefinitionBuilder(
            record_type, self.catalog, self.type_resolver, attribute_store, column_definition_factory
        )
        self.fetcher = RecordFetcher(list_method, repository_resolver)
        self.extractor = ValueExtractor(
            record_type, self.catalog, self.columns, accessor_reflector, extension_reflector, attribute_store
        )

    def __str__(self):
        return f"{self._grid_name} ({self._source_config.repository_list_method})"

    @property
    def grid_name(self) -> str:
        return self._grid_name

    @property
    def source_config(self) -> RepositorySourceConfig:
        return self._source_config

    def get_column_keys(self) -> List[str]:
        return self.catalog.all_keys()

    def get_column_definition(self, key: str) -> ColumnDefinition:
        return self.columns.get(key)

    def fetch_data(self, search_criteria: SearchCriteria) -> RawGridSourceContainer:
        with grid_context(self._grid_name):
            container = self.fetcher.fetch(search_criteria)
            logger.info("Fetched page for %s, total count %d", self, self.extractor.total_count(container))
            return container

    def extract_records(self, raw_grid_data: RawGridSourceContainer) -> List[Any]:
        return self.extractor.records(raw_grid_data)

    def extract_value(self, record: Any, key: str) -> Any:
        return self.extractor.value(record, key)

    def extract_total_row_count(self, raw_grid_data: RawGridSourceContainer) -> int:
        return self.extractor.total_count(raw_grid_data)


def create_repository_grid_source(
    grid: GridConfig,
    repository_resolver: RepositorySourceResolver,
    attribute_store: Optional[CustomAttributeStore] = None,
    type_guesser: Optional[DataTypeGuesser] = None,
) -> RepositoryGridSource:
    """
    Builds a grid source for a configured grid using the default reflectors.

    Args:
        grid: The grid configuration.
        repository_resolver: Resolves the grid's repository list method.
        attribute_store: Flexible attribute store; an empty in-memory store by default.
        type_guesser: Type code guesser; DefaultDataTypeGuesser by default.
    """
    accessors = ModelAccessorReflector()
    return RepositoryGridSource(
        grid_name=grid.name,
        source_config=grid.source,
        repository_resolver=repository_resolver,
        accessor_reflector=accessors,
        extension_reflector=ExtensionAttributesReflector(accessors),
        attribute_store=attribute_store if attribute_store is not None else InMemoryAttributeStore(),
        column_definition_factory=ColumnDefinition,
        type_guesser=type_guesser or DefaultDataTypeGuesser(),
    )
