from .catalog import AttributeKeyCatalog, Provenance
from .columns import ColumnDefinitionBuilder
from .common.settings import Settings, settings, setup_logging
from .extractor import ValueExtractor
from .fetcher import RecordFetcher, map_id_filters
from .type_resolver import TypeResolver
from .source import RepositoryGridSource, create_repository_grid_source

__all__ = [
    "AttributeKeyCatalog",
    "Provenance",
    "ColumnDefinitionBuilder",
    "Settings",
    "settings",
    "setup_logging",
    "ValueExtractor",
    "RecordFetcher",
    "map_id_filters",
    "TypeResolver",
    "RepositoryGridSource",
    "create_repository_grid_source",
]
