from __future__ import annotations

from typing import Any, Callable, Dict, List

from gridsource_sdk import ColumnDefinition, ColumnDefinitionFactory, CustomAttributeStore

from gridsource_repository.catalog import AttributeKeyCatalog, Provenance
from gridsource_repository.common.logger import get_logger
from gridsource_repository.lazy import Memo
from gridsource_repository.type_resolver import TypeResolver

logger = get_logger(__name__)


class ColumnDefinitionBuilder:
    """Builds one column definition per key and keeps it for the builder's lifetime."""

    def __init__(
        self,
        record_type: Callable[[], Any],
        catalog: AttributeKeyCatalog,
        type_resolver: TypeResolver,
        attribute_store: CustomAttributeStore,
        column_definition_factory: ColumnDefinitionFactory,
    ):
        self._record_type = record_type
        self._catalog = catalog
        self._type_resolver = type_resolver
        self._attributes = attribute_store
        self._factory = column_definition_factory
        self._definitions: Memo[str, ColumnDefinition] = Memo()

    def get(self, key: str) -> ColumnDefinition:
        return self._definitions.get_or_compute(key, self.build)

    def build(self, key: str) -> ColumnDefinition:
        """
        Builds a fresh column definition for ``key``.

        Label and options are only looked up for keys owned by the flexible attribute
        store. Empty entries are left out of the constructor arguments.
        """
        column_type = self._type_resolver.column_type(key)
        label = None
        options = None
        if self._catalog.provenance(key) is Provenance.CUSTOM:
            record_type = self._record_type()
            label = self._attributes.label(record_type, key)
            options = self._options(record_type, key)

        arguments = {"key": key, "type": column_type}
        arguments.update({name: value for name, value in (("label", label), ("options", options)) if value})
        logger.debug("Built column definition for '%s' with type '%s'", key, column_type)
        return self._factory.create(arguments)

    def _options(self, record_type: Any, key: str) -> List[Dict[str, Any]]:
        options = self._attributes.options(record_type, key)
        return [option for option in options if option.get("value") != ""]
