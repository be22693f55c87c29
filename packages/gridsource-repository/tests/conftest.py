import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

ROOT = Path(__file__).resolve().parents[3]
REPOSITORY_SRC = ROOT / "packages" / "gridsource-repository" / "src"
SDK_SRC = ROOT / "packages" / "gridsource-sdk" / "src"

for path in (REPOSITORY_SRC, SDK_SRC):
    sys.path.insert(0, str(path))

from gridsource_sdk import ColumnDefinition  # noqa: E402
from gridsource_repository import (  # noqa: E402
    AttributeKeyCatalog,
    ColumnDefinitionBuilder,
    TypeResolver,
    ValueExtractor,
)

RECORD_TYPE = "Product"
EXTENSION_TYPE = "ProductExtension"


@pytest.fixture
def make_parts():
    """
    Returns a builder wiring the engine components over mocked collaborators.

    Native and extension field types are reported as ``"native:<key>"`` and
    ``"extension:<key>"``; the mocked guesser passes raw types through unchanged
    and maps None to ``"unknown"``.
    """

    def build(native=(), extension=None, custom=(), backend_types=None, labels=None, options=None):
        backend_types = backend_types or {}
        labels = labels or {}
        options = options or {}

        record_type = MagicMock(return_value=RECORD_TYPE)

        accessors = MagicMock()
        accessors.field_names.side_effect = (
            lambda t: list(native) if t == RECORD_TYPE else list(extension or ())
        )
        accessors.field_type.side_effect = lambda t, k: f"native:{k}"

        extensions = MagicMock()
        extensions.for_type.return_value = EXTENSION_TYPE if extension is not None else None
        extensions.field_type.side_effect = lambda t, k: f"extension:{k}"

        attributes = MagicMock()
        attributes.field_names.return_value = list(custom)
        attributes.backend_type.side_effect = lambda t, k: backend_types.get(k)
        attributes.label.side_effect = lambda t, k: labels.get(k)
        attributes.options.side_effect = lambda t, k: list(options.get(k, []))

        guesser = MagicMock()
        guesser.type_to_type_code.side_effect = lambda raw: raw if raw is not None else "unknown"

        factory = MagicMock()
        factory.create.side_effect = ColumnDefinition.create

        catalog = AttributeKeyCatalog(record_type, accessors, extensions, attributes)
        resolver = TypeResolver(record_type, catalog, accessors, extensions, attributes, guesser)
        columns = ColumnDefinitionBuilder(record_type, catalog, resolver, attributes, factory)
        extractor = ValueExtractor(record_type, catalog, columns, accessors, extensions, attributes)

        return SimpleNamespace(
            record_type=record_type,
            accessors=accessors,
            extensions=extensions,
            attributes=attributes,
            guesser=guesser,
            factory=factory,
            catalog=catalog,
            resolver=resolver,
            columns=columns,
            extractor=extractor,
        )

    return build
