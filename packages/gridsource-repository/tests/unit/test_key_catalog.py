from gridsource_repository import Provenance


def test_all_keys_scans_custom_then_extension_then_native(make_parts):
    # Validates column ordering because grids render columns in catalog order.
    # Arrange
    parts = make_parts(native=["name", "sku"], extension=["weight"], custom=["color", "size"])

    # Act
    keys = parts.catalog.all_keys()

    # Assert
    assert keys == ["color", "size", "weight", "name", "sku"]


def test_all_keys_collapses_duplicates_keeping_first_occurrence(make_parts):
    # Arrange
    parts = make_parts(native=["name", "color", "sku"], extension=["sku", "weight"], custom=["color"])

    # Act
    keys = parts.catalog.all_keys()

    # Assert
    assert keys == ["color", "sku", "weight", "name"]
    assert len(keys) == len(set(keys))


def test_extension_keys_empty_without_extension_shape(make_parts):
    # Arrange
    parts = make_parts(native=["name"], extension=None)

    # Act
    keys = parts.catalog.extension_keys()

    # Assert
    assert keys == []
    parts.extensions.for_type.assert_called_once_with("Product")
    parts.accessors.field_names.assert_not_called()


def test_key_sets_are_computed_once(make_parts):
    # Validates caching because reflection is expensive and must not repeat per cell.
    # Arrange
    parts = make_parts(native=["name"], extension=["weight"], custom=["color"])

    # Act
    first = parts.catalog.all_keys()
    second = parts.catalog.all_keys()
    parts.catalog.native_keys()
    parts.catalog.custom_keys()
    parts.catalog.provenance("name")

    # Assert
    assert first == second
    assert parts.accessors.field_names.call_count == 2  # record type + extension shape
    assert parts.extensions.for_type.call_count == 1
    assert parts.attributes.field_names.call_count == 1


def test_returned_key_lists_do_not_leak_cache_state(make_parts):
    # Arrange
    parts = make_parts(native=["name"])

    # Act
    parts.catalog.all_keys().append("injected")

    # Assert
    assert parts.catalog.all_keys() == ["name"]


def test_provenance_prefers_native_over_extension_over_custom(make_parts):
    # Arrange
    parts = make_parts(
        native=["name", "shared"],
        extension=["shared", "weight", "both"],
        custom=["shared", "both", "color"],
    )

    # Act / Assert
    assert parts.catalog.provenance("name") is Provenance.NATIVE
    assert parts.catalog.provenance("shared") is Provenance.NATIVE
    assert parts.catalog.provenance("both") is Provenance.EXTENSION
    assert parts.catalog.provenance("weight") is Provenance.EXTENSION
    assert parts.catalog.provenance("color") is Provenance.CUSTOM
    assert parts.catalog.provenance("missing") is Provenance.UNKNOWN


def test_key_order_and_resolution_disagree_for_shared_names(make_parts):
    # A name present natively and as a custom attribute is placed by the custom
    # scan but typed and read through the native accessor.
    # Arrange
    parts = make_parts(native=["name", "color"], custom=["color"])

    # Act
    keys = parts.catalog.all_keys()
    provenance = parts.catalog.provenance("color")

    # Assert
    assert keys.index("color") < keys.index("name")
    assert provenance is Provenance.NATIVE
