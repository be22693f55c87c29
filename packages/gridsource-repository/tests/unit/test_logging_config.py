import importlib
import json
import logging

from gridsource_repository.common.logger import JsonFormatter, configure_logging, get_logger, grid_context
from gridsource_repository.common.settings import Settings, setup_logging


class TestStructuredLogging:

    def test_json_formatter_includes_grid_name(self):
        # Arrange
        configure_logging(json_format=True)
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("test_json", logging.INFO, "path", 1, "fetched %d", (3,), None)

        # Act
        with grid_context("product_grid"):
            handler.filter(record)
            formatted_json = handler.formatter.format(record)

        # Assert
        data = json.loads(formatted_json)
        assert data["message"] == "fetched 3"
        assert data["grid_name"] == "product_grid"
        assert data["level"] == "INFO"

    def test_grid_name_is_cleared_outside_context(self):
        # Arrange
        configure_logging(json_format=True)
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("test_json", logging.INFO, "path", 1, "msg", {}, None)

        # Act
        with grid_context("product_grid"):
            pass
        handler.filter(record)
        data = json.loads(handler.formatter.format(record))

        # Assert
        assert "grid_name" not in data

    def test_text_format_and_named_loggers(self):
        # Arrange
        configure_logging(level="DEBUG", json_format=False)

        # Act
        logger = get_logger("gridsource_repository.catalog")

        # Assert
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert "%(grid_name)s" in root.handlers[0].formatter._fmt
        assert logger is logging.getLogger("gridsource_repository.catalog")


class TestHostOwnedLogging:

    def test_importing_package_keeps_host_root_handler(self):
        # Validates import-time neutrality because the grid layer hosting this package owns logging.
        # Arrange
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.WARNING)

        try:
            # Act
            import gridsource_repository
            importlib.reload(gridsource_repository.common.settings)

            # Assert
            assert host_handler in root.handlers
            assert root.level == logging.WARNING
        finally:
            root.removeHandler(host_handler)

    def test_setup_logging_applies_settings(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("GRIDSOURCE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GRIDSOURCE_LOG_JSON", "true")
        config = Settings()

        # Act
        setup_logging(config)

        # Assert
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
