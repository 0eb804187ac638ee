"""Unit tests for supra/core/logging module.

Tests structured logging configuration, logger creation and stage
context binding.
"""

from unittest.mock import MagicMock, patch

import structlog

import supra.core.logging as logging_module
from supra.core.logging import (
    add_service_context,
    configure_logging,
    get_logger,
    log_stage,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_development(self) -> None:
        """Test logging configuration for development environment."""
        with patch("supra.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.environment = "development"
            mock_settings.return_value.log_level = "DEBUG"

            with patch("supra.core.logging.structlog.configure") as mock_configure:
                logging_module._configured = False

                configure_logging()

                mock_configure.assert_called_once()
                processors = mock_configure.call_args.kwargs["processors"]
                assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging_production(self) -> None:
        """Test that production logs render as JSON."""
        with patch("supra.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.environment = "production"
            mock_settings.return_value.log_level = "INFO"

            with patch("supra.core.logging.structlog.configure") as mock_configure:
                logging_module._configured = False

                configure_logging()

                processors = mock_configure.call_args.kwargs["processors"]
                assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_logging_idempotent(self) -> None:
        """Test that a second call does not reconfigure."""
        with patch("supra.core.logging.structlog.configure") as mock_configure:
            logging_module._configured = False

            configure_logging()
            configure_logging()

            mock_configure.assert_called_once()

    def test_configure_logging_force(self) -> None:
        """Test that force=True reconfigures."""
        with patch("supra.core.logging.structlog.configure") as mock_configure:
            logging_module._configured = False

            configure_logging()
            configure_logging(force=True)

            assert mock_configure.call_count == 2


class TestAddServiceContext:
    """Tests for the service context processor."""

    def test_adds_service_and_environment(self) -> None:
        """Test that service name and environment are added."""
        with patch("supra.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.service_name = "supra"
            mock_settings.return_value.environment = "test"

            event = add_service_context(MagicMock(), "info", {"event": "hello"})

            assert event["service"] == "supra"
            assert event["environment"] == "test"
            assert event["event"] == "hello"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self) -> None:
        """Test getting a named logger."""
        with patch("supra.core.logging.structlog.get_logger") as mock_get:
            mock_logger = MagicMock()
            mock_get.return_value = mock_logger

            logger = get_logger("test_module")

            mock_get.assert_called_once_with("test_module")
            assert logger is mock_logger


class TestLogStage:
    """Tests for the log_stage context manager."""

    def test_binds_stage_inside_block(self) -> None:
        """Test that the stage is bound while the block runs."""
        with log_stage("lexer"):
            assert structlog.contextvars.get_contextvars()["stage"] == "lexer"

    def test_unbinds_stage_after_block(self) -> None:
        """Test that the stage binding is removed afterwards."""
        with log_stage("parser", run="abc"):
            pass

        context = structlog.contextvars.get_contextvars()
        assert "stage" not in context
        assert "run" not in context

    def test_unbinds_stage_on_error(self) -> None:
        """Test that the binding is removed even when the stage fails."""
        try:
            with log_stage("render"):
                raise ValueError("boom")
        except ValueError:
            pass

        assert "stage" not in structlog.contextvars.get_contextvars()
