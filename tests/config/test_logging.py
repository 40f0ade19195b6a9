"""Testes para wavius.config.logging.

Cobre: configure_logging, get_logger, resolve_log_level, filters e formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from wavius.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    RedactSecretsFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    resolve_log_level,
)
from wavius.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("wavius.test", logging.INFO, __file__, 1, "msg", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_installs_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, RedactSecretsFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "wavius"


class TestResolveLogLevel:
    """Testes para resolve_log_level."""

    def test_resolves_names(self) -> None:
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level("ERROR") == logging.ERROR

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            resolve_log_level("trace")


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_returns_same_instance(self) -> None:
        assert get_logger("wavius.x") is get_logger("wavius.x")


class TestFilters:
    """Testes para os filters."""

    def test_correlation_filter_injects_fields(self) -> None:
        record = _record()
        CorrelationIdFilter("wavius", lambda: "corr-9").filter(record)
        assert record.correlation_id == "corr-9"
        assert record.service == "wavius"

    def test_correlation_filter_preserves_explicit_value(self) -> None:
        record = _record(correlation_id="explicit")
        CorrelationIdFilter("wavius", lambda: "corr-9").filter(record)
        assert record.correlation_id == "explicit"

    def test_correlation_filter_defaults_to_empty(self) -> None:
        record = _record()
        CorrelationIdFilter("wavius").filter(record)
        assert record.correlation_id == ""

    def test_redact_filter_masks_token(self) -> None:
        record = _record(token="abc", operation="send_message")
        assert RedactSecretsFilter().filter(record) is True
        assert record.token == "***"
        assert record.operation == "send_message"


class TestFormatter:
    """Testes para create_json_formatter."""

    def test_output_is_json_with_renamed_fields(self) -> None:
        record = _record(correlation_id="c1", service="wavius")
        output = json.loads(create_json_formatter().format(record))
        assert output["level"] == "INFO"
        assert output["logger"] == "wavius.test"
        assert output["message"] == "msg"
        assert output["service"] == "wavius"

    def test_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
