"""Logging Setup Tests."""

import logging

import pytest
import structlog

from netbox_config.settings import Settings
from netbox_obs.logging import build_processors, service_context, setup_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    saved = structlog.get_config()
    levels = {name: logging.getLogger(name).level for name in ("uvicorn.access", "sqlalchemy.engine")}
    yield
    structlog.configure(**saved)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_service_context_binds_service_and_environment():
    processor = service_context(Settings(OTEL_SERVICE_NAME="catalog-test", ENVIRONMENT="staging"))
    event = processor(None, "info", {"event": "tool_created"})
    assert event == {"event": "tool_created", "service": "catalog-test", "environment": "staging"}


def test_service_context_keeps_bound_values():
    processor = service_context(Settings(ENVIRONMENT="production"))
    event = processor(None, "info", {"event": "seeded", "service": "seeder"})
    assert event["service"] == "seeder"
    assert event["environment"] == "production"


@pytest.mark.parametrize(
    "log_format,renderer",
    [("json", structlog.processors.JSONRenderer), ("text", structlog.dev.ConsoleRenderer)],
)
def test_renderer_follows_log_format(log_format, renderer):
    processors = build_processors(Settings(LOG_FORMAT=log_format))
    assert isinstance(processors[-1], renderer)


def test_setup_logging_quiets_access_and_sql_logs():
    setup_logging(Settings(DB_ECHO=False))
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    setup_logging(Settings(DB_ECHO=True))
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


def test_setup_logging_installs_service_context():
    settings = Settings(OTEL_SERVICE_NAME="catalog-test", LOG_FORMAT="json")
    setup_logging(settings)
    assert any(
        getattr(processor, "__name__", "") == "add_service_context"
        for processor in structlog.get_config()["processors"]
    )
