"""Pytest configuration for graphql_config tests."""

import logging

import pytest
import structlog
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch):
    """Drop handlers installed by ``setup_logging`` after each test."""
    monkeypatch.delenv("GRAPHQL_CONFIG_LOG_DIR", raising=False)
    monkeypatch.delenv("GRAPHQL_CONFIG_ROOT", raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


@pytest.fixture
def write_config(tmp_path):
    """Return a helper writing *text* to ``tmp_path / name``."""

    def _write(text: str, name: str = ".graphqlconfig"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
