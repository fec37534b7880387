"""Tests for logging setup"""

import logging

import pytest

from src.config import settings
from src.logging_config import build_logging_config, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging("INFO")


def test_level_defaults_to_settings(monkeypatch):
    """Test the application logger follows LOG_LEVEL when no level is passed"""
    # Arrange
    monkeypatch.setattr(settings, "LOG_LEVEL", "DEBUG")

    # Act
    setup_logging()

    # Assert
    assert logging.getLogger("src").level == logging.DEBUG


def test_explicit_level_wins_over_settings(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "DEBUG")

    setup_logging("warning")

    assert logging.getLogger("src").level == logging.WARNING


def test_sql_echo_only_at_debug():
    """Test SQLAlchemy statements are logged only when the application runs at DEBUG"""
    assert build_logging_config("DEBUG")["loggers"]["sqlalchemy.engine"]["level"] == "INFO"
    assert build_logging_config("INFO")["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
