"""Tests for application logging setup."""

import logging

import pytest

from rearing.logging_config import LOG_LEVEL_ENV, configure_logging


@pytest.fixture(autouse=True)
def restore_rearing_level():
    package_logger = logging.getLogger("rearing")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


def test_explicit_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert configure_logging(level="debug").level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    package_logger = configure_logging()
    assert package_logger.name == "rearing"
    assert package_logger.level == logging.WARNING


def test_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert configure_logging().level == logging.INFO


def test_extra_loggers_follow_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    other = logging.getLogger("rearing_test_consumer")
    configure_logging(level="ERROR", extra_loggers=["rearing_test_consumer"])
    assert other.level == logging.ERROR
    other.setLevel(logging.NOTSET)


def test_module_loggers_inherit_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    buffer_logger = logging.getLogger("rearing.buffer")
    assert not configure_logging().isEnabledFor(logging.DEBUG)
    assert not buffer_logger.isEnabledFor(logging.DEBUG)

    configure_logging(level="DEBUG")
    assert buffer_logger.isEnabledFor(logging.DEBUG)
