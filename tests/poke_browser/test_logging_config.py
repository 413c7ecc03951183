import logging

import pytest
from pythonjsonlogger import jsonlogger

from poke_browser.logging_config import LOG_FORMAT_ENV, LOG_LEVEL_ENV, configure_logging


@pytest.fixture
def root_logger(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_json_is_default(root_logger):
    configure_logging()

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root_logger.level == logging.INFO


def test_plain_format_from_env(root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")

    configure_logging()

    formatter = root_logger.handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)


def test_force_format_wins_over_env(root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")

    configure_logging(force_format="json")

    assert isinstance(root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_level_from_argument_and_env(root_logger, monkeypatch):
    configure_logging(level=logging.DEBUG)
    assert root_logger.level == logging.DEBUG

    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    configure_logging()
    assert root_logger.level == logging.WARNING

    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    configure_logging()
    assert root_logger.level == logging.INFO


def test_repeated_calls_do_not_stack_handlers(root_logger):
    configure_logging()
    configure_logging()

    assert len(root_logger.handlers) == 1
