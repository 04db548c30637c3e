import logging

import pytest

from pantrypal.utils import logging as logging_utils


@pytest.fixture
def root_logger(monkeypatch):
    monkeypatch.delenv("PANTRYPAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PANTRYPAL_DEBUG", raising=False)
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_log_level_env_wins_over_saved_preference(monkeypatch, root_logger):
    monkeypatch.setenv("PANTRYPAL_LOG_LEVEL", "warning")
    monkeypatch.setenv("PANTRYPAL_DEBUG", "1")

    assert logging_utils.configure_root() == logging.WARNING
    assert root_logger.level == logging.WARNING
    assert logging_utils.apply_saved_preference(True) == logging.WARNING


def test_numeric_log_level(monkeypatch, root_logger):
    monkeypatch.setenv("PANTRYPAL_LOG_LEVEL", "15")

    assert logging_utils.env_level() == 15


def test_debug_flag_forces_debug(monkeypatch, root_logger):
    monkeypatch.setenv("PANTRYPAL_DEBUG", "yes")

    assert logging_utils.env_level() == logging.DEBUG
    assert logging_utils.apply_saved_preference(False) == logging.DEBUG


def test_unknown_level_name_is_ignored(monkeypatch, root_logger):
    monkeypatch.setenv("PANTRYPAL_LOG_LEVEL", "chatty")

    assert logging_utils.env_level() is None
    assert logging_utils.configure_root() == logging.INFO


def test_saved_preference_without_env(root_logger):
    assert logging_utils.env_level() is None
    assert logging_utils.apply_saved_preference(True) == logging.DEBUG
    assert root_logger.level == logging.DEBUG
    assert logging_utils.apply_saved_preference(False) == logging.INFO
