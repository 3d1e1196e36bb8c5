# tests/config/test_logger.py
"""Testes do logger e do nível controlado pela variável DEBUG."""

import logging

from clean_config.logger import get_logger, resolve_log_level


def test_level_info_by_default(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    assert resolve_log_level() == logging.INFO


def test_level_debug_when_env_set(monkeypatch):
    monkeypatch.setenv("DEBUG", "1")
    assert resolve_log_level() == logging.DEBUG


def test_level_info_when_env_empty(monkeypatch):
    monkeypatch.setenv("DEBUG", "")
    assert resolve_log_level() == logging.INFO


def test_get_logger_configures_single_handler(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    logger = get_logger("clean_config.tests.single_handler")
    again = get_logger("clean_config.tests.single_handler")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
