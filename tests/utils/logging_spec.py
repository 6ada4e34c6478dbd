"""日志配置测试。"""
from __future__ import annotations

import logging

from utils.logging_config import APP_LOGGERS, setup_logging


def test_setup_logging_is_idempotent():
    """Streamlit 每次重跑都会调用，handler 不能累积。"""
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG


def test_setup_logging_reads_env(monkeypatch):
    monkeypatch.setenv("ATM_LOG_LEVEL", "warning")
    setup_logging()
    assert logging.getLogger("services").level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger("app").level == logging.INFO
