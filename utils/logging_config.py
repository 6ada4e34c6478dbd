"""
日志配置

Streamlit 每次交互都会重跑脚本，setup_logging() 必须可重复调用：
每次先清空 handler 再挂载，避免日志重复输出。
"""
from __future__ import annotations

import logging
from typing import Optional

from config import load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 业务日志统一挂在这些 logger 下
APP_LOGGERS = ("app", "services", "screens")


def setup_logging(level: Optional[str] = None) -> None:
    """
    配置应用日志（输出到 stderr）

    Args:
        level: 日志级别名；为空时读取 ATM_LOG_LEVEL
    """
    level_name = (level or load_settings().log_level).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        logger.handlers = []
        handler = logging.StreamHandler()
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
