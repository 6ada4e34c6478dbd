"""工具函数：货币格式化 + 日志配置"""
from .currency import format_amount, format_pkr, is_success_message
from .logging_config import setup_logging

__all__ = [
    "format_amount",
    "format_pkr",
    "is_success_message",
    "setup_logging",
]
