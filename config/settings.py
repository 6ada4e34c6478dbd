"""
环境设置：支持通过环境变量覆盖模拟账户

- ATM_PIN              登录 PIN（默认 12345）
- ATM_OPENING_BALANCE  初始余额（默认 100000）
- ATM_LOG_LEVEL        日志级别（默认 INFO）
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass

from .constants import DEFAULT_BALANCE, DEFAULT_PIN


@dataclass(frozen=True)
class Settings:
    pin: str = DEFAULT_PIN
    opening_balance: float = DEFAULT_BALANCE
    log_level: str = "INFO"


def _parse_balance(raw: str) -> float:
    """初始余额必须为非负有限数"""
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"ATM_OPENING_BALANCE 不是数字: {raw!r}") from None
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"ATM_OPENING_BALANCE 必须为非负数: {raw!r}")
    return value


def load_settings() -> Settings:
    """读取环境变量（每次调用都重新读取）。"""
    pin = os.getenv("ATM_PIN") or DEFAULT_PIN
    raw_balance = os.getenv("ATM_OPENING_BALANCE")
    balance = _parse_balance(raw_balance) if raw_balance else DEFAULT_BALANCE
    level = os.getenv("ATM_LOG_LEVEL", "INFO").upper()
    return Settings(pin=pin, opening_balance=balance, log_level=level)
