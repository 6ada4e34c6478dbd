"""
配置包：常量 / 主题 / 环境设置

依赖方向：config/ 不引用任何其他业务包
"""
from .constants import (
    PAGE_CONFIG,
    BANK_NAME,
    BANK_TAGLINE,
    DEFAULT_PIN,
    DEFAULT_BALANCE,
    CURRENCY_SYMBOL,
    FAST_CASH_OPTIONS,
    Screen,
    TransactionKind,
    DEBIT_KINDS,
    BillPayee,
    BILL_PAYEES,
    TRANSACTION_SCREENS,
    MAIN_MENU,
    SUCCESS_MARKER,
    MSG_INCORRECT_PIN,
    MSG_INVALID_AMOUNT,
    MSG_INVALID_ACCOUNT,
    MSG_NO_PAYEE,
    MSG_INSUFFICIENT,
)
from .settings import Settings, load_settings

__all__ = [
    "PAGE_CONFIG",
    "BANK_NAME",
    "BANK_TAGLINE",
    "DEFAULT_PIN",
    "DEFAULT_BALANCE",
    "CURRENCY_SYMBOL",
    "FAST_CASH_OPTIONS",
    "Screen",
    "TransactionKind",
    "DEBIT_KINDS",
    "BillPayee",
    "BILL_PAYEES",
    "TRANSACTION_SCREENS",
    "MAIN_MENU",
    "SUCCESS_MARKER",
    "MSG_INCORRECT_PIN",
    "MSG_INVALID_AMOUNT",
    "MSG_INVALID_ACCOUNT",
    "MSG_NO_PAYEE",
    "MSG_INSUFFICIENT",
    "Settings",
    "load_settings",
]
