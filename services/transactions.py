"""
交易处理：取款 / 存款 / 转账 / 缴费

校验顺序：
1. 金额必须为正的有限数
2. 扣款类操作：金额不得超过余额
3. 转账需收款账号；缴费需缴费对象

只在全部校验通过后修改余额；失败不抛异常，返回 ok=False 的结果。
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional, Union

from config import (
    DEBIT_KINDS,
    MSG_INSUFFICIENT,
    MSG_INVALID_ACCOUNT,
    MSG_INVALID_AMOUNT,
    MSG_NO_PAYEE,
    TransactionKind,
)
from utils.currency import format_pkr

from .models import Account, PendingInput, TransactionResult

logger = logging.getLogger(__name__)

AmountInput = Union[str, float, int, None]


# 只接受 ASCII 十进制写法；float() 额外接受的 "1_000"、全角/阿拉伯数字、"inf" 等一律视为非数字
_DECIMAL_RE = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


def parse_amount(raw: AmountInput) -> Optional[float]:
    """
    金额解析：非数字 / 非有限数 / ≤ 0 均返回 None

    预设金额（快速取款）直接传数字，输入框传字符串。
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        if not _DECIMAL_RE.fullmatch(raw):
            return None
        value = float(raw)
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class TransactionProcessor:
    """
    交易处理器

    所有方法为 @staticmethod，余额直接写回传入的 Account。
    """

    @staticmethod
    def apply(
        account: Account,
        kind: TransactionKind,
        raw_amount: AmountInput,
        pending: Optional[PendingInput] = None,
    ) -> TransactionResult:
        """
        校验并执行一笔交易

        Args:
            account:    被操作的账户（成功时余额被修改）
            kind:       交易类型
            raw_amount: 金额（字符串或数字）
            pending:    转账账号 / 缴费对象

        Returns:
            TransactionResult
        """
        kind = TransactionKind(kind)
        pending = pending or PendingInput()

        amount = parse_amount(raw_amount)
        if amount is None:
            logger.info("%s rejected: invalid amount %r", kind.value, raw_amount)
            return TransactionResult(ok=False, message=MSG_INVALID_AMOUNT)

        if kind in DEBIT_KINDS and amount > account.balance:
            logger.info("%s rejected: insufficient funds", kind.value)
            return TransactionResult(ok=False, message=MSG_INSUFFICIENT[kind], amount=amount)

        recipient = pending.transfer_account
        if kind is TransactionKind.TRANSFER and not recipient:
            return TransactionResult(ok=False, message=MSG_INVALID_ACCOUNT, amount=amount)

        if kind is TransactionKind.BILL_PAYMENT and pending.bill_payee is None:
            return TransactionResult(ok=False, message=MSG_NO_PAYEE, amount=amount)

        shown = format_pkr(amount)
        if kind is TransactionKind.WITHDRAW:
            account.balance -= amount
            message = f"Successfully withdrew {shown}"
        elif kind is TransactionKind.DEPOSIT:
            account.balance += amount
            message = f"Successfully deposited {shown}"
        elif kind is TransactionKind.TRANSFER:
            account.balance -= amount
            message = f"Successfully transferred {shown} to account {recipient}"
        else:
            account.balance -= amount
            message = f"Successfully paid {shown} to {pending.bill_payee.value}"

        logger.info("%s of %s applied", kind.value, shown)
        return TransactionResult(ok=True, message=message, amount=amount)
