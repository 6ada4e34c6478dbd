"""
ATM 会话数据模型

全部常驻内存，刷新页面（新会话）即重置，不落盘。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from config import BillPayee, Screen


@dataclass
class Account:
    """
    模拟账户

    单一记录：登录 PIN + 余额（PKR）。
    """

    pin: str
    balance: float

    def __post_init__(self):
        """数据验证"""
        if self.balance < 0:
            raise ValueError(f"余额不能为负: {self.balance}")


@dataclass
class PendingInput:
    """交易屏幕上尚未提交的输入"""

    amount: str = ""
    transfer_account: str = ""
    bill_payee: Optional[BillPayee] = None

    def __post_init__(self):
        if isinstance(self.bill_payee, str):
            self.bill_payee = BillPayee(self.bill_payee)

    def clear(self) -> None:
        self.amount = ""
        self.transfer_account = ""
        self.bill_payee = None

    @property
    def is_empty(self) -> bool:
        return not self.amount and not self.transfer_account and self.bill_payee is None


@dataclass
class TransactionResult:
    """
    一次交易尝试的结果

    ok=False 表示输入校验失败（余额不变），message 为展示文案。
    amount 为解析后的金额，解析失败时为 None。
    """

    ok: bool
    message: str
    amount: Optional[float] = None


@dataclass
class Session:
    """
    浏览器会话

    保存在 st.session_state 中，显式传给 SessionController 的每个方法。
    logged_in=False 时 screen 无意义，前端一律渲染登录页。
    """

    account: Account
    logged_in: bool = False
    screen: Screen = Screen.MAIN
    message: str = ""
    pending: PendingInput = field(default_factory=PendingInput)

    @property
    def balance(self) -> float:
        return self.account.balance
