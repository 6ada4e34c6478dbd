"""
会话控制：登录 / 导航 / 提交交易 / 登出

状态机：
    LoggedOut ──login──▶ Main ──navigate──▶ {FastCash, Withdrawal, Deposit,
    Transfer, Balance, BillPayment} ──back──▶ Main ──logout──▶ LoggedOut

每次提交交易后（无论成败）都清空待提交输入。
"""
from __future__ import annotations

import logging
from typing import Optional

from config import (
    FAST_CASH_OPTIONS,
    MSG_INCORRECT_PIN,
    Screen,
    Settings,
    TransactionKind,
    load_settings,
)

from .models import Account, Session, TransactionResult
from .transactions import AmountInput, TransactionProcessor

logger = logging.getLogger(__name__)


class SessionError(RuntimeError):
    """未登录时执行了需要登录的操作"""


class SessionController:
    """
    会话控制器

    所有方法为 @staticmethod，直接修改传入的 Session。
    """

    @staticmethod
    def new_session(settings: Optional[Settings] = None) -> Session:
        """新建未登录会话（账户来自环境设置）"""
        settings = settings or load_settings()
        account = Account(pin=settings.pin, balance=settings.opening_balance)
        return Session(account=account)

    @staticmethod
    def login(session: Session, pin: str) -> bool:
        """PIN 校验；失败时写入提示并保持未登录"""
        if pin == session.account.pin:
            session.logged_in = True
            session.screen = Screen.MAIN
            session.message = ""
            logger.info("login succeeded")
            return True
        session.message = MSG_INCORRECT_PIN
        logger.warning("login failed: incorrect PIN")
        return False

    @staticmethod
    def logout(session: Session) -> None:
        """无条件登出，清空提示与待提交输入"""
        session.logged_in = False
        session.screen = Screen.MAIN
        session.message = ""
        session.pending.clear()
        logger.info("logged out")

    @staticmethod
    def navigate(session: Session, screen: Screen) -> None:
        """切换屏幕（未登录时忽略）"""
        if not session.logged_in:
            return
        session.screen = Screen(screen)

    @staticmethod
    def back(session: Session) -> None:
        SessionController.navigate(session, Screen.MAIN)

    @staticmethod
    def submit(
        session: Session,
        kind: TransactionKind,
        preset_amount: AmountInput = None,
    ) -> TransactionResult:
        """
        提交一笔交易

        Args:
            session:       已登录会话
            kind:          交易类型
            preset_amount: 预设金额（快速取款）；为空时使用输入框金额

        Raises:
            SessionError: 会话未登录
        """
        if not session.logged_in:
            raise SessionError("未登录，不能提交交易")

        raw = preset_amount if preset_amount is not None else session.pending.amount
        try:
            result = TransactionProcessor.apply(session.account, kind, raw, session.pending)
        finally:
            session.pending.clear()
        session.message = result.message
        return result

    @staticmethod
    def fast_cash(session: Session, amount: int) -> TransactionResult:
        """
        快速取款

        Raises:
            ValueError: 金额不在预设列表中
        """
        if amount not in FAST_CASH_OPTIONS:
            raise ValueError(f"快速取款金额必须为 {FAST_CASH_OPTIONS} 之一: {amount}")
        return SessionController.submit(session, TransactionKind.WITHDRAW, preset_amount=amount)
