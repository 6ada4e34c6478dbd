"""
screens 包：ATM 各屏幕的视图层

每个屏幕只做：读 Session → 渲染控件 → 回调 SessionController
不直接改余额。
"""
from typing import Callable, Dict

from config import Screen
from services import Session

from . import balance, fast_cash, login, main_menu, transaction

SCREEN_RENDERERS: Dict[Screen, Callable[[Session], None]] = {
    Screen.MAIN:         main_menu.render,
    Screen.FAST_CASH:    fast_cash.render,
    Screen.WITHDRAWAL:   transaction.render,
    Screen.DEPOSIT:      transaction.render,
    Screen.TRANSFER:     transaction.render,
    Screen.BALANCE:      balance.render,
    Screen.BILL_PAYMENT: transaction.render,
}

_missing = set(Screen) - set(SCREEN_RENDERERS)
if _missing:
    raise RuntimeError(f"屏幕缺少渲染函数: {sorted(s.value for s in _missing)}")


def render_screen(session: Session):
    """未登录一律渲染登录页，否则按当前屏幕分发"""
    if not session.logged_in:
        login.render(session)
        return
    SCREEN_RENDERERS[session.screen](session)


__all__ = ["SCREEN_RENDERERS", "render_screen"]
