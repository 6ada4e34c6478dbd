"""余额查询"""
from services import Session
from ui import UI

from .common import back_button


def render(session: Session):
    UI.balance(session.balance)
    back_button(session)
