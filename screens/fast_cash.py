"""快速取款：预设金额一键取款"""
import streamlit as st

from config import FAST_CASH_OPTIONS
from services import Session, SessionController
from ui import UI
from utils.currency import format_pkr

from .common import back_button


def render(session: Session):
    UI.screen_title("Fast Cash")
    cols = st.columns(2)
    for i, amount in enumerate(FAST_CASH_OPTIONS):
        cols[i % 2].button(
            format_pkr(amount), key=f"fast_cash_{amount}",
            on_click=SessionController.fast_cash, args=(session, amount))
    back_button(session)
