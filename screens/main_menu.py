"""主菜单：六个业务入口 + 登出"""
import streamlit as st

from config import MAIN_MENU
from services import Session, SessionController

from .transaction import reset_inputs


def _on_logout(session: Session):
    SessionController.logout(session)
    reset_inputs()


def render(session: Session):
    cols = st.columns(2)
    for i, (label, screen) in enumerate(MAIN_MENU):
        cols[i % 2].button(
            label, key=f"nav_{screen.value}",
            on_click=SessionController.navigate, args=(session, screen))
    st.button("Logout", key="btn_logout", type="primary",
              on_click=_on_logout, args=(session,))
