"""屏幕间共用的按钮"""
import streamlit as st

from services import Session, SessionController


def back_button(session: Session):
    """返回主菜单"""
    st.button("Back", key="btn_back", on_click=SessionController.back, args=(session,))
