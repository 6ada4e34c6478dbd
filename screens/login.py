"""登录页：PIN 输入"""
import streamlit as st

from services import Session, SessionController

PIN_KEY = "pin_input"


def _on_login(session: Session):
    pin = st.session_state.get(PIN_KEY, "")
    if SessionController.login(session, pin):
        st.session_state.pop(PIN_KEY, None)


def render(session: Session):
    st.text_input(
        "PIN", type="password", placeholder="Enter PIN",
        key=PIN_KEY, label_visibility="collapsed")
    st.button("Login", key="btn_login", type="primary",
              on_click=_on_login, args=(session,))
