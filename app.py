#!/usr/bin/env python3
"""
BANK AL-BADAR ATM - Streamlit 单页模拟 ATM

运行：streamlit run app.py
"""
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).parent))

from config import PAGE_CONFIG
from screens import render_screen
from services import Session, SessionController
from ui import UI
from utils.logging_config import setup_logging

SESSION_KEY = "atm_session"

st.set_page_config(**PAGE_CONFIG)
setup_logging()


def get_session() -> Session:
    """每个浏览器会话一个账户，首次访问时创建"""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SessionController.new_session()
    return st.session_state[SESSION_KEY]


def main():
    """主应用"""
    session = get_session()
    UI.inject_css()
    with UI.card():
        UI.header()
        render_screen(session)
        UI.message(session.message)


if __name__ == "__main__":
    main()
