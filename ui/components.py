"""
UI 原子组件库：纯渲染，无业务逻辑

所有方法只做 Streamlit 渲染，不做任何业务计算。
依赖方向：ui/ → config/（主题）+ utils/ + streamlit
"""
from __future__ import annotations

import html as _html
from contextlib import contextmanager
from typing import Any

import streamlit as st
from streamlit_extras.metric_cards import style_metric_cards

from config import BANK_NAME, BANK_TAGLINE
from config.theme import CARD_CSS, CARD_KEY, COLORS, GLOBAL_CSS, HEADER_KEY, METRIC_CARD_STYLE
from utils.currency import format_pkr, is_success_message


def _esc(text: Any) -> str:
    """防御性 HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


class UI:
    """
    原子级 UI 组件库

    使用示例::
        from ui import UI
        UI.inject_css()
        with UI.card():
            UI.header()
            ...
            UI.message(session.message)
    """

    # ── 全局样式注入 ──

    @staticmethod
    def inject_css():
        """注入全局 CSS + 卡片样式（每次渲染调用一次）"""
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
        st.markdown(CARD_CSS, unsafe_allow_html=True)

    # ── ATM 卡片 ──

    @staticmethod
    @contextmanager
    def card(key: str = CARD_KEY):
        """ATM 外框（白底圆角阴影）"""
        with st.container(key=key):
            yield

    @staticmethod
    def header(title: str = BANK_NAME, subtitle: str = BANK_TAGLINE):
        """绿色品牌标题栏"""
        with st.container(key=HEADER_KEY):
            st.markdown(
                f'<div style="font-size:1.6rem;font-weight:700;'
                f'color:{COLORS["text_header"]}">{_esc(title)}</div>'
                f'<div style="font-family:monospace;font-weight:200;'
                f'color:{COLORS["text_header"]}">{_esc(subtitle)}</div>',
                unsafe_allow_html=True,
            )

    @staticmethod
    def screen_title(title: str):
        """屏幕小标题"""
        st.markdown(f"### {title}")

    # ── 余额 ──

    @staticmethod
    def balance(value: float, label: str = "Current Balance"):
        """余额指标卡"""
        st.metric(label=label, value=format_pkr(value))
        style_metric_cards(**METRIC_CARD_STYLE)

    # ── 底部提示 ──

    @staticmethod
    def message(text: str):
        """成功文案绿色，其余红色；空文案不渲染"""
        if not text:
            return
        if is_success_message(text):
            st.success(text)
        else:
            st.error(text)
