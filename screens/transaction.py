"""
交易页：取款 / 存款 / 转账 / 缴费共用一个表单

输入框的值只在点击确认时写入 session.pending；
提交后（无论成败）清空输入框。
确认按钮始终可点，非数字金额由 TransactionProcessor 拒绝。
"""
import streamlit as st

from config import BILL_PAYEES, TRANSACTION_SCREENS, TransactionKind
from services import PendingInput, Session, SessionController
from ui import UI

from .common import back_button

AMOUNT_KEY = "amount_input"
ACCOUNT_KEY = "transfer_account_input"
PAYEE_KEY = "bill_payee_input"


def reset_inputs():
    """删除输入控件状态，下次渲染回到空值"""
    for key in (AMOUNT_KEY, ACCOUNT_KEY, PAYEE_KEY):
        st.session_state.pop(key, None)


def _on_confirm(session: Session, kind: TransactionKind):
    session.pending = PendingInput(
        amount=st.session_state.get(AMOUNT_KEY) or "",
        transfer_account=st.session_state.get(ACCOUNT_KEY) or "",
        bill_payee=st.session_state.get(PAYEE_KEY),
    )
    SessionController.submit(session, kind)
    reset_inputs()


def render(session: Session):
    title, kind = TRANSACTION_SCREENS[session.screen]
    UI.screen_title(title)

    st.text_input(
        "Amount", placeholder="Enter amount",
        key=AMOUNT_KEY, label_visibility="collapsed")

    if kind is TransactionKind.TRANSFER:
        st.text_input(
            "Account number", placeholder="Enter account number",
            key=ACCOUNT_KEY, label_visibility="collapsed")

    if kind is TransactionKind.BILL_PAYMENT:
        st.selectbox(
            "Bill payee", BILL_PAYEES, index=None,
            placeholder="Select bill payee",
            key=PAYEE_KEY, label_visibility="collapsed")

    st.button(
        f"Confirm {title}", key="btn_confirm", type="primary",
        on_click=_on_confirm, args=(session, kind))
    back_button(session)
