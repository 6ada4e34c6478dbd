"""
业务逻辑层：会话状态机 + 交易处理

架构规则：
- services/ → config/ + utils/（可以调用）
- 绝对禁止：services/ → ui/、services/ → screens/、services/ → streamlit
"""
from services.models import Account, PendingInput, Session, TransactionResult
from services.transactions import TransactionProcessor, parse_amount
from services.session import SessionController, SessionError

__all__ = [
    "Account",
    "PendingInput",
    "Session",
    "TransactionResult",
    "TransactionProcessor",
    "SessionController",
    "SessionError",
    "parse_amount",
]
