"""
ATM 常量：Single Source of Truth

本文件是整个系统中关于「屏幕」「交易类型」「缴费对象」「提示文案」的唯一定义处。
任何新增/修改操作类型都只改这一个文件。
"""
from enum import Enum
from typing import Dict, List, Tuple

# ═══════════════════════════════════════════════════════
#  Streamlit 页面配置
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="BANK AL-BADAR ATM",
    page_icon="🏧",
    layout="centered",
    initial_sidebar_state="collapsed",
)

BANK_NAME: str = "BANK AL-BADAR ATM"
BANK_TAGLINE: str = "Your Complete Internet Banking Solution"

# ═══════════════════════════════════════════════════════
#  模拟账户（可被环境变量覆盖，见 config/settings.py）
# ═══════════════════════════════════════════════════════

DEFAULT_PIN: str = "12345"
DEFAULT_BALANCE: float = 100000  # 100,000 PKR

CURRENCY_SYMBOL: str = "₨"

# 快速取款金额（PKR）
FAST_CASH_OPTIONS: Tuple[int, ...] = (1000, 2000, 5000, 10000, 20000, 25000)


# ═══════════════════════════════════════════════════════
#  屏幕：登录后的导航状态
# ═══════════════════════════════════════════════════════

class Screen(str, Enum):
    """
    登录后的屏幕（互斥）

    未登录时不看 Screen，一律渲染登录页。
    """
    MAIN         = "main"
    FAST_CASH    = "fastCash"
    WITHDRAWAL   = "withdrawal"
    DEPOSIT      = "deposit"
    TRANSFER     = "transfer"
    BALANCE      = "balance"
    BILL_PAYMENT = "billPayment"


# ═══════════════════════════════════════════════════════
#  交易类型
# ═══════════════════════════════════════════════════════

class TransactionKind(str, Enum):
    """
    余额变动操作

    - WITHDRAW:     取款（含快速取款）
    - DEPOSIT:      存款
    - TRANSFER:     转账，需收款账号
    - BILL_PAYMENT: 缴费，需选择缴费对象
    """
    WITHDRAW     = "withdraw"
    DEPOSIT      = "deposit"
    TRANSFER     = "transfer"
    BILL_PAYMENT = "billPayment"


# 扣款类操作：金额超过余额时拒绝
DEBIT_KINDS = frozenset({
    TransactionKind.WITHDRAW,
    TransactionKind.TRANSFER,
    TransactionKind.BILL_PAYMENT,
})


class BillPayee(str, Enum):
    """缴费对象（固定列表）"""
    ELECTRICITY = "Electricity"
    WATER       = "Water"
    INTERNET    = "Internet"
    PHONE       = "Phone"


BILL_PAYEES: List[str] = [p.value for p in BillPayee]


# 交易屏幕 → (标题, 交易类型)
TRANSACTION_SCREENS: Dict[Screen, Tuple[str, TransactionKind]] = {
    Screen.WITHDRAWAL:   ("Cash Withdrawal", TransactionKind.WITHDRAW),
    Screen.DEPOSIT:      ("Deposit", TransactionKind.DEPOSIT),
    Screen.TRANSFER:     ("Transfer", TransactionKind.TRANSFER),
    Screen.BILL_PAYMENT: ("Pay Bills", TransactionKind.BILL_PAYMENT),
}

# 主菜单按钮顺序
MAIN_MENU: List[Tuple[str, Screen]] = [
    ("Fast Cash", Screen.FAST_CASH),
    ("Cash Withdrawal", Screen.WITHDRAWAL),
    ("Deposit", Screen.DEPOSIT),
    ("Transfer", Screen.TRANSFER),
    ("Check Balance", Screen.BALANCE),
    ("Pay Bills", Screen.BILL_PAYMENT),
]


# ═══════════════════════════════════════════════════════
#  提示文案
# ═══════════════════════════════════════════════════════

# 成功文案统一以此开头，前端据此决定颜色
SUCCESS_MARKER: str = "Successfully"

MSG_INCORRECT_PIN: str = "Incorrect PIN. Please try again."
MSG_INVALID_AMOUNT: str = "Please enter a valid amount."
MSG_INVALID_ACCOUNT: str = "Please enter a valid account number."
MSG_NO_PAYEE: str = "Please select a bill payee."

MSG_INSUFFICIENT: Dict[TransactionKind, str] = {
    TransactionKind.WITHDRAW:     "Insufficient funds.",
    TransactionKind.TRANSFER:     "Insufficient funds for transfer.",
    TransactionKind.BILL_PAYMENT: "Insufficient funds for bill payment.",
}
