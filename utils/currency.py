"""货币工具函数：卢比金额格式化、提示分类"""
from config import CURRENCY_SYMBOL, SUCCESS_MARKER


def format_amount(value: float) -> str:
    """
    千分位 + 最多 3 位小数，去掉末尾 0

    2000 → "2,000"，1234.5 → "1,234.5"，0.1 + 0.2 → "0.3"
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_pkr(value: float) -> str:
    """金额 → ₨2,000"""
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"


def is_success_message(message: str) -> bool:
    """成功文案判断（只用于前端配色，不参与业务分支）"""
    return SUCCESS_MARKER in message
