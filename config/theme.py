"""
主题配置：颜色、CSS

所有视觉风格的唯一定义处。UI 组件只引用此文件。
"""
from typing import Any, Dict

# ═══════════════════════════════════════════════════════
#  颜色定义
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # 品牌色
    "primary":     "#16A34A",
    "danger":      "#DC2626",

    # 背景
    "bg_main":     "#E5E7EB",
    "bg_card":     "#FFFFFF",
    "bg_footer":   "#F3F4F6",

    # 文字
    "text":        "#4B5563",
    "text_header": "#FFFFFF",

    # 提示色
    "success":     "#15803D",
    "error":       "#B91C1C",
}


# ═══════════════════════════════════════════════════════
#  全局 CSS
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = f"""
<style>
    .stApp {{ background-color: {COLORS["bg_main"]}; }}
    .stButton > button {{ width: 100%; }}
    div[data-testid="stTextInput"] input {{ text-align: center; }}
</style>
"""


# ═══════════════════════════════════════════════════════
#  卡片样式（st.container(key=...) 会带上 .st-key-<key> 类）
# ═══════════════════════════════════════════════════════

CARD_KEY: str = "atm_card"
HEADER_KEY: str = "atm_header"

CARD_CSS: str = f"""
<style>
    .st-key-{CARD_KEY} {{
        background: {COLORS["bg_card"]};
        border-radius: 8px;
        box-shadow: 0 10px 25px rgba(0, 0, 0, 0.15);
        padding: 0 0 12px 0;
    }}
    .st-key-{HEADER_KEY} {{
        background: {COLORS["primary"]};
        color: {COLORS["text_header"]};
        border-radius: 8px 8px 0 0;
        padding: 18px 24px;
    }}
</style>
"""


# ═══════════════════════════════════════════════════════
#  metric_cards 样式参数（streamlit-extras）
# ═══════════════════════════════════════════════════════

METRIC_CARD_STYLE: Dict[str, Any] = {
    "background_color": "#FFFFFF",
    "border_color": "#D1D5DB",
    "border_left_color": COLORS["primary"],
    "box_shadow": True,
}
