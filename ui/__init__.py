"""
UI 组件库：统一导出

依赖方向：ui/ → config/ + utils/ + streamlit
不引用 services/ / screens/
"""
from .components import UI

__all__ = ["UI"]
