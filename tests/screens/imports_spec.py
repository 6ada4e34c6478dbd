"""屏幕模块导入与路由覆盖检查。"""
from __future__ import annotations

import importlib

from config import Screen


def _assert_render(module_path: str) -> None:
    mod = importlib.import_module(module_path)
    assert hasattr(mod, "render")
    assert callable(getattr(mod, "render"))


def test_screens_imports():
    """各屏幕可导入。"""
    for name in ("login", "main_menu", "fast_cash", "transaction", "balance"):
        _assert_render(f"screens.{name}")


def test_every_screen_has_renderer():
    from screens import SCREEN_RENDERERS

    assert set(SCREEN_RENDERERS) == set(Screen)
