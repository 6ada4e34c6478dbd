"""测试夹具：干净的环境变量 + 新会话 + AppTest。"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from streamlit.testing.v1 import AppTest

from config import Settings
from services import Session, SessionController

APP_PATH = ROOT / "app.py"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> Iterable[None]:
    """屏蔽本机的 ATM_* 环境变量，保证默认账户。"""
    for name in ("ATM_PIN", "ATM_OPENING_BALANCE", "ATM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def session() -> Session:
    """未登录会话，PIN 12345，余额 100000。"""
    return SessionController.new_session(Settings())


@pytest.fixture
def logged_in(session: Session) -> Session:
    assert SessionController.login(session, "12345")
    return session


@pytest.fixture
def app() -> AppTest:
    """首轮已渲染的 AppTest（登录页）。"""
    at = AppTest.from_file(str(APP_PATH), default_timeout=10)
    return at.run()
