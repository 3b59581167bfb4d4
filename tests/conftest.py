"""共通フィクスチャ。

- 乱数シード固定
- ダミーのアニメーションハンドル/スケジューラ
- 設定/構成ファイルの分離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings as _settings
from engine.core.origin import BoundingBox
from tests._utils.dummies import FakeHandle, FakeScheduler


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def handle() -> FakeHandle:
    return FakeHandle()


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def box() -> BoundingBox:
    return BoundingBox(0.0, 0.0, 100.0, 50.0)


@pytest.fixture()
def env_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を書き換えて `reload_from_env()` し、終了後に既定へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    _settings.reload_from_env()
