"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とスケジューラ登録/解除）。
なぜ: requestAnimationFrame 相当の協調ループを 1 箇所で管理し、破棄時に確実に止めるため。

スケジューラ:
- 既定は `pyglet.clock`（`schedule_interval(fn, interval)` / `unschedule(fn)`）。
- 同じ 2 メソッドを持つ任意オブジェクトを注入できる（テストやヘッドレス実行向け）。
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable

from common.settings import get as _get_settings

from .tickable import Tickable

logger = logging.getLogger(__name__)


class FrameClock:
    """登録された Tickable を固定順序で実行する小さなクラス。"""

    def __init__(self, tickables: Iterable[Tickable] = (), *, scheduler: Any | None = None):
        self._tickables: list[Tickable] = list(tickables)
        self._scheduler = scheduler
        self._scheduled_on: Any | None = None
        self._last_time = time.perf_counter()

    @property
    def running(self) -> bool:
        return self._scheduled_on is not None

    @property
    def tickables(self) -> tuple[Tickable, ...]:
        return tuple(self._tickables)

    def add(self, tickable: Tickable) -> None:
        """末尾に追加（同一オブジェクトの重複登録は無視）。"""
        if not any(t is tickable for t in self._tickables):
            self._tickables.append(tickable)

    def remove(self, tickable: Tickable) -> None:
        """登録解除（未登録なら何もしない）。"""
        self._tickables = [t for t in self._tickables if t is not tickable]

    # スケジューラから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()  # 手動駆動用
            dt = now - self._last_time
            self._last_time = now

        # tick 中の add/remove に備えてスナップショットを回す
        for t in tuple(self._tickables):
            t.tick(dt)

    def start(self, interval: float | None = None) -> None:
        """スケジューラに `tick` を登録する（既に動作中なら何もしない）。"""
        if self._scheduled_on is not None:
            return
        if interval is None:
            interval = _get_settings().FRAME_INTERVAL
        scheduler = self._scheduler
        if scheduler is None:
            import pyglet.clock

            scheduler = pyglet.clock
        self._last_time = time.perf_counter()
        scheduler.schedule_interval(self.tick, interval)
        self._scheduled_on = scheduler
        logger.debug("FrameClock: scheduled every %.4fs", interval)

    def stop(self) -> None:
        """スケジューラから `tick` を外す（冪等）。"""
        scheduler = self._scheduled_on
        if scheduler is None:
            return
        scheduler.unschedule(self.tick)
        self._scheduled_on = None
        logger.debug("FrameClock: unscheduled")
