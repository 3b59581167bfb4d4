"""
どこで: `engine.playback` の進捗ポーリング。
何を: フレームごとにハンドルの現在時刻を読み、進捗率 `current_time / D` を購読者へ配る Tickable。
なぜ: エンジンは時刻をプッシュ通知しないため、協調ループで読み直してカーソル表示を駆動するため。

寿命:
- `stop()` 以降の `tick` は何もしない。所属クロックから外れ、他に Tickable が無ければクロックも止める。
- 停止し忘れてハンドルが外れた場合も例外にはせず、警告を 1 度だけ出して読み取りを省く。
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from engine.core.frame_clock import FrameClock

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


class ProgressSource(Protocol):
    @property
    def has_engine(self) -> bool: ...

    def sample(self) -> float: ...


class ProgressPoller:
    """`FrameClock` に登録して使う進捗読み出し。"""

    def __init__(self, source: ProgressSource, clock: FrameClock | None = None) -> None:
        self._source = source
        self._clock = clock
        self._callbacks: list[ProgressCallback] = []
        self._stopped = False
        self._warned_detached = False
        self._last: float | None = None

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def last_progress(self) -> float | None:
        """最後に配信した進捗率（未配信なら None）。"""
        return self._last

    def subscribe(self, callback: ProgressCallback) -> Callable[[], None]:
        """購読を登録し、解除関数を返す。"""
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def tick(self, dt: float) -> None:
        if self._stopped:
            return
        if not self._source.has_engine:
            if not self._warned_detached:
                logger.warning("ProgressPoller: handle detached while polling; call stop() on teardown")
                self._warned_detached = True
            return
        pct = self._source.sample()
        self._last = pct
        for cb in tuple(self._callbacks):
            cb(pct)

    def stop(self) -> None:
        """ポーリングを止める（冪等）。"""
        if self._stopped:
            return
        self._stopped = True
        self._callbacks.clear()
        clock = self._clock
        if clock is not None:
            clock.remove(self)
            if not clock.tickables:
                clock.stop()
        logger.debug("ProgressPoller: stopped")


__all__ = ["ProgressPoller", "ProgressSource", "ProgressCallback"]
