"""
どこで: `engine.playback` の再生/シーク制御。
何を: 外部アニメーションハンドルへの play/pause/reverse/seek 指示と、ポインタドラッグによる
      スクラブを 1 つの状態機械 `PlaybackController` にまとめる。
なぜ: UI 再描画を跨いで保持されるハンドルを、寿命（構築→teardown）の明確な 1 インスタンスへ
      閉じ込め、二重 pause やシーク換算のずれを防ぐため。

状態遷移:
- `IDLE → PLAYING ⇄ PAUSED`
- `SEEKING` はポインタ押下で入り、離すと抜ける一時状態（抜けた後は PAUSED）。
  押下時は必ず先に pause を発行し、その後に seek を発行する。
- ドラッグ終了で自動再生はしない（再開は明示の `play()`）。

シーク換算:
- スクラブバー幅 W、全長 D（行割り当ての `end` 最大値）に対し
  `seek(clamp(x / W, 0, 1) * D)`。範囲外は境界へ丸め、例外にしない。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, Sequence

from engine.core.frame_clock import FrameClock
from engine.timeline.intervals import Interval, RowAssignment, total_duration

from .handle import AnimationHandle, EngineUnavailableError

if TYPE_CHECKING:
    from .progress import ProgressPoller

logger = logging.getLogger(__name__)


class PlaybackMode(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    SEEKING = "seeking"


@dataclass
class PlaybackState:
    """コントローラ専有の再生状態（外部にはコピーのみ渡す）。"""

    mode: PlaybackMode = PlaybackMode.IDLE
    current_time: float = 0.0
    dragging: bool = False


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


class PlaybackController:
    """外部アニメーションハンドルとスクラブバーを仲介する状態機械。

    Parameters
    ----------
    engine : AnimationHandle | None
        設定済みのハンドル。`None` の場合は操作時に `EngineUnavailableError`。
    duration : float
        タイムライン全長 D [ms]。
    bar_width : float
        スクラブバーの幅 W [px]。
    """

    def __init__(
        self,
        engine: AnimationHandle | None,
        *,
        duration: float,
        bar_width: float,
    ) -> None:
        self._engine = engine
        self._duration = max(0.0, float(duration))
        self._bar_width = float(bar_width)
        self._state = PlaybackState()
        self._pollers: list[ProgressPoller] = []

    @classmethod
    def from_assignments(
        cls,
        engine: AnimationHandle | None,
        assignments: Sequence[RowAssignment | Interval],
        *,
        bar_width: float,
    ) -> "PlaybackController":
        """行詰め結果から全長 D を求めて構築する。"""
        return cls(engine, duration=total_duration(assignments), bar_width=bar_width)

    # ── 読み取り ─────────────────────
    @property
    def state(self) -> PlaybackState:
        return replace(self._state)

    @property
    def mode(self) -> PlaybackMode:
        return self._state.mode

    @property
    def current_time(self) -> float:
        return self._state.current_time

    @property
    def dragging(self) -> bool:
        return self._state.dragging

    @property
    def is_seeking(self) -> bool:
        return self._state.mode is PlaybackMode.SEEKING

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def bar_width(self) -> float:
        return self._bar_width

    @property
    def has_engine(self) -> bool:
        return self._engine is not None

    def set_bar_width(self, width: float) -> None:
        """スクラブバーのリサイズを反映する。"""
        self._bar_width = float(width)

    def _require_engine(self, operation: str) -> AnimationHandle:
        if self._engine is None:
            raise EngineUnavailableError(operation)
        return self._engine

    # ── トランスポート ─────────────────
    def play(self) -> None:
        """再生中でなければ先頭から再生し直す（restart）。"""
        engine = self._require_engine("play")
        if self._state.mode is PlaybackMode.PLAYING:
            return
        engine.restart()
        self._state.mode = PlaybackMode.PLAYING
        self._state.dragging = False
        logger.debug("PlaybackController: play (restart)")

    def pause(self) -> None:
        engine = self._require_engine("pause")
        engine.pause()
        self._state.mode = PlaybackMode.PAUSED
        self._state.dragging = False
        logger.debug("PlaybackController: pause at %.3f", self._state.current_time)

    def reverse(self) -> None:
        """時間方向だけを反転する（モードは変えない）。"""
        engine = self._require_engine("reverse")
        engine.reverse()
        logger.debug("PlaybackController: reverse")

    # ── スクラブ ───────────────────────
    def seek_time_for(self, x: float) -> float:
        """ポインタ x [px] をシーク時刻 [ms] に換算する（0..D に丸め）。"""
        if self._bar_width <= 0:
            return 0.0
        return _clamp01(float(x) / self._bar_width) * self._duration

    def _seek(self, engine: AnimationHandle, x: float) -> float:
        t = self.seek_time_for(x)
        engine.seek(t)
        self._state.current_time = t
        return t

    def on_pointer_down(self, x: float) -> None:
        engine = self._require_engine("pointer_down")
        self._state.mode = PlaybackMode.SEEKING
        self._state.dragging = True
        # pause は必ず seek より先
        engine.pause()
        t = self._seek(engine, x)
        logger.debug("PlaybackController: seek start x=%.1f -> %.3f", x, t)

    def on_pointer_move(self, x: float) -> None:
        if not (self._state.mode is PlaybackMode.SEEKING and self._state.dragging):
            return
        engine = self._require_engine("pointer_move")
        self._seek(engine, x)

    def on_pointer_up(self) -> None:
        if self._state.mode is not PlaybackMode.SEEKING:
            self._state.dragging = False
            return
        self._state.mode = PlaybackMode.PAUSED
        self._state.dragging = False
        logger.debug("PlaybackController: seek end at %.3f", self._state.current_time)

    # ── 進捗 ───────────────────────────
    def progress(self) -> float:
        """最後に把握した `current_time / D`（D が 0 なら 0.0）。"""
        if self._duration <= 0:
            return 0.0
        return self._state.current_time / self._duration

    def sample(self) -> float:
        """ハンドルの現在時刻を読み取り、状態へ反映して進捗率を返す。"""
        engine = self._require_engine("sample")
        self._state.current_time = float(engine.current_time)
        return self.progress()

    def start_polling(
        self,
        clock: FrameClock | None = None,
        *,
        on_progress: Callable[[float], None] | None = None,
        start_clock: bool = True,
    ) -> "ProgressPoller":
        """フレームごとの進捗ポーリングを開始する。

        `clock` 省略時は新しい `FrameClock`（既定スケジューラ）を作る。
        返したポーラは `teardown()` でまとめて停止される。
        """
        from .progress import ProgressPoller

        clk = clock if clock is not None else FrameClock()
        poller = ProgressPoller(self, clk)
        if on_progress is not None:
            poller.subscribe(on_progress)
        clk.add(poller)
        if start_clock:
            clk.start()
        self._pollers.append(poller)
        logger.debug("PlaybackController: polling started")
        return poller

    def teardown(self) -> None:
        """ポーリングを止め、ハンドルを手放す（冪等）。"""
        for poller in self._pollers:
            poller.stop()
        self._pollers.clear()
        self._engine = None
        self._state.mode = PlaybackMode.IDLE
        self._state.dragging = False
        logger.debug("PlaybackController: teardown")


__all__ = ["PlaybackMode", "PlaybackState", "PlaybackController"]
