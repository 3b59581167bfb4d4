"""テストで使うダミー協調者（アニメーションハンドル/フレームスケジューラ）。"""

from __future__ import annotations

from typing import Callable


class FakeHandle:
    """`AnimationHandle` の記録用ダミー。呼ばれた操作を `calls` に順に積む。"""

    def __init__(self, current_time: float = 0.0) -> None:
        self.calls: list[tuple] = []
        self._time = float(current_time)
        self.playing = False
        self.reversed = False

    @property
    def current_time(self) -> float:
        return self._time

    def advance(self, dt_ms: float) -> None:
        """再生を模して時刻を進める。"""
        self._time += -dt_ms if self.reversed else dt_ms

    def play(self) -> None:
        self.calls.append(("play",))
        self.playing = True

    def pause(self) -> None:
        self.calls.append(("pause",))
        self.playing = False

    def reverse(self) -> None:
        self.calls.append(("reverse",))
        self.reversed = not self.reversed

    def restart(self) -> None:
        self.calls.append(("restart",))
        self._time = 0.0
        self.playing = True

    def seek(self, time_ms: float) -> None:
        self.calls.append(("seek", time_ms))
        self._time = float(time_ms)

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


class FakeScheduler:
    """`pyglet.clock` 互換の最小スケジューラ。`fire(dt)` で登録関数を手動実行する。"""

    def __init__(self) -> None:
        self.scheduled: list[tuple[Callable[[float], None], float]] = []

    def schedule_interval(self, func: Callable[[float], None], interval: float) -> None:
        self.scheduled.append((func, interval))

    def unschedule(self, func: Callable[[float], None]) -> None:
        self.scheduled = [(f, i) for f, i in self.scheduled if f != func]

    def fire(self, dt: float = 1 / 60) -> None:
        for func, _ in tuple(self.scheduled):
            func(dt)
