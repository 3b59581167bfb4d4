"""
どこで: `api.timeline_view`
何を: 区間抽出 → 行詰め → バー配置 → 再生コントローラ構築を 1 つのオブジェクトにまとめる。
なぜ: タイムライン UI 側が「セグメント源とハンドルを渡すだけ」で、行付きバーと
      スクラブ制御を同じ全長 D から得られるようにするため。

使用例:
    from api import TimelineBuilder, TimelineView

    tl = TimelineBuilder(default_duration=300).add(8, stagger=100).add(8, stagger=100)
    view = TimelineView.build(tl, engine=handle, bar_width=640)
    for bar in view.bars:
        ...  # bar.row, bar.left, bar.width, bar.color
    view.controller.on_pointer_down(320)  # 中央へシーク
    view.close()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from engine.playback.controller import PlaybackController
from engine.playback.handle import AnimationHandle
from engine.timeline.extraction import SegmentSource, TimelineSegment, extract_intervals
from engine.timeline.intervals import RowAssignment, pack_rows, row_count, total_duration
from engine.timeline.layout import TimelineBar, layout_bars

logger = logging.getLogger(__name__)


@dataclass
class TimelineView:
    assignments: tuple[RowAssignment, ...]
    bars: tuple[TimelineBar, ...]
    controller: PlaybackController

    @classmethod
    def build(
        cls,
        source: SegmentSource | Iterable[TimelineSegment],
        *,
        engine: AnimationHandle | None,
        bar_width: float,
        palette: Sequence[str] | None = None,
    ) -> "TimelineView":
        assignments = pack_rows(extract_intervals(source))
        bars = layout_bars(assignments, palette)
        controller = PlaybackController.from_assignments(engine, assignments, bar_width=bar_width)
        logger.debug(
            "TimelineView: %d intervals in %d rows, duration=%.1f",
            len(assignments),
            row_count(assignments),
            total_duration(assignments),
        )
        return cls(assignments=assignments, bars=bars, controller=controller)

    @property
    def rows(self) -> int:
        return row_count(self.assignments)

    @property
    def duration(self) -> float:
        return self.controller.duration

    def close(self) -> None:
        """コントローラを teardown する（ポーリング停止・ハンドル解放）。"""
        self.controller.teardown()


__all__ = ["TimelineView"]
