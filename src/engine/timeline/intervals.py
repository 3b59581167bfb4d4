"""
どこで: `engine.timeline` の区間行詰め（interval partitioning）。
何を: 時間区間の列を、同一行で重ならない最小本数の表示行へ割り当てる。
なぜ: 区間が時間的に重なりうるタイムラインを、行の衝突なしに可視化するため。

アルゴリズム（貪欲・最適）:
1. `start` 昇順の安定ソート（同値は入力順）。
2. 行ごとに現在の終端 `end_time` を保持（初期は 0 行）。
3. 各区間について行を index 順に走査し、`end_time <= start` を満たす最初の行へ置く。
   端点が接するだけなら重なりとしない（半開区間 [start, end)）。無ければ新しい行を開く。
4. 選んだ行の `end_time` を `interval.end` に更新。
5. 出力は入力順（ソート順ではない）。

行数は任意の時刻で同時に有効な区間数の最大値（区間グラフのクリーク数）に一致する。
計算量は素朴な行走査で O(n·rows)。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class Interval:
    """時間区間 [start, end)（アニメーション時間単位、通常 ms）。"""

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Interval の start は end 以下である必要があります: {self.start} > {self.end}")

    @property
    def duration(self) -> float:
        return self.end - self.start

    def overlaps(self, other: "Interval") -> bool:
        """半開区間として重なるか（端点の接触は重なりではない）。"""
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class RowAssignment:
    """区間と割り当てられた行 index。"""

    interval: Interval
    row: int

    @property
    def start(self) -> float:
        return self.interval.start

    @property
    def end(self) -> float:
        return self.interval.end


def pack_rows(intervals: Iterable[Interval]) -> tuple[RowAssignment, ...]:
    """区間を最小本数の行へ詰める。出力は入力と同じ順序。

    空入力は空タプル。例外は送出しない。
    """
    items = list(intervals)
    if not items:
        return ()

    # sorted は安定ソート（同じ start は入力順を維持）
    order = sorted(range(len(items)), key=lambda i: items[i].start)
    row_ends: list[float] = []
    rows = [0] * len(items)

    for idx in order:
        iv = items[idx]
        chosen = -1
        for r, end_time in enumerate(row_ends):
            if end_time <= iv.start:
                chosen = r
                break
        if chosen < 0:
            chosen = len(row_ends)
            row_ends.append(iv.end)
        else:
            row_ends[chosen] = iv.end
        rows[idx] = chosen

    return tuple(RowAssignment(iv, r) for iv, r in zip(items, rows))


def total_duration(items: Iterable[Interval | RowAssignment]) -> float:
    """`end` の最大値（空なら 0.0）。シーク時刻換算の全長 D として使う。"""
    return max((float(it.end) for it in items), default=0.0)


def row_count(assignments: Sequence[RowAssignment]) -> int:
    """使われている行の本数。"""
    return len({a.row for a in assignments})


def max_concurrency(intervals: Iterable[Interval]) -> int:
    """任意の時刻で同時に有効な区間数の最大値（スイープライン）。

    同時刻では終了（-1）を開始（+1）より先に処理する（半開区間）。
    長さ 0 の区間は有効時間を持たないため数えない。
    """
    items = [iv for iv in intervals if iv.end > iv.start]
    if not items:
        return 0
    times = np.array(
        [iv.start for iv in items] + [iv.end for iv in items], dtype=np.float64
    )
    deltas = np.array([1] * len(items) + [-1] * len(items), dtype=np.int64)
    # lexsort は最後のキーが主キー: 時刻昇順、同時刻は delta 昇順（-1 が先）
    order = np.lexsort((deltas, times))
    running = np.cumsum(deltas[order])
    return int(running.max())


__all__ = [
    "Interval",
    "RowAssignment",
    "pack_rows",
    "total_duration",
    "row_count",
    "max_concurrency",
]
