"""
どこで: `engine.timeline` のバー配置計算。
何を: 行割り当て済み区間を、全長 D に対する left/width のパーセントと色へ写像する。
なぜ: 描画側（DOM/キャンバス）が座標計算をせず、値をそのまま当てるだけで済むようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from util.utils import config_section

from .intervals import RowAssignment, total_duration

# configs/default.yaml が無い場合の配色
FALLBACK_PALETTE: tuple[str, ...] = (
    "#FF5733",
    "#33FF57",
    "#3357FF",
    "#FF33A1",
    "#A133FF",
    "#33FFF5",
    "#FF8F33",
    "#8FFF33",
)


@dataclass(frozen=True)
class TimelineBar:
    assignment: RowAssignment
    left: float  # [%]
    width: float  # [%]
    color: str

    @property
    def row(self) -> int:
        return self.assignment.row

    def css(self) -> dict[str, str]:
        """`left`/`width` を CSS 文字列で返す（例: {"left": "12.5%", ...}）。"""
        return {"left": f"{self.left}%", "width": f"{self.width}%", "background-color": self.color}


def default_palette() -> tuple[str, ...]:
    palette = config_section("timeline").get("palette")
    if isinstance(palette, list) and palette and all(isinstance(c, str) for c in palette):
        return tuple(palette)
    return FALLBACK_PALETTE


def layout_bars(
    assignments: Sequence[RowAssignment],
    palette: Sequence[str] | None = None,
) -> tuple[TimelineBar, ...]:
    """各区間のバー配置を入力順で返す。色は `palette[i % len(palette)]`。

    全長 D が 0 のときは left/width とも 0。
    """
    colors = tuple(palette) if palette else default_palette()
    total = total_duration(assignments)
    bars = []
    for i, a in enumerate(assignments):
        if total > 0:
            left = a.start / total * 100.0
            width = (a.end - a.start) / total * 100.0
        else:
            left = width = 0.0
        bars.append(TimelineBar(a, left, width, colors[i % len(colors)]))
    return tuple(bars)


__all__ = ["TimelineBar", "FALLBACK_PALETTE", "default_palette", "layout_bars"]
