"""
どこで: `engine.timeline` サブパッケージ。
何を: 区間抽出（extraction）・最小行詰め（intervals）・バー配置（layout）。
なぜ: 重なりうるタイムライン区間を、シーク換算と可視化に使える形へ整えるため。
"""

from .extraction import SegmentSource, TimelineBuilder, TimelineSegment, extract_intervals
from .intervals import (
    Interval,
    RowAssignment,
    max_concurrency,
    pack_rows,
    row_count,
    total_duration,
)
from .layout import TimelineBar, layout_bars

__all__ = [
    "Interval",
    "RowAssignment",
    "pack_rows",
    "total_duration",
    "row_count",
    "max_concurrency",
    "TimelineSegment",
    "SegmentSource",
    "extract_intervals",
    "TimelineBuilder",
    "TimelineBar",
    "layout_bars",
]
