"""
どこで: `api` 入口（高レベル公開 API）。
何を: 行列/ピボット・タイムライン行詰め・再生制御・アニメーションプリセットを再輸出。
なぜ: 利用者が単一名前空間から 変換合成 → タイムライン配置 → 再生制御 まで完結できるようにするため。

Usage:
    from api import BoundingBox, rotate, transform_origin_string

    box = BoundingBox(0, 0, 100, 50)
    el.set("transform", transform_origin_string(box, rotate(45), "50% 50%"))

    from api import Interval, pack_rows
    rows = [a.row for a in pack_rows([Interval(0, 300), Interval(100, 400), Interval(400, 600)])]
    # -> [0, 1, 0]
"""

from animations import AnimationSpec, animation, get_animation, list_animations
from animations import loop_for_repeat_count
from animations.pulse import pulse
from animations.shatter import ShatterPiece, ShatterPlan, shatter
from animations.spin import spin
from common.logging import setup_default_logging
from engine.core.frame_clock import FrameClock
from engine.core.matrix import (
    IDENTITY,
    Matrix,
    compose,
    multiply,
    rotate,
    scale,
    to_transform_string,
    translate,
)
from engine.core.origin import (
    BoundingBox,
    Point,
    compose_around_origin,
    resolve_origin,
    transform_origin_string,
)
from engine.playback import (
    AnimationHandle,
    EngineUnavailableError,
    PlaybackController,
    PlaybackMode,
    PlaybackState,
    ProgressPoller,
)
from engine.timeline import (
    Interval,
    RowAssignment,
    TimelineBar,
    TimelineBuilder,
    TimelineSegment,
    extract_intervals,
    layout_bars,
    max_concurrency,
    pack_rows,
    total_duration,
)

from .timeline_view import TimelineView

__all__ = [
    # 行列
    "Matrix",
    "IDENTITY",
    "multiply",
    "compose",
    "translate",
    "scale",
    "rotate",
    "to_transform_string",
    # ピボット
    "Point",
    "BoundingBox",
    "resolve_origin",
    "compose_around_origin",
    "transform_origin_string",
    # タイムライン
    "Interval",
    "RowAssignment",
    "pack_rows",
    "total_duration",
    "max_concurrency",
    "TimelineSegment",
    "TimelineBuilder",
    "extract_intervals",
    "TimelineBar",
    "layout_bars",
    "TimelineView",
    # 再生
    "AnimationHandle",
    "EngineUnavailableError",
    "PlaybackController",
    "PlaybackMode",
    "PlaybackState",
    "ProgressPoller",
    "FrameClock",
    # プリセット
    "AnimationSpec",
    "animation",
    "get_animation",
    "list_animations",
    "loop_for_repeat_count",
    "spin",
    "pulse",
    "shatter",
    "ShatterPiece",
    "ShatterPlan",
    # ロギング
    "setup_default_logging",
]

# バージョン情報
__version__ = "0.1.0"
