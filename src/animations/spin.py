"""
spin プリセット（回転＋平行移動＋スケールの合成）

- 合成順は `rotate ∘ translate(x, y) ∘ scale`（scale が最初に作用）。
- ピボットは使わない（要素のローカル原点まわり）。はみ出しを隠すため `clip_overflow=True`。
- `repeat_count != 1` のとき往復（alternate）し、loop は `loop_for_repeat_count` に従う。

パラメータ（省略時は configs の `animations.spin`、それも無ければ下記既定）:
- rotate: 回転角 [deg]（360）
- x, y: 平行移動（0, 0）
- scale: 一様スケール（1）
- duration / delay: [ms]（1000 / 0）
- repeat_count: -1 で無限（1）
- ease: イージング名（"out(1)"）
"""

from __future__ import annotations

from engine.core.matrix import compose, rotate as rotate_matrix, scale as scale_matrix
from engine.core.matrix import to_transform_string, translate

from .registry import animation
from .spec import AnimationSpec, loop_for_repeat_count, resolve_options

DEFAULTS = {
    "rotate": 360.0,
    "x": 0.0,
    "y": 0.0,
    "scale": 1.0,
    "duration": 1000.0,
    "delay": 0.0,
    "repeat_count": 1,
    "ease": "out(1)",
}


@animation()
def spin(
    *,
    rotate: float | None = None,
    x: float | None = None,
    y: float | None = None,
    scale: float | None = None,
    duration: float | None = None,
    delay: float | None = None,
    repeat_count: int | None = None,
    ease: str | None = None,
) -> AnimationSpec:
    o = resolve_options(
        "spin",
        DEFAULTS,
        dict(
            rotate=rotate,
            x=x,
            y=y,
            scale=scale,
            duration=duration,
            delay=delay,
            repeat_count=repeat_count,
            ease=ease,
        ),
    )
    m = compose(
        rotate_matrix(o["rotate"]),
        translate(o["x"], o["y"]),
        scale_matrix(o["scale"], o["scale"]),
    )
    n = int(o["repeat_count"])
    return AnimationSpec(
        transform=to_transform_string(m),
        duration=float(o["duration"]),
        delay=float(o["delay"]),
        loop=loop_for_repeat_count(n),
        alternate=n != 1,
        ease=str(o["ease"]),
        clip_overflow=True,
    )
