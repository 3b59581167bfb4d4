"""
pulse プリセット（ピボット中心の拡大縮小の往復）

- 既定では要素の下端中央（"50% 100%"）を中心に `scale(sx, sy)` を効かせる。
- 常に往復（alternate）。loop は `2 * repeat_count - 1`（-1/1 の特別扱いはしない）。

パラメータ（省略時は configs の `animations.pulse`）:
- sx, sy: 倍率（1.1, 1.1）
- duration / delay: [ms]（300 / 0）
- repeat_count: 往復回数（3）
- ease: イージング名（"out(2)"）
- origin: ピボット（"50% 100%"）。ボックス左上隅基準。
"""

from __future__ import annotations

from engine.core.matrix import scale
from engine.core.origin import BoundingBox, transform_origin_string

from .registry import animation
from .spec import AnimationSpec, resolve_options

DEFAULTS = {
    "sx": 1.1,
    "sy": 1.1,
    "duration": 300.0,
    "delay": 0.0,
    "repeat_count": 3,
    "ease": "out(2)",
    "origin": "50% 100%",
}


@animation()
def pulse(
    box: BoundingBox,
    *,
    sx: float | None = None,
    sy: float | None = None,
    duration: float | None = None,
    delay: float | None = None,
    repeat_count: int | None = None,
    ease: str | None = None,
    origin: str | None = None,
) -> AnimationSpec:
    """`box` の origin まわりに拡大縮小を往復させる。

    Parameters
    ----------
    box : BoundingBox
        対象要素のバウンディングボックス（ローカル座標）。
    """
    o = resolve_options(
        "pulse",
        DEFAULTS,
        dict(
            sx=sx,
            sy=sy,
            duration=duration,
            delay=delay,
            repeat_count=repeat_count,
            ease=ease,
            origin=origin,
        ),
    )
    return AnimationSpec(
        transform=transform_origin_string(box, scale(o["sx"], o["sy"]), str(o["origin"])),
        duration=float(o["duration"]),
        delay=float(o["delay"]),
        loop=int(o["repeat_count"]) * 2 - 1,
        alternate=True,
        ease=str(o["ease"]),
    )
