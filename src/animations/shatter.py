"""
shatter プリセット（格子状に分割した破片の放射飛散）

- 対象ボックスを `rows × cols` の格子に分け、破片ごとに飛散方向と距離を乱数で決める。
  角度 φ ∈ [0, 2π)、距離 `100 + U[0,1) * 200`、移動量 `(cos φ, sin φ) * 距離`、回転は φ [deg]。
- 終端の変換は `translate(dx, dy) ∘ rotate(φ)` を `matrix(...)` 文字列で持つ。
- 要素の複製/除去は描画側の責務。ここでは破片の切り抜き矩形と飛散計画だけを返す。

乱数:
- numpy の `Generator` を使う。`seed` か `rng` を渡せば計画は再現可能。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from engine.core.matrix import compose, rotate, to_transform_string, translate
from engine.core.origin import BoundingBox

from .registry import animation
from .spec import resolve_options

DEFAULTS = {
    "rows": 8,
    "cols": 8,
    "duration": 1200.0,
}

MIN_DISTANCE = 100.0
DISTANCE_SPREAD = 200.0


@dataclass(frozen=True)
class ShatterPiece:
    row: int
    col: int
    clip: BoundingBox  # 破片の表示矩形（ボックスと同じ座標系）
    dx: float
    dy: float
    rotate_deg: float

    @property
    def content_offset(self) -> tuple[float, float]:
        """破片内で複製を置く位置（負方向へずらして自分の担当領域を見せる）。"""
        return (-self.col * self.clip.width, -self.row * self.clip.height)

    @property
    def end_transform(self) -> str:
        return to_transform_string(compose(translate(self.dx, self.dy), rotate(self.rotate_deg)))

    def keyframes(self) -> list[dict[str, Any]]:
        """開始/終了キーフレーム（不透明度 1 → 0）。"""
        return [
            {"transform": "matrix(1,0,0,1,0,0)", "opacity": 1},
            {"transform": self.end_transform, "opacity": 0},
        ]


@dataclass(frozen=True)
class ShatterPlan:
    pieces: tuple[ShatterPiece, ...]
    duration: float
    easing: str = "ease-out"
    fill: str = "forwards"

    def __len__(self) -> int:
        return len(self.pieces)


@animation()
def shatter(
    box: BoundingBox,
    *,
    rows: int | None = None,
    cols: int | None = None,
    duration: float | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> ShatterPlan:
    """`box` を破片に分割し、飛散計画を返す。

    Parameters
    ----------
    box : BoundingBox
        対象要素の矩形（ページ座標など、描画側が破片を置く座標系）。
    rows, cols : int
        縦/横の分割数（1 以上）。
    duration : float
        飛散時間 [ms]。
    seed : int | None
        乱数シード。`rng` 指定時は無視。
    rng : numpy.random.Generator | None
        乱数生成器を直接渡す場合。
    """
    o = resolve_options("shatter", DEFAULTS, dict(rows=rows, cols=cols, duration=duration))
    n_rows, n_cols = int(o["rows"]), int(o["cols"])
    if n_rows < 1 or n_cols < 1:
        raise ValueError(f"rows/cols は 1 以上である必要があります: rows={n_rows}, cols={n_cols}")

    gen = rng if rng is not None else np.random.default_rng(seed)
    piece_w = float(box.width) / n_cols
    piece_h = float(box.height) / n_rows

    # 破片ごとに (角度用, 距離用) の一様乱数を 1 組ずつ
    u = gen.random((n_rows * n_cols, 2))
    angles = u[:, 0] * 2.0 * math.pi
    distances = MIN_DISTANCE + u[:, 1] * DISTANCE_SPREAD

    pieces = []
    for k in range(n_rows * n_cols):
        r, c = divmod(k, n_cols)
        phi = float(angles[k])
        dist = float(distances[k])
        pieces.append(
            ShatterPiece(
                row=r,
                col=c,
                clip=BoundingBox(box.x + c * piece_w, box.y + r * piece_h, piece_w, piece_h),
                dx=math.cos(phi) * dist,
                dy=math.sin(phi) * dist,
                rotate_deg=phi * 180.0 / math.pi,
            )
        )
    return ShatterPlan(pieces=tuple(pieces), duration=float(o["duration"]))
