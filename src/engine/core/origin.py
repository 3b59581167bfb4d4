"""
どこで: `engine.core` のピボット解決。
何を: transform-origin 風の文字列をバウンディングボックスに対して点へ解決し、
      「ピボットへ平行移動 → 変換 → 戻す」を 1 つの行列に合成する。
なぜ: 回転/スケールを要素の任意位置（下端中央など）を中心に効かせるため。

origin 文字列の書式:
- 空白区切りのトークン 1〜2 個（"50% 100%", "120", "10px 0"）。
- 1 個だけなら y にも同じトークンを使う。
- `N%`  → `box.x + box.width * N / 100`（y は height）
- `Npx` / `N` → `box.x + N`（y は box.y + N）

注意（重要）:
- パーセントも素の数値も「ボックス自身の原点（左上隅）」から測る。中心からではない。
  "0 0" はボックス左上、"50% 50%" が中心、"50% 100%" が下端中央。
- 不正トークンは例外にせず NaN になり、その後の行列計算へそのまま伝播する。
  NaN を許容できない呼び出し側は事前に検証すること。
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

from common.settings import get as _get_settings

from .matrix import Matrix, multiply, to_transform_string, translate

logger = logging.getLogger(__name__)

# parseFloat 相当: 先頭の数値部分のみを読む
_LEADING_FLOAT = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Point(NamedTuple):
    x: float
    y: float


class BoundingBox(NamedTuple):
    """要素のローカル座標系でのボックス（SVG `getBBox()` 相当）。"""

    x: float
    y: float
    width: float
    height: float


def parse_float(token: str) -> float:
    """JavaScript の `parseFloat` と同様に先頭の数値を読む。読めなければ NaN。"""
    m = _LEADING_FLOAT.match(token.strip())
    if m is None:
        return math.nan
    return float(m.group(0))


def _resolve_axis(token: str, start: float, size: float) -> float:
    if token.endswith("%"):
        return start + size * (parse_float(token) / 100.0)
    # "px" 付きと素の数値は同じ扱い（ユーザ単位のオフセット）
    return start + parse_float(token)


def resolve_origin(box: BoundingBox, origin_spec: str) -> Point:
    """origin 文字列をボックス基準の絶対座標に解決する。

    Parameters
    ----------
    box : BoundingBox
        対象要素のバウンディングボックス。
    origin_spec : str
        "50% 100%" / "120" / "10px 20px" など。

    Returns
    -------
    Point
        ピボット座標。解析できないトークンの軸は NaN。
    """
    parts = origin_spec.split()
    x_part = parts[0] if parts else ""
    y_part = parts[1] if len(parts) > 1 else x_part

    point = Point(
        _resolve_axis(x_part, float(box.x), float(box.width)),
        _resolve_axis(y_part, float(box.y), float(box.height)),
    )
    if (math.isnan(point.x) or math.isnan(point.y)) and _get_settings().WARN_ON_NAN_ORIGIN:
        logger.warning("origin %r resolved to NaN against %r", origin_spec, box)
    return point


def compose_around_origin(
    box: BoundingBox, transform: Matrix, origin_spec: str | None = None
) -> Matrix:
    """`transform` をピボット P 中心に効かせる行列を返す。

    `translate(P) ∘ transform ∘ translate(-P)`。変換は中央に置き、ピボットの平行移動が外側。
    `origin_spec` 省略時は設定 `DEFAULT_ORIGIN`（既定 "50% 50%"）。
    """
    spec = origin_spec if origin_spec is not None else _get_settings().DEFAULT_ORIGIN
    px, py = resolve_origin(box, spec)
    to_origin = translate(-px, -py)
    back = translate(px, py)
    return multiply(back, multiply(transform, to_origin))


def transform_origin_string(
    box: BoundingBox, transform: Matrix, origin_spec: str | None = None
) -> str:
    """`compose_around_origin` の結果を `matrix(...)` 文字列で返す（描画面へ直接渡せる）。"""
    return to_transform_string(compose_around_origin(box, transform, origin_spec))


__all__ = [
    "Point",
    "BoundingBox",
    "parse_float",
    "resolve_origin",
    "compose_around_origin",
    "transform_origin_string",
]
