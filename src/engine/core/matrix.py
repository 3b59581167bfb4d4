"""
2×3 アフィン行列（SVG `matrix(a,b,c,d,e,f)` 互換）のプリミティブ群。

データモデル:
- `Matrix(a, b, c, d, e, f)` は不変の 6 要素タプル。
- 同次座標での意味は次の 3×3 行列（列ベクトルに左から作用）::

      | a  c  e |
      | b  d  f |
      | 0  0  1 |

API 方針:
- すべて純関数（副作用ゼロ・例外なし）。新しい `Matrix` を返す。
- 入力検証は行わない。ゼロスケールや NaN もそのまま通す（呼び出し側で事前確認する）。
- `multiply(m1, m2)` は「m2 を適用してから m1 を適用」（m1 ∘ m2）。結合的だが可換ではない。

座標系:
- y 軸下向き（SVG/スクリーン）。`rotate(θ)` は正の角度で時計回りに見える。

使用例:
    from engine.core.matrix import rotate, scale, translate, compose, to_transform_string

    m = compose(translate(10, 0), rotate(90), scale(2))
    el.set("transform", to_transform_string(m))  # 描画面へ渡す
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np


class Matrix(NamedTuple):
    """2×3 アフィン行列（不変値）。"""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def as_array(self) -> np.ndarray:
        """同次座標の 3×3 `float64` 配列を返す。"""
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Matrix":
        """3×3（または 2×3）配列から `Matrix` を構築する。最下行は読まない。"""
        m = np.asarray(arr, dtype=np.float64)
        return cls(
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )


IDENTITY = Matrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def multiply(m1: Matrix, m2: Matrix) -> Matrix:
    """m1 ∘ m2（m2 → m1 の順に適用）を返す。

    |a1 c1 e1|   |a2 c2 e2|   |a1*a2+c1*b2  a1*c2+c1*d2  a1*e2+c1*f2+e1|
    |b1 d1 f1| x |b2 d2 f2| = |b1*a2+d1*b2  b1*c2+d1*d2  b1*e2+d1*f2+f1|
    |0  0  1 |   |0  0  1 |   |0            0            1             |
    """
    a1, b1, c1, d1, e1, f1 = m1
    a2, b2, c2, d2, e2, f2 = m2
    return Matrix(
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def compose(*matrices: Matrix) -> Matrix:
    """左畳み込みで合成する。`compose(A, B, C) == A ∘ B ∘ C`（C が最初に作用）。

    引数なしは恒等行列。
    """
    result = IDENTITY
    for m in matrices:
        result = multiply(result, m)
    return result


def translate(tx: float, ty: float) -> Matrix:
    return Matrix(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def scale(sx: float, sy: float | None = None) -> Matrix:
    """スケール行列。`sy` 省略時は `sx`（一様）。"""
    sx = float(sx)
    sy = sx if sy is None else float(sy)
    return Matrix(sx, 0.0, 0.0, sy, 0.0, 0.0)


def rotate(angle_deg: float) -> Matrix:
    """回転行列（度）。y 下向き座標系で正の角度が時計回り。"""
    rad = float(angle_deg) * math.pi / 180.0
    cos = math.cos(rad)
    sin = math.sin(rad)
    return Matrix(cos, sin, -sin, cos, 0.0, 0.0)


def apply_to_point(m: Matrix, x: float, y: float) -> tuple[float, float]:
    """単一点 (x, y) を変換する。"""
    return (m.a * x + m.c * y + m.e, m.b * x + m.d * y + m.f)


def apply_to_points(m: Matrix, points: np.ndarray) -> np.ndarray:
    """形状 (N, 2) の点列を一括変換して新しい配列を返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    linear = np.array([[m.a, m.c], [m.b, m.d]], dtype=np.float64)
    return pts @ linear.T + np.array([m.e, m.f], dtype=np.float64)


def _format_number(v: float) -> str:
    # ブラウザの Number→文字列 に寄せる（整数値は小数点なし、-0 は 0）
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v.is_integer() and abs(v) < 1e21:
        return str(int(v))
    return repr(v)


def to_transform_string(m: Matrix) -> str:
    """`matrix(a,b,c,d,e,f)` 文字列を返す（丸めなし・カンマ区切り）。"""
    return "matrix(" + ",".join(_format_number(float(v)) for v in m) + ")"


__all__ = [
    "Matrix",
    "IDENTITY",
    "multiply",
    "compose",
    "translate",
    "scale",
    "rotate",
    "apply_to_point",
    "apply_to_points",
    "to_transform_string",
]
