"""
どこで: `animations` の共通データ型。
何を: 外部アニメーションエンジンへ渡す宣言的記述 `AnimationSpec` と、繰り返し回数→loop 変換、
      構成ファイル由来の既定値解決。
なぜ: プリセットはエンジンを直接触らず、値だけを返す純関数に保つため。

loop 変換（エンジンアダプタの外部契約としてそのまま保持）:
- `repeat_count == -1` → `True`（無限）
- `repeat_count == 1`  → `False`（往復なし・1 回）
- それ以外            → `2 * repeat_count - 1`（alternate 併用で往復サイクル数）
偶数/奇数での alternate との整合は未検証のため、式を「直さない」こと。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from util.utils import config_section


@dataclass(frozen=True)
class AnimationSpec:
    """1 つのアニメーション指示（エンジンのオプション辞書へ素直に写る）。"""

    transform: str
    duration: float
    delay: float = 0.0
    loop: bool | int = False
    alternate: bool = False
    ease: str = "linear"
    clip_overflow: bool = False

    def to_options(self) -> dict[str, Any]:
        """エンジン向けのオプション辞書（`clip_overflow` は描画側の指示なので含めない）。"""
        opts = asdict(self)
        opts.pop("clip_overflow")
        return opts


def loop_for_repeat_count(repeat_count: int) -> bool | int:
    if repeat_count == -1:
        return True
    if repeat_count == 1:
        return False
    return repeat_count * 2 - 1


def resolve_options(
    preset: str, builtin: Mapping[str, Any], explicit: Mapping[str, Any]
) -> dict[str, Any]:
    """既定値 → `configs/*.yaml` の `animations.<preset>` → 明示引数（None 以外）の順に上書き。"""
    merged = dict(builtin)
    cfg = config_section("animations", preset)
    for key in builtin:
        if key in cfg and cfg[key] is not None:
            merged[key] = cfg[key]
    for key, value in explicit.items():
        if value is not None:
            merged[key] = value
    return merged


__all__ = ["AnimationSpec", "loop_for_repeat_count", "resolve_options"]
