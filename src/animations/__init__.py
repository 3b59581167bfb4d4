"""
どこで: `animations` パッケージ（関数ベース）。
何を: 外部アニメーションエンジン向けの宣言的プリセットを登録し、`api` から利用可能にする。
なぜ: 変換計算（engine.core）と再生制御（engine.playback）から、演出の定義を分離するため。
"""

# プリセットを登録
from . import pulse  # noqa: F401
from . import shatter  # noqa: F401
from . import spin  # noqa: F401
from .registry import animation, get_animation, list_animations
from .spec import AnimationSpec, loop_for_repeat_count

__all__ = [
    "animation",
    "get_animation",
    "list_animations",
    "AnimationSpec",
    "loop_for_repeat_count",
]
