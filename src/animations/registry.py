"""
どこで: `animations` のレジストリ層（関数専用）。
何を: `@animation` デコレータによるプリセット登録と取得/一覧/検査を提供（キーは正規化）。
なぜ: spin/pulse/shatter などのプリセットを名前で解決し、利用者が独自プリセットを足せるようにするため。

キー正規化:
- ハイフン → アンダースコア、キャメルケース → スネークケース、小文字化。
  例: "SlowSpin" → "slow_spin", "slow-spin" → "slow_spin"
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable

PresetFn = Callable[..., Any]

_registry: dict[str, PresetFn] = {}


def _normalize_key(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError("プリセット名は str である必要があります")
    if not name:
        raise ValueError("プリセット名は空であってはなりません")
    name = name.replace("-", "_")
    if any(c.isupper() for c in name):
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return name.lower()


def animation(arg: Any | None = None, /, name: str | None = None):
    """プリセット関数を登録するデコレータ。

    使用例:
    - `@animation` / `@animation()`                  → 関数名から自動推論。
    - `@animation("wobble")` / `@animation(name="wobble")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    - ValueError: 別の関数が同名で登録済みの場合。
    """

    def _register(obj: Any, resolved_name: str | None) -> PresetFn:
        if not inspect.isfunction(obj):
            raise TypeError(f"@animation は関数のみ登録可能です: got {obj!r}")
        key = _normalize_key(resolved_name or obj.__name__)
        existing = _registry.get(key)
        if existing is not None and existing is not obj:
            raise ValueError(f"'{key}' は既に登録されています")
        _registry[key] = obj
        return obj

    # 直付け (@animation)
    if inspect.isfunction(arg) and name is None:
        return _register(arg, None)

    # 位置引数で名前を渡した (@animation("name"))
    if isinstance(arg, str) and name is None:
        return lambda obj: _register(obj, arg)

    return lambda obj: _register(obj, name)


def get_animation(name: str) -> PresetFn:
    """登録されたプリセットを取得。未登録なら KeyError。"""
    key = _normalize_key(name)
    if key not in _registry:
        raise KeyError(f"'{name}' は登録されていません")
    return _registry[key]


def list_animations() -> list[str]:
    return sorted(_registry)


def is_animation_registered(name: str) -> bool:
    return _normalize_key(name) in _registry


def unregister(name: str) -> None:
    """登録を解除（存在しない場合は無視）。"""
    _registry.pop(_normalize_key(name), None)


__all__ = [
    "animation",
    "get_animation",
    "list_animations",
    "is_animation_registered",
    "unregister",
]
