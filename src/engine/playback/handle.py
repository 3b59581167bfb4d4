"""
どこで: `engine.playback` の外部契約。
何を: 外部アニメーションエンジンのハンドル `AnimationHandle` Protocol と、ハンドル欠如時の例外。
なぜ: コントローラをエンジン実装（WAAPI/anime.js 等のブリッジ）から切り離すため。
      ハンドルは外部で duration/ループ回数/対象要素まで設定済みの状態で渡される。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AnimationHandle(Protocol):
    """再生制御可能なアニメーション（すべて同期・即時に完了する想定）。"""

    @property
    def current_time(self) -> float:
        """現在の再生位置 [ms]。"""
        ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def reverse(self) -> None: ...

    def restart(self) -> None: ...

    def seek(self, time_ms: float) -> None: ...


class EngineUnavailableError(RuntimeError):
    """ハンドル未接続（または teardown 済み）のまま操作された。

    続行すると描画状態が未定義になるため、黙って無視せず呼び出し側へ伝える。
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"animation handle is not attached (operation: {operation})")
        self.operation = operation


__all__ = ["AnimationHandle", "EngineUnavailableError"]
