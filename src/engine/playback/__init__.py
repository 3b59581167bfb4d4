"""
どこで: `engine.playback` サブパッケージ。
何を: 外部アニメーションハンドル契約（handle）・再生/スクラブ状態機械（controller）・進捗ポーリング（progress）。
なぜ: タイムラインの全長 D を共有しつつ、再生操作とカーソル表示を一貫した寿命で管理するため。
"""

from .controller import PlaybackController, PlaybackMode, PlaybackState
from .handle import AnimationHandle, EngineUnavailableError
from .progress import ProgressPoller

__all__ = [
    "AnimationHandle",
    "EngineUnavailableError",
    "PlaybackController",
    "PlaybackMode",
    "PlaybackState",
    "ProgressPoller",
]
