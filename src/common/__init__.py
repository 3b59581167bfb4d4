"""
どこで: `common` パッケージ。
何を: ロギング初期化・環境変数パース・型付き設定などの軽量ユーティリティ。
なぜ: engine/animations/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "setup_default_logging",
    "get_settings",
]
