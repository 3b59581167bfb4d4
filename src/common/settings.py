"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を高めるため。

環境変数（接頭辞 `SVM_`）:
- `SVM_LOG_LEVEL`: `setup_default_logging()` の既定レベル。
- `SVM_FRAME_INTERVAL`: `FrameClock.start()` の既定周期 [秒]（下限 0.001）。
- `SVM_DEFAULT_ORIGIN`: ピボット指定を省略したときの transform-origin 文字列。
- `SVM_WARN_ON_NAN_ORIGIN`: origin 解決結果が NaN のとき警告ログを出すか。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Frame loop
    FRAME_INTERVAL: float = 1.0 / 60.0

    # Origin
    DEFAULT_ORIGIN: str = "50% 50%"
    WARN_ON_NAN_ORIGIN: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込（未設定/不正値は既定値）。"""
    _settings.LOG_LEVEL = env_str("SVM_LOG_LEVEL", "INFO").upper()
    _settings.FRAME_INTERVAL = env_float("SVM_FRAME_INTERVAL", 1.0 / 60.0, min_value=0.001)
    _settings.DEFAULT_ORIGIN = env_str("SVM_DEFAULT_ORIGIN", "50% 50%")
    _settings.WARN_ON_NAN_ORIGIN = env_bool("SVM_WARN_ON_NAN_ORIGIN", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
