"""
どこで: `engine.core` サブパッケージ。
何を: 2×3 アフィン行列（matrix）・ピボット解決（origin）・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 変換計算と協調ループの基盤を構成し、上位層（timeline/playback/animations）から再利用するため。
"""
