# layout/__init__.py
"""
Layout layer: ラベル配置アルゴリズム本体。I/O なしの純粋関数のみ。

- distance: haversine 距離
- sizing: zoom → 六角形サイズ(km)
- grid: bbox を六角格子で敷き詰める
- exclusion: マーカー近傍のセルを除外
- assignment: 最近傍の空きセルへ貪欲に割り当て
- engine: 上記をつなぐドライバ
"""
__all__ = ["distance", "sizing", "grid", "exclusion", "assignment", "engine", "params"]
