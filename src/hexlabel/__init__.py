# hexlabel/__init__.py
"""
hexlabel: 地図マーカーのラベルを六角グリッド上に配置するエンジン。

- layout: サイズ計算 → グリッド生成 → 除外 → 最近傍割り当て（純粋計算）
- model: 入出力のデータ型と JSON ローダ
- export: GeoJSON 出力
- visualizer2d: matplotlib による確認用描画と CLI
"""
from hexlabel.layout.engine import calculate_hexagonal_labels
from hexlabel.layout.params import DEFAULT_MARKER_COLORS, LayoutParams
from hexlabel.model.models import Bounds, Hexagon, HexGridData, LabelAssignment, Location

__all__ = [
    "calculate_hexagonal_labels",
    "LayoutParams",
    "DEFAULT_MARKER_COLORS",
    "Bounds",
    "Hexagon",
    "HexGridData",
    "LabelAssignment",
    "Location",
]
