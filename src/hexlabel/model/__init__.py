# model/__init__.py
"""
Model layer: エンジンの入出力データ型と、リクエスト JSON のローダ。

- models: Location / Bounds / Hexagon / LabelAssignment / HexGridData
- loader: RequestLoader（jsonschema で検証してから models に変換）
"""
__all__ = ["models", "loader"]
