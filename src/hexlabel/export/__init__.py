# export/__init__.py
"""Export layer: 計算結果を GeoJSON FeatureCollection に変換する。"""
__all__ = ["geojson"]
