# visualizer2d/__init__.py
"""
確認用の 2D 可視化。WebMercator 上に六角グリッド・マーカー・ラベルを描く。
"""
__all__ = ["cli", "config", "overlay", "projection", "renderer"]
