# sizing.py
from __future__ import annotations

from .params import LayoutParams

MAX_ABS_ZOOM = 64.0


def calculate_hex_size_km(zoom: float, viewport_height_px: float,
                          params: LayoutParams | None = None) -> float:
    """
    zoom から六角形の半径 [km] を決める。

    zoom=0 で世界の南北 (約40000km) が画面に収まり、zoom が 1 上がるごとに
    表示範囲は半分になる。画面の縦に約8個並ぶ大きさを狙い、半径なので更に /2。
    viewport_height_px は呼び出し側の都合で受け取るだけで計算には使わない。
    """
    params = params or LayoutParams()
    # 極端な zoom でも 2**zoom が溢れないように（どのみち上下限で丸まる）
    zoom = max(-MAX_ABS_ZOOM, min(MAX_ABS_ZOOM, zoom))
    visible_km = params.world_height_km * 2.0 ** -zoom
    size_km = visible_km / params.target_hexagons_vertically / 2.0
    return max(params.min_hex_size_km, min(params.max_hex_size_km, size_km))
