# grid.py
"""
表示範囲 (bbox) を六角格子で敷き詰める。

km → 度 の換算は bbox 中心緯度での近似（正距円筒）を全体に使う。
測地線上の正確な六角形ではないので、高緯度ほど実際の形は歪む。
|lat| > 85° 付近では経度方向の換算が発散するため警告だけ出して計算は続ける。
"""
from __future__ import annotations
import math
import warnings
from typing import List, Tuple

from hexlabel.model.models import Bounds, Hexagon, LngLat
from .params import LayoutParams

SQRT3 = math.sqrt(3.0)
MAX_LAT = 90.0


def degrees_per_km(center_lat: float, params: LayoutParams | None = None) -> Tuple[float, float]:
    """(lat_per_km, lng_per_km) を返す。経度側は子午線の収束を cos(lat) で補正。"""
    params = params or LayoutParams()
    lat_per_km = 1.0 / params.km_per_deg_lat
    lng_per_km = 1.0 / (params.km_per_deg_lat * math.cos(math.radians(center_lat)))
    return lat_per_km, lng_per_km


def hexagon_boundary(center_lat: float, center_lng: float, size_km: float,
                     lat_per_km: float, lng_per_km: float) -> Tuple[LngLat, ...]:
    """
    六角形の頂点リング (lng, lat)。始点を末尾に繰り返して閉じる。
    頂点は 30° + 60°·i に置く（横 √3·size, 縦 1.5·size の行ずらし配置と噛み合う向き）。
    """
    pts = []
    for i in range(6):
        ang = math.radians(60.0 * i + 30.0)
        pts.append((
            center_lng + size_km * math.cos(ang) * lng_per_km,
            center_lat + size_km * math.sin(ang) * lat_per_km,
        ))
    pts.append(pts[0])
    return tuple(pts)


def generate_hex_grid(bounds: Bounds, hex_size_km: float,
                      params: LayoutParams | None = None) -> List[Hexagon]:
    """
    bbox + 周囲 padding セル分を覆う六角形セルを行優先（南西から）で列挙する。
    id は "hex-{row}-{col}"。奇数行は横間隔の半分だけ東へずらす。
    中心緯度が ±90° を越える行は出力しない。
    """
    params = params or LayoutParams()
    values = (bounds.north, bounds.south, bounds.east, bounds.west, hex_size_km)
    if not all(math.isfinite(v) for v in values) or hex_size_km <= 0:
        return []
    if bounds.is_inverted():
        return []

    center_lat, center_lng = bounds.center()
    if abs(center_lat) > params.max_supported_lat:
        warnings.warn(
            f"center latitude {center_lat:.3f} is beyond ±{params.max_supported_lat}°; "
            "longitude spacing is unreliable near the poles",
            RuntimeWarning,
            stacklevel=2,
        )

    lat_per_km, lng_per_km = degrees_per_km(center_lat, params)
    lat_step = 1.5 * hex_size_km * lat_per_km
    lng_step = SQRT3 * hex_size_km * lng_per_km
    if not (math.isfinite(lng_step) and lng_step > 0):
        return []

    # 点や線に潰れた bbox は中心に1セルだけ置く
    if bounds.is_degenerate():
        return [Hexagon(
            id="hex-0-0",
            center_lat=center_lat,
            center_lng=center_lng,
            row=0,
            col=0,
            boundary=hexagon_boundary(center_lat, center_lng, hex_size_km, lat_per_km, lng_per_km),
        )]

    pad = params.grid_padding_cells
    rows = int(math.ceil((bounds.north - bounds.south) / lat_step)) + 1 + 2 * pad
    cols = int(math.ceil((bounds.east - bounds.west) / lng_step)) + 1 + 2 * pad
    lat0 = bounds.south - pad * lat_step
    lng0 = bounds.west - pad * lng_step

    hexagons: List[Hexagon] = []
    for row in range(rows):
        lat = lat0 + row * lat_step
        # padding が極を越えた行は存在しない緯度なので捨てる（番号は詰めない）
        if abs(lat) > MAX_LAT:
            continue
        offset = (row % 2) * (lng_step / 2.0)
        for col in range(cols):
            lng = lng0 + col * lng_step + offset
            hexagons.append(Hexagon(
                id=f"hex-{row}-{col}",
                center_lat=lat,
                center_lng=lng,
                row=row,
                col=col,
                boundary=hexagon_boundary(lat, lng, hex_size_km, lat_per_km, lng_per_km),
            ))
    return hexagons
