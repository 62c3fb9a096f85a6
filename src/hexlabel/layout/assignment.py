# assignment.py
from __future__ import annotations
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np
from shapely.geometry import Point
from shapely.ops import nearest_points

from hexlabel.model.models import Hexagon, LabelAssignment, Location
from .distance import EARTH_RADIUS_KM, haversine_km_array
from .params import LayoutParams


def _centers(hexagons: Sequence[Hexagon]) -> Tuple[np.ndarray, np.ndarray]:
    n = len(hexagons)
    lats = np.fromiter((h.center_lat for h in hexagons), dtype=float, count=n)
    lngs = np.fromiter((h.center_lng for h in hexagons), dtype=float, count=n)
    return lats, lngs


def _nearest_free(target_lat: float, target_lng: float, lats: np.ndarray, lngs: np.ndarray,
                  used: np.ndarray, radius_km: float) -> Optional[int]:
    """未使用 (used=False) のうち最寄りセルの添字。全て使用済みなら None。"""
    dists = haversine_km_array(target_lat, target_lng, lats, lngs, radius_km)
    # argmin は同距離なら先頭を返す → 候補リスト順でタイブレーク
    masked = np.where(used, np.inf, dists)
    idx = int(np.argmin(masked))
    if not np.isfinite(masked[idx]):
        return None
    return idx


def find_nearest_hexagon(target_lat: float, target_lng: float,
                         hexagons: Sequence[Hexagon], used_hexagon_ids: Set[str],
                         radius_km: float = EARTH_RADIUS_KM) -> Optional[Hexagon]:
    """未使用セルのうち (target_lat, target_lng) に最も近いものを返す。無ければ None。"""
    if not hexagons:
        return None
    lats, lngs = _centers(hexagons)
    used = np.fromiter((h.id in used_hexagon_ids for h in hexagons), dtype=bool, count=len(hexagons))
    idx = _nearest_free(target_lat, target_lng, lats, lngs, used, radius_km)
    return None if idx is None else hexagons[idx]


def connection_point(hexagon: Hexagon, lat: float, lng: float) -> Tuple[float, float]:
    """マーカーから見て六角形の縁で最も近い点 (lat, lng)。度の平面上で求める。"""
    if not hexagon.boundary:
        return hexagon.center_lat, hexagon.center_lng
    edge = hexagon.to_polygon().exterior
    p, _ = nearest_points(edge, Point(lng, lat))
    return p.y, p.x


def _pick_color(colors: Sequence[str], color_index: int) -> Optional[str]:
    if not colors:
        return None
    return colors[color_index % len(colors)]


def assign_labels(locations: Sequence[Location], available_hexagons: Sequence[Hexagon],
                  marker_colors: Sequence[str],
                  params: LayoutParams | None = None) -> Tuple[List[LabelAssignment], Set[str]]:
    """
    各地点を、まだ使われていない最寄りの空きセルへ先着順で割り当てる。
    空きセルが尽きた地点はラベル無し（エラーにはしない）。
    戻り値: (labels, used_hexagon_ids)
    """
    params = params or LayoutParams()
    labels: List[LabelAssignment] = []
    used_ids: Set[str] = set()
    if not locations or not available_hexagons:
        return labels, used_ids

    lats, lngs = _centers(available_hexagons)
    used = np.zeros(len(available_hexagons), dtype=bool)

    order = range(len(locations))
    if params.stable_order:
        order = sorted(order, key=lambda i: locations[i].id)

    for i in order:
        loc = locations[i]
        idx = _nearest_free(loc.lat, loc.lng, lats, lngs, used, params.earth_radius_km)
        if idx is None:
            continue

        hexagon = available_hexagons[idx]
        used[idx] = True
        used_ids.add(hexagon.id)

        color_index = loc.color_index if loc.color_index is not None else i
        c_lat, c_lng = connection_point(hexagon, loc.lat, loc.lng)
        labels.append(LabelAssignment(
            location_id=loc.id,
            name=loc.name,
            label_lat=hexagon.center_lat,
            label_lng=hexagon.center_lng,
            hexagon_id=hexagon.id,
            original_lat=loc.lat,
            original_lng=loc.lng,
            color=_pick_color(marker_colors, color_index),
            photo_name=loc.photo_name,
            connection_lat=c_lat,
            connection_lng=c_lng,
        ))
    return labels, used_ids
