# exclusion.py
from __future__ import annotations
from typing import Iterable, List

import numpy as np

from hexlabel.model.models import Hexagon, Location
from .distance import EARTH_RADIUS_KM, haversine_km_array


def filter_available_hexagons(hexagons: List[Hexagon], locations: Iterable[Location],
                              exclusion_radius_km: float,
                              radius_km: float = EARTH_RADIUS_KM) -> List[Hexagon]:
    """
    どのマーカーからも exclusion_radius_km 以上離れたセルだけを残す（元の順序を保つ）。
    1つでも半径内にマーカーがあれば、そのセルはラベルに使えない。
    """
    if not hexagons:
        return []
    lats = np.fromiter((h.center_lat for h in hexagons), dtype=float, count=len(hexagons))
    lngs = np.fromiter((h.center_lng for h in hexagons), dtype=float, count=len(hexagons))

    keep = np.ones(len(hexagons), dtype=bool)
    for loc in locations:
        d = haversine_km_array(loc.lat, loc.lng, lats, lngs, radius_km)
        keep &= d >= exclusion_radius_km
    return [h for h, k in zip(hexagons, keep) if k]
