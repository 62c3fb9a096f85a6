# distance.py
import math
import numpy as np

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float,
                 radius_km: float = EARTH_RADIUS_KM) -> float:
    """2点間の大円距離 [km]（haversine）"""
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dlat = p2 - p1
    dlng = math.radians(lng2 - lng1)
    a = math.sin(dlat / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dlng / 2) ** 2
    a = min(1.0, max(0.0, a))
    return 2.0 * radius_km * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))


def haversine_km_array(lat: float, lng: float, lats, lngs,
                       radius_km: float = EARTH_RADIUS_KM) -> np.ndarray:
    """
    1点 (lat, lng) から複数点 (lats, lngs) への距離 [km] をまとめて計算する。
    lats/lngs は同じ長さの配列。
    """
    lats = np.asarray(lats, dtype=float)
    lngs = np.asarray(lngs, dtype=float)
    p1 = np.radians(lat)
    p2 = np.radians(lats)
    dlat = p2 - p1
    dlng = np.radians(lngs - lng)
    a = np.sin(dlat / 2) ** 2 + np.cos(p1) * np.cos(p2) * np.sin(dlng / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return 2.0 * radius_km * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
