from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, List, Set

from shapely.geometry import Polygon

LngLat = Tuple[float, float]


# --- 入力 -------------------------------------------------------------

@dataclass(frozen=True)
class Location:
    """地図上のマーカー（旅程の地点）。エンジンは変更しない。"""
    id: str
    name: str
    lat: float
    lng: float
    color_index: Optional[int] = None
    photo_name: Optional[str] = None


@dataclass(frozen=True)
class Bounds:
    """表示範囲 (度)"""
    north: float
    south: float
    east: float
    west: float

    @classmethod
    def from_mapping(cls, m) -> "Bounds":
        return cls(
            north=float(m["north"]),
            south=float(m["south"]),
            east=float(m["east"]),
            west=float(m["west"]),
        )

    def center(self) -> Tuple[float, float]:
        return ((self.north + self.south) * 0.5, (self.east + self.west) * 0.5)

    def is_inverted(self) -> bool:
        return self.north < self.south or self.east < self.west

    def is_degenerate(self) -> bool:
        return self.north == self.south or self.east == self.west


# --- グリッド ---------------------------------------------------------

@dataclass(frozen=True)
class Hexagon:
    id: str
    center_lat: float
    center_lng: float
    row: int = 0
    col: int = 0
    boundary: Tuple[LngLat, ...] = ()  # 閉じたリング (lng, lat)

    def to_polygon(self) -> Polygon:
        return Polygon(self.boundary)


# --- 出力 -------------------------------------------------------------

@dataclass(frozen=True)
class LabelAssignment:
    location_id: str
    name: str
    label_lat: float
    label_lng: float
    hexagon_id: str
    original_lat: float
    original_lng: float
    color: Optional[str]
    photo_name: Optional[str] = None
    # マーカーから引いた接続線が六角形の縁に当たる点
    connection_lat: Optional[float] = None
    connection_lng: Optional[float] = None


@dataclass
class HexGridData:
    labels: List[LabelAssignment] = field(default_factory=list)
    hexagons: List[Hexagon] = field(default_factory=list)
    hex_size_km: float = 0.0
    available_hexagons: List[Hexagon] = field(default_factory=list)
    used_hexagon_ids: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class LabelRequest:
    """リクエスト JSON 1件分（CLI 用）"""
    locations: Tuple[Location, ...]
    bounds: Bounds
    zoom: float
    viewport_height_px: float
    marker_colors: Tuple[str, ...]


__all__ = [
    "Location",
    "Bounds",
    "Hexagon",
    "LabelAssignment",
    "HexGridData",
    "LabelRequest",
    "LngLat",
]
