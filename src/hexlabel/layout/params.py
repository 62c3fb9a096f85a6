# params.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping

# アプリのマーカー色と同じ並び
DEFAULT_MARKER_COLORS = (
    "#3B82F6",  # Blue
    "#8B5CF6",  # Purple
    "#10B981",  # Green
    "#F59E0B",  # Amber
    "#EF4444",  # Red
    "#EC4899",  # Pink
    "#06B6D4",  # Cyan
    "#84CC16",  # Lime
    "#F97316",  # Orange
    "#6366F1",  # Indigo
)


@dataclass(frozen=True)
class LayoutParams:
    """ラベル配置エンジンの定数群。JSON の "layout" ブロックで上書きできる。"""
    earth_radius_km: float = 6371.0
    world_height_km: float = 40000.0    # zoom=0 で画面に収まる南北方向の長さ
    target_hexagons_vertically: int = 8
    min_hex_size_km: float = 1.0
    max_hex_size_km: float = 500.0
    exclusion_factor: float = 1.2       # 六角形半径 + 20%
    km_per_deg_lat: float = 111.0
    grid_padding_cells: int = 2
    max_supported_lat: float = 85.0
    stable_order: bool = False          # True: id 順に割り当て

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "LayoutParams":
        if not d:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown layout parameter(s): {', '.join(sorted(unknown))}")
        return cls(**d)

    def exclusion_radius_km(self, hex_size_km: float) -> float:
        return hex_size_km * self.exclusion_factor


__all__ = ["LayoutParams", "DEFAULT_MARKER_COLORS"]
