# engine.py
"""
ラベル配置のドライバ。

  サイズ計算 → グリッド生成 → 除外フィルタ → 最近傍割り当て

呼び出しごとに全て作り直す純粋計算で、呼び出し間で共有する状態は持たない。
地図の移動・zoom 変更・マーカー追加のたびに呼び直す前提。
"""
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Sequence, Union

from hexlabel.model.models import Bounds, HexGridData, Location
from .assignment import assign_labels
from .exclusion import filter_available_hexagons
from .grid import generate_hex_grid
from .params import LayoutParams
from .sizing import calculate_hex_size_km

logger = logging.getLogger(__name__)


def calculate_hexagonal_labels(
    locations: Sequence[Location],
    bounds: Union[Bounds, Mapping[str, Any]],
    zoom: float,
    viewport_height_px: float,
    marker_colors: Sequence[str],
    params: Optional[LayoutParams] = None,
) -> HexGridData:
    if not locations:
        return HexGridData()

    params = params or LayoutParams()
    if not isinstance(bounds, Bounds):
        bounds = Bounds.from_mapping(bounds)

    hex_size_km = calculate_hex_size_km(zoom, viewport_height_px, params)
    hexagons = generate_hex_grid(bounds, hex_size_km, params)

    exclusion_radius_km = params.exclusion_radius_km(hex_size_km)
    available = filter_available_hexagons(
        hexagons, locations, exclusion_radius_km, params.earth_radius_km
    )
    logger.debug(
        "hex grid: size=%.3fkm cells=%d available=%d exclusion=%.3fkm",
        hex_size_km, len(hexagons), len(available), exclusion_radius_km,
    )

    labels, used_ids = assign_labels(locations, available, marker_colors, params)
    dropped = len(locations) - len(labels)
    if dropped:
        logger.info("%d of %d locations got no label (no free hexagon left)",
                    dropped, len(locations))

    return HexGridData(
        labels=labels,
        hexagons=hexagons,
        hex_size_km=hex_size_km,
        available_hexagons=available,
        used_hexagon_ids=used_ids,
    )
