# geojson.py
import json
from pathlib import Path
from typing import Any, Dict, List

from shapely.geometry import LineString, Point, mapping

from hexlabel.model.models import HexGridData


def _feature(geom, props: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "Feature", "geometry": mapping(geom), "properties": props}


def to_feature_collection(result: HexGridData, include_grid: bool = True) -> Dict[str, Any]:
    """
    計算結果 → GeoJSON FeatureCollection。

    kind="hexagon"   : グリッドのセル（available / used フラグ付き, include_grid 時のみ）
    kind="label"     : ラベル位置（セル中心）
    kind="connector" : マーカー → セル縁の接続線
    """
    features: List[Dict[str, Any]] = []

    if include_grid:
        available_ids = {h.id for h in result.available_hexagons}
        for h in result.hexagons:
            features.append(_feature(h.to_polygon(), {
                "kind": "hexagon",
                "id": h.id,
                "row": h.row,
                "col": h.col,
                "available": h.id in available_ids,
                "used": h.id in result.used_hexagon_ids,
            }))

    for lb in result.labels:
        features.append(_feature(Point(lb.label_lng, lb.label_lat), {
            "kind": "label",
            "location_id": lb.location_id,
            "name": lb.name,
            "hexagon_id": lb.hexagon_id,
            "color": lb.color,
            "photo_name": lb.photo_name,
        }))
        end_lat = lb.connection_lat if lb.connection_lat is not None else lb.label_lat
        end_lng = lb.connection_lng if lb.connection_lng is not None else lb.label_lng
        features.append(_feature(
            LineString([(lb.original_lng, lb.original_lat), (end_lng, end_lat)]),
            {"kind": "connector", "location_id": lb.location_id, "color": lb.color},
        ))

    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": {"hex_size_km": result.hex_size_km},
    }


def write_geojson(result: HexGridData, path: str | Path, include_grid: bool = True) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fc = to_feature_collection(result, include_grid=include_grid)
    out.write_text(json.dumps(fc, indent=2), encoding="utf-8")
    return out
