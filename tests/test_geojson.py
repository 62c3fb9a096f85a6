"""Tests for GeoJSON export of placement results."""
import json

from hexlabel import calculate_hexagonal_labels
from hexlabel.export.geojson import to_feature_collection, write_geojson


def kinds(fc, kind):
    return [f for f in fc["features"] if f["properties"]["kind"] == kind]


class TestFeatureCollection:
    def test_features(self, paris, barcelona, france_spain_bounds, two_colors):
        result = calculate_hexagonal_labels([paris, barcelona], france_spain_bounds, 6, 800, two_colors)
        fc = to_feature_collection(result)
        assert fc["type"] == "FeatureCollection"
        assert fc["properties"]["hex_size_km"] == result.hex_size_km

        hexes = kinds(fc, "hexagon")
        assert len(hexes) == len(result.hexagons)
        assert sum(f["properties"]["used"] for f in hexes) == 2
        assert sum(f["properties"]["available"] for f in hexes) == len(result.available_hexagons)
        assert all(f["geometry"]["type"] == "Polygon" for f in hexes)

        labels = kinds(fc, "label")
        assert [f["properties"]["location_id"] for f in labels] == ["paris", "bcn"]
        lb = result.labels[0]
        assert tuple(labels[0]["geometry"]["coordinates"]) == (lb.label_lng, lb.label_lat)

        connectors = kinds(fc, "connector")
        assert len(connectors) == 2
        start = tuple(connectors[0]["geometry"]["coordinates"][0])
        assert start == (paris.lng, paris.lat)

    def test_without_grid(self, paris, france_spain_bounds):
        result = calculate_hexagonal_labels([paris], france_spain_bounds, 6, 800, ["red"])
        fc = to_feature_collection(result, include_grid=False)
        assert kinds(fc, "hexagon") == []
        assert len(kinds(fc, "label")) == 1

    def test_write(self, tmp_path, paris, france_spain_bounds):
        result = calculate_hexagonal_labels([paris], france_spain_bounds, 6, 800, ["red"])
        out = write_geojson(result, tmp_path / "out" / "labels.geojson")
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["type"] == "FeatureCollection"
