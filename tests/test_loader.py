"""Tests for loading label requests from JSON."""
import json

import jsonschema
import pytest

from hexlabel.layout.params import DEFAULT_MARKER_COLORS
from hexlabel.model.loader import RequestLoader
from hexlabel.model.models import Bounds


def request_dict(**overrides):
    data = {
        "locations": [
            {"id": "paris", "name": "Paris", "lat": 48.8566, "lng": 2.3522, "colorIndex": 3},
            {"id": 7, "name": "Barcelona", "lat": 41.3874, "lng": 2.1686, "photoName": "bcn.jpg"},
        ],
        "bounds": {"north": 50.0, "south": 40.5, "east": 4.0, "west": 0.5},
        "zoom": 6,
        "viewport_height_px": 800,
        "marker_colors": ["#111111", "#222222"],
    }
    data.update(overrides)
    return data


def write(tmp_path, data):
    p = tmp_path / "request.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


class TestRequestLoader:
    def test_load_request(self, tmp_path):
        req = RequestLoader().load_request(write(tmp_path, request_dict()))
        assert req.bounds == Bounds(north=50.0, south=40.5, east=4.0, west=0.5)
        assert req.zoom == 6.0
        assert req.viewport_height_px == 800.0
        assert req.marker_colors == ("#111111", "#222222")

        paris, bcn = req.locations
        assert paris.color_index == 3
        assert paris.photo_name is None
        assert bcn.id == "7"
        assert bcn.color_index is None
        assert bcn.photo_name == "bcn.jpg"

    def test_default_palette(self, tmp_path):
        data = request_dict()
        del data["marker_colors"]
        req = RequestLoader().load_request(write(tmp_path, data))
        assert req.marker_colors == DEFAULT_MARKER_COLORS

    def test_schema_violation(self, tmp_path):
        data = request_dict()
        del data["bounds"]
        with pytest.raises(jsonschema.ValidationError):
            RequestLoader().load_request(write(tmp_path, data))

    def test_schema_can_be_disabled(self):
        data = request_dict(zoom="6")
        req = RequestLoader(validate_schema=False).parse_request(data)
        assert req.zoom == 6.0

    def test_latitude_out_of_range(self):
        data = request_dict(locations=[{"id": "x", "name": "X", "lat": 95.0, "lng": 0.0}])
        with pytest.raises(ValueError):
            RequestLoader().parse_request(data)

    def test_duplicate_ids_warn(self):
        loc = {"id": "x", "name": "X", "lat": 1.0, "lng": 2.0}
        with pytest.warns(UserWarning, match="Duplicate location id x"):
            locs = RequestLoader().parse_locations([loc, dict(loc)])
        assert len(locs) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RequestLoader().load_request(tmp_path / "nope.json")
