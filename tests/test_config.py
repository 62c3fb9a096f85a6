"""Tests for layout parameters and the visualiser config."""
import json

import pytest

from hexlabel.layout.params import LayoutParams
from hexlabel.visualizer2d.config import VizConfig, load_json


class TestLayoutParams:
    def test_defaults(self):
        p = LayoutParams()
        assert p.earth_radius_km == 6371.0
        assert p.exclusion_radius_km(10.0) == pytest.approx(12.0)
        assert p.grid_padding_cells == 2

    def test_from_dict(self):
        p = LayoutParams.from_dict({"exclusion_factor": 1.5, "stable_order": True})
        assert p.exclusion_factor == 1.5
        assert p.stable_order is True

    def test_from_empty(self):
        assert LayoutParams.from_dict(None) == LayoutParams()
        assert LayoutParams.from_dict({}) == LayoutParams()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="exclusion_radius"):
            LayoutParams.from_dict({"exclusion_radius": 3})


class TestVizConfig:
    def test_load_json(self, tmp_path):
        p = tmp_path / "viz.json"
        p.write_text(json.dumps({"request": "r.json", "layout": {"grid_padding_cells": 3}}), encoding="utf-8")
        cfg = VizConfig(**load_json(str(p)))
        assert cfg.request == "r.json"
        assert cfg.overlay_map is False
        assert cfg.layout_params().grid_padding_cells == 3

    def test_no_path(self):
        assert load_json(None) == {}

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(str(tmp_path / "missing.json"))
