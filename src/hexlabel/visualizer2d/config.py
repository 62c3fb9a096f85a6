# config.py
from dataclasses import dataclass, field
from pathlib import Path
import json

from hexlabel.layout.params import LayoutParams

@dataclass
class VizConfig:
    request: str
    overlay_map: bool = False
    tiles: str = "OpenStreetMap.Mapnik"
    tile_zoom: int | None = None
    out_geojson: str | None = None
    out_png: str | None = None
    show: bool = False
    draw_grid: bool = True
    print_labels: bool = False
    verbose: bool = False
    layout: dict = field(default_factory=dict)

    def layout_params(self) -> LayoutParams:
        return LayoutParams.from_dict(self.layout)

def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)
