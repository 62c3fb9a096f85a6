# projection.py
from dataclasses import dataclass
from typing import Tuple

from hexlabel.model.models import Bounds

@dataclass(frozen=True)
class WebMercatorProjection:
    """EPSG:4326 <-> EPSG:3857"""
    def __post_init__(self):
        from pyproj import Transformer
        object.__setattr__(self, "_to_merc",
            Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True))
        object.__setattr__(self, "_to_geo",
            Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True))

    def lonlat_to_xy(self, lon, lat):
        return self._to_merc.transform(lon, lat)

    def xy_to_lonlat(self, x, y):
        return self._to_geo.transform(x, y)

    # (lat, lng) 順で受けるラッパ（モデル側の並びに合わせる）
    def latlng_to_xy(self, lat: float, lng: float) -> Tuple[float, float]:
        return self.lonlat_to_xy(lng, lat)

    def bounds_to_xy(self, b: Bounds) -> Tuple[float, float, float, float]:
        """Bounds → (Xmin, Ymin, Xmax, Ymax) [m]"""
        xmin, ymin = self.lonlat_to_xy(b.west, b.south)
        xmax, ymax = self.lonlat_to_xy(b.east, b.north)
        return xmin, ymin, xmax, ymax
