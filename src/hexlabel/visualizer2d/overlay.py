# overlay.py
from dataclasses import dataclass
import numpy as np
import contextily as ctx

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)

@dataclass(frozen=True)
class TileOverlay:
    """ラベル確認図の背景タイル。zoom 未指定なら六角形サイズから決める。"""
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    px_per_hex: int = 48
    max_px: int = 4096

    def _resolve(self):
        if self.tiles.startswith(("http://", "https://")):
            return self.tiles
        prov = ctx.providers
        for p in self.tiles.split("."):
            if p: prov = getattr(prov, p)
        return prov

    def zoom_for_hex(self, hex_size_km: float, provider) -> int:
        # 六角形の直径が px_per_hex ピクセル程度になる zoom
        target_m_per_px = max(1e-9, 2000.0 * hex_size_km / max(1, self.px_per_hex))
        zoom = int(round(np.log2(INITIAL_RES / target_m_per_px)))
        zmin = getattr(provider, "min_zoom", 0)
        zmax = getattr(provider, "max_zoom", 19)
        return int(np.clip(zoom, zmin, zmax))

    def cap_zoom(self, xmin, xmax, zoom) -> int:
        m_per_px = INITIAL_RES / (2 ** zoom)
        w_px = (xmax - xmin) / m_per_px
        while w_px > self.max_px and zoom > 0:
            zoom -= 1; m_per_px *= 2; w_px /= 2
        return zoom

    def fetch(self, Xmin, Ymin, Xmax, Ymax, hex_size_km: float):
        """WebMercator の範囲 [m] に対応するタイル画像を取得して (img, extent, zoom) を返す"""
        provider = self._resolve()
        z = self.zoom
        if z is None:
            z = self.zoom_for_hex(hex_size_km, provider)
        z = self.cap_zoom(Xmin, Xmax, z)
        img, extent_wm = ctx.bounds2img(Xmin, Ymin, Xmax, Ymax, source=provider, zoom=z, ll=False)
        return img, extent_wm, z
