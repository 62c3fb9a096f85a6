# renderer.py
from typing import Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MPLPolygon
from .projection import WebMercatorProjection
from .overlay import TileOverlay
from hexlabel.model.models import Bounds, HexGridData, Location

class LabelRenderer:
    def __init__(self, projection: WebMercatorProjection, overlay: TileOverlay | None = None):
        self.p = projection
        self.ov = overlay

    def _ring_xy(self, ring) -> np.ndarray:
        lons = [pt[0] for pt in ring]
        lats = [pt[1] for pt in ring]
        xs, ys = self.p.lonlat_to_xy(lons, lats)
        return np.column_stack([xs, ys])

    def draw(self, result: HexGridData, locations: Sequence[Location], bounds: Bounds,
             draw_grid: bool = True, out_png: str | None = None, show: bool = False):
        fig, ax = plt.subplots(figsize=(10, 8), dpi=120)
        Xmin, Ymin, Xmax, Ymax = self.p.bounds_to_xy(bounds)

        # 背景地図
        if self.ov and result.hex_size_km > 0:
            img, extent_wm, z = self.ov.fetch(Xmin, Ymin, Xmax, Ymax, result.hex_size_km)
            print(f"[HexLabel] tiles zoom={z}")
            ax.imshow(img, extent=extent_wm, origin="upper",
                      interpolation="bilinear", zorder=0)

        # グリッド: 除外セルは灰, 空きセルは枠のみ, 使用セルはラベル色
        if draw_grid:
            available = {h.id for h in result.available_hexagons}
            color_by_hex = {lb.hexagon_id: lb.color for lb in result.labels}
            for h in result.hexagons:
                if h.id in color_by_hex:
                    face, alpha = color_by_hex[h.id] or "tab:blue", 0.35
                elif h.id in available:
                    face, alpha = "none", 1.0
                else:
                    face, alpha = "lightgray", 0.4
                ax.add_patch(MPLPolygon(self._ring_xy(h.boundary), closed=True,
                                        fc=face, ec="gray", lw=0.5, alpha=alpha, zorder=2))

        # 接続線 → ラベル
        for lb in result.labels:
            mx, my = self.p.latlng_to_xy(lb.original_lat, lb.original_lng)
            end_lat = lb.connection_lat if lb.connection_lat is not None else lb.label_lat
            end_lng = lb.connection_lng if lb.connection_lng is not None else lb.label_lng
            ex, ey = self.p.latlng_to_xy(end_lat, end_lng)
            ax.plot([mx, ex], [my, ey], color=lb.color or "black", lw=1.2, zorder=4)

            lx, ly = self.p.latlng_to_xy(lb.label_lat, lb.label_lng)
            ax.annotate(lb.name, (lx, ly), ha="center", va="center", fontsize=9,
                        bbox=dict(boxstyle="round,pad=0.25",
                                  fc="white", ec=lb.color or "gray", alpha=0.9),
                        zorder=7)

        # マーカー
        for loc in locations:
            x, y = self.p.latlng_to_xy(loc.lat, loc.lng)
            ax.plot(x, y, marker="o", markersize=4, mec="black", mfc="black", zorder=6)

        ax.set_xlim(Xmin, Xmax)
        ax.set_ylim(Ymin, Ymax)
        ax.set_aspect("equal", adjustable="box")
        ax.set_xlabel("X [m] (EPSG:3857)")
        ax.set_ylabel("Y [m] (EPSG:3857)")
        ax.set_title(f"hex size {result.hex_size_km:.2f} km, "
                     f"{len(result.labels)}/{len(locations)} labels")
        plt.tight_layout()

        if out_png:
            fig.savefig(out_png)
        if show:
            plt.show()
        return fig
