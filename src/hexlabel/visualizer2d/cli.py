# cli.py
import argparse, logging, sys
from .config import VizConfig, load_json
from .projection import WebMercatorProjection
from .overlay import TileOverlay
from .renderer import LabelRenderer
from hexlabel.export.geojson import write_geojson
from hexlabel.layout.engine import calculate_hexagonal_labels
from hexlabel.model.loader import RequestLoader

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Place map labels on a hexagonal grid")
    p.add_argument("--config")
    p.add_argument("--request", help="request JSON (locations, bounds, zoom, ...)")
    p.add_argument("--out-geojson", dest="out_geojson")
    p.add_argument("--out-png", dest="out_png")
    p.add_argument("--overlay-map", dest="overlay_map", action="store_true", default=None)
    p.add_argument("--tiles")
    p.add_argument("--tile-zoom", dest="tile_zoom", type=int)
    p.add_argument("--no-grid", dest="draw_grid", action="store_false", default=None)
    p.add_argument("--print-labels", dest="print_labels", action="store_true", default=None)
    p.add_argument("--show", action="store_true", default=None)
    p.add_argument("-v", "--verbose", action="store_true", default=None)
    return p.parse_args(argv)

def build_config(args) -> VizConfig:
    cfg_dict = load_json(args.config)
    # JSONをデフォルトに、CLIで上書き
    for k, v in vars(args).items():
        if k == "config": continue
        if v is not None: cfg_dict[k] = v
    if "request" not in cfg_dict:
        raise ValueError("no request file given (--request or \"request\" in config)")
    return VizConfig(**cfg_dict)

def main(argv=None):
    cfg = build_config(parse_args(argv))
    if cfg.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    req = RequestLoader(validate_schema=True).load_request(cfg.request)
    print(f"[HexLabel] {len(req.locations)} locations, zoom={req.zoom}")

    result = calculate_hexagonal_labels(
        req.locations, req.bounds, req.zoom, req.viewport_height_px,
        req.marker_colors, cfg.layout_params(),
    )
    print(f"[HexLabel] hex_size={result.hex_size_km:.3f}km cells={len(result.hexagons)} "
          f"available={len(result.available_hexagons)} labels={len(result.labels)}")

    if cfg.print_labels:
        print("# location_id,hexagon_id,label_lat,label_lng,color")
        for lb in result.labels:
            print(f"{lb.location_id},{lb.hexagon_id},{lb.label_lat:.8f},{lb.label_lng:.8f},{lb.color}")

    if cfg.out_geojson:
        out = write_geojson(result, cfg.out_geojson, include_grid=cfg.draw_grid)
        print(f"[HexLabel] wrote {out}")

    if cfg.out_png or cfg.show:
        overlay = TileOverlay(cfg.tiles, cfg.tile_zoom) if cfg.overlay_map else None
        LabelRenderer(WebMercatorProjection(), overlay).draw(
            result, req.locations, req.bounds,
            draw_grid=cfg.draw_grid, out_png=cfg.out_png, show=cfg.show,
        )
        if cfg.out_png:
            print(f"[HexLabel] wrote {cfg.out_png}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
