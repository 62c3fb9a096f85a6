from __future__ import annotations
import pathlib, json, logging, warnings
from typing import Any, List, Mapping, Iterable

from jsonschema import validate

from .models import Bounds, LabelRequest, Location
from hexlabel.layout.params import DEFAULT_MARKER_COLORS

logger = logging.getLogger(__name__)


class RequestLoader:
    """ラベル配置リクエストの JSON を読み込んでモデル化するローダ"""

    def __init__(self, validate_schema: bool = True, schema_dir: str | pathlib.Path | None = None):
        self.validate_schema = validate_schema
        # デフォルト: このパッケージの schemas ディレクトリ
        if schema_dir is None:
            self.schema_dir = pathlib.Path(__file__).parent.parent / "schemas"
        else:
            self.schema_dir = pathlib.Path(schema_dir)

    def _load_json(self, path: str | pathlib.Path) -> Any:
        p = pathlib.Path(path)
        if not p.exists():
            raise FileNotFoundError(str(p))
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            schema = self._load_json(self.schema_dir / schema_name)
            validate(instance=instance, schema=schema)

    # --- 公開API ------------------------------------------------------

    def load_request(self, path: str | pathlib.Path) -> LabelRequest:
        """request.json → LabelRequest"""
        return self.parse_request(self._load_json(path))

    def parse_request(self, data: Mapping[str, Any]) -> LabelRequest:
        """読み込み済みの dict → LabelRequest（スキーマ検証込み）"""
        self._validate(data, "label_request.schema.json")

        locations = self.parse_locations(data["locations"])
        bounds = Bounds.from_mapping(data["bounds"])
        colors = tuple(data.get("marker_colors") or DEFAULT_MARKER_COLORS)
        logger.debug("request: %d locations, bounds=%s", len(locations), bounds)
        return LabelRequest(
            locations=tuple(locations),
            bounds=bounds,
            zoom=float(data["zoom"]),
            viewport_height_px=float(data.get("viewport_height_px", 0.0)),
            marker_colors=colors,
        )

    def parse_locations(self, items: Iterable[Mapping[str, Any]]) -> List[Location]:
        """locations 配列 → Location のリスト（キーはアプリ側の camelCase も受け付ける）"""
        locations: List[Location] = []
        seen: set[str] = set()
        for item in items:
            lat, lng = float(item["lat"]), float(item["lng"])
            if not -90.0 <= lat <= 90.0:
                raise ValueError(f"latitude out of range for location {item['id']}: {lat}")
            if not -180.0 <= lng <= 180.0:
                raise ValueError(f"longitude out of range for location {item['id']}: {lng}")

            loc_id = str(item["id"])
            if loc_id in seen:
                warnings.warn(f"Duplicate location id {loc_id}")
            seen.add(loc_id)

            color_index = item.get("colorIndex", item.get("color_index"))
            locations.append(
                Location(
                    id=loc_id,
                    name=item["name"],
                    lat=lat,
                    lng=lng,
                    color_index=int(color_index) if color_index is not None else None,
                    photo_name=item.get("photoName", item.get("photo_name")),
                )
            )
        return locations
