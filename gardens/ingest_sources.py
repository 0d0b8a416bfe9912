# gardens/ingest_sources.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Protocol, Any, Dict
import json

from gardens.utils import first_text, parse_float, parse_int, point_from_geo

FALLBACK_LONGITUDE = -123.1207
FALLBACK_LATITUDE = 49.2827


class IngestSource(Protocol):
    def records(self) -> Iterable[Dict[str, Any]]:
        """Yield normalized dicts keyed by the 15 garden columns."""
        ...


def normalize_record(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map one raw open-data record (flat, or wrapped in `fields`) onto the
    garden columns, applying the import-time fallback chains.
    """
    data = item.get("fields") if isinstance(item.get("fields"), dict) else item

    raw_type = first_text(data.get("type"))
    if raw_type:
        gtype = raw_type
    elif first_text(data.get("jurisdiction")):
        gtype = "Community"
    else:
        gtype = "Food"

    street = f"{first_text(data.get('street_number'))} {first_text(data.get('street_name'))}".strip()

    lat, lon = point_from_geo(data.get("geo_point_2d"))

    return {
        "name": first_text(data.get("name"), data.get("merged_address"), default="Unknown Garden"),
        "type": gtype,
        "neighborhood": first_text(data.get("geo_local_area"), data.get("neighbourhood_name"), default="Unknown"),
        "address": first_text(data.get("merged_address"), street, default="No address"),
        "longitude": lon if lon is not None else FALLBACK_LONGITUDE,
        "latitude": lat if lat is not None else FALLBACK_LATITUDE,
        "contact": first_text(data.get("public_e_mail"), default="No contact"),
        "plots_available": parse_int(data.get("number_of_plots"), 0),
        "year_created": first_text(data.get("year_created")),
        "food_tree_varieties": first_text(data.get("food_tree_varieties")),
        "jurisdiction": first_text(data.get("jurisdiction")),
        "steward": first_text(data.get("steward_or_managing_organization")),
        "public_email": first_text(data.get("public_e_mail")),
        "website": first_text(data.get("website")),
        "geo_local_area": first_text(data.get("geo_local_area")),
    }


class JsonArraySource(IngestSource):
    def __init__(self, items: list):
        if not isinstance(items, list):
            raise ValueError("Seed document must be a JSON array of garden records")
        self._items = items

    def records(self) -> Iterable[Dict[str, Any]]:
        for item in self._items:
            if not isinstance(item, dict):
                continue
            yield normalize_record(item)


class JsonFileSource(JsonArraySource):
    """Seed records read from a JSON file. Raises OSError / JSONDecodeError / ValueError."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        with open(self.path, "r", encoding="utf-8") as fh:
            super().__init__(json.load(fh))
