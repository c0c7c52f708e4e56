"""
Loading photo records and municipality centres from JSON exports.

The photo store itself lives elsewhere; this module only reads the shape it
exports: a list of photo documents (or an object with a ``photos`` list),
each optionally carrying ``coordinates: {latitude, longitude, address}``.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .models import Photo, Coordinates
from .coordinates import is_valid_coordinate
from .error_handling import PhotoSourceError, safe_file_operation

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def _read_json(path: PathLike) -> Any:
    def _load():
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)

    try:
        return safe_file_operation(_load)
    except json.JSONDecodeError as e:
        raise PhotoSourceError(f"Invalid JSON in {path}: {e}") from e

def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0

def _to_text(value: Any) -> str:
    return str(value) if value else ""

def _parse_coordinates(raw: Any) -> Optional[Coordinates]:
    # Anything that is not an object is treated as "no coordinates"
    if not isinstance(raw, dict):
        return None
    return Coordinates(
        latitude=raw.get("latitude"),
        longitude=raw.get("longitude"),
        address=_to_text(raw.get("address")) or None,
    )

def parse_photo_record(record: Any) -> Photo:
    """
    Build a Photo from one exported document.

    Accepts both camelCase (``imageUrl``) and snake_case keys.

    Raises:
        PhotoSourceError: If the record is not an object or has no id
    """
    if not isinstance(record, dict):
        raise PhotoSourceError(f"Photo record must be an object, got {type(record).__name__}")

    photo_id = record.get("id")
    if photo_id is None or str(photo_id) == "":
        raise PhotoSourceError("Photo record is missing an id")

    return Photo(
        id=str(photo_id),
        image_url=_to_text(record.get("imageUrl") or record.get("image_url")),
        description=_to_text(record.get("description")),
        year=_to_text(record.get("year")),
        author=_to_text(record.get("author")),
        location=_to_text(record.get("location")),
        coordinates=_parse_coordinates(record.get("coordinates")),
        likes=_to_int(record.get("likes")),
        views=_to_int(record.get("views")),
    )

def load_photos_from_json(path: PathLike) -> List[Photo]:
    """
    Read a photo export.

    Args:
        path: JSON file with a list of photo documents or ``{"photos": [...]}``

    Returns:
        List[Photo]: Records in file order

    Raises:
        PhotoSourceError: If the file is unreadable or not a photo export
    """
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("photos")
    if not isinstance(data, list):
        raise PhotoSourceError(f"{path} does not contain a list of photos")

    photos = [parse_photo_record(record) for record in data]
    logger.info(f"Loaded {len(photos)} photos from {path}")
    return photos

def load_municipalities(path: PathLike) -> Dict[str, Coordinates]:
    """
    Read municipality centres used as a coordinate fallback.

    The export holds ``{"records": [[id, county, type, name, lat, lon], ...]}``.
    Records without usable coordinates are skipped; when a name repeats the
    first record wins.
    """
    data = _read_json(path)
    records = data.get("records") if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise PhotoSourceError(f"{path} does not contain municipality records")

    centres: Dict[str, Coordinates] = {}
    for record in records:
        if not isinstance(record, (list, tuple)) or len(record) < 6:
            continue
        name, lat, lon = record[3], record[4], record[5]
        if not isinstance(name, str) or not is_valid_coordinate(lat, lon):
            continue
        centres.setdefault(name, Coordinates(latitude=float(lat), longitude=float(lon)))

    logger.info(f"Loaded {len(centres)} municipality centres from {path}")
    return centres
