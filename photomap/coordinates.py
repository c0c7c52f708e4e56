import math
import logging
from typing import Dict, Iterable, List, Optional
from dataclasses import replace

from .models import Coordinates, GeoPhoto, Photo, Position

logger = logging.getLogger(__name__)

def _as_finite_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number

def is_valid_coordinate(latitude, longitude) -> bool:
    """True when both values are finite numbers inside the WGS84 ranges."""
    lat = _as_finite_float(latitude)
    lon = _as_finite_float(longitude)
    if lat is None or lon is None:
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0

def to_geo_photo(photo: Photo) -> Optional[GeoPhoto]:
    """
    Normalize a photo record into a GeoPhoto.

    Returns None for records whose coordinates are missing, non-numeric,
    NaN, infinite or out of range.
    """
    coords = photo.coordinates
    if coords is None or not is_valid_coordinate(coords.latitude, coords.longitude):
        return None

    position = Position(
        latitude=float(coords.latitude),
        longitude=float(coords.longitude),
    )
    return GeoPhoto(id=photo.id, position=position, photo=photo, address=coords.address or None)

def filter_photos_with_coordinates(photos: Iterable[Photo]) -> List[GeoPhoto]:
    """
    Keep only photos with resolvable coordinates, preserving input order.

    Invalid records are skipped, never raised on: one bad record must not
    take the whole map down.
    """
    geo_photos = []
    skipped = 0

    for photo in photos:
        geo_photo = to_geo_photo(photo)
        if geo_photo is None:
            skipped += 1
            logger.debug(f"Skipping photo {photo.id!r}: no usable coordinates")
            continue
        geo_photos.append(geo_photo)

    if skipped:
        logger.info(f"Coordinate filter kept {len(geo_photos)} photos, skipped {skipped}")
    return geo_photos

def apply_location_fallback(photos: Iterable[Photo],
                            municipalities: Dict[str, Coordinates]) -> List[Photo]:
    """
    Fill in town-centre coordinates for photos that have none.

    ``municipalities`` maps a location name to its centre; lookup is
    case-insensitive. Photos that already carry valid coordinates are
    returned as they are. The input records are not mutated.
    """
    lookup = {name.strip().lower(): coords for name, coords in municipalities.items()}
    result = []

    for photo in photos:
        coords = photo.coordinates
        if coords is not None and is_valid_coordinate(coords.latitude, coords.longitude):
            result.append(photo)
            continue

        fallback = lookup.get(photo.location.strip().lower()) if photo.location else None
        if fallback is None:
            result.append(photo)
            continue

        address = coords.address if coords is not None else None
        result.append(replace(photo, coordinates=Coordinates(
            latitude=fallback.latitude,
            longitude=fallback.longitude,
            address=address,
        )))
        logger.debug(f"Using {photo.location} centre for photo {photo.id!r}")

    return result
