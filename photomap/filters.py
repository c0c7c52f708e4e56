import re
import logging
from typing import List, Optional, Sequence
from dataclasses import dataclass

from .models import GeoPhoto

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def extract_year(year: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a free-text year field ("1965.", "1960-ih")."""
    if not year:
        return None
    match = _LEADING_INT.match(str(year))
    if not match:
        return None
    return int(match.group(1))

def extract_decade(year: Optional[str]) -> Optional[int]:
    parsed = extract_year(year)
    if parsed is None:
        return None
    return (parsed // 10) * 10

def available_decades(photos: Sequence[GeoPhoto]) -> List[int]:
    """Sorted unique decades present in the photos' year fields."""
    decades = set()
    for photo in photos:
        decade = extract_decade(photo.year)
        if decade is not None:
            decades.add(decade)
    return sorted(decades)

def filter_by_decade(photos: Sequence[GeoPhoto], decade: Optional[int]) -> List[GeoPhoto]:
    """Keep photos whose year falls in [decade, decade + 10); None keeps all."""
    if decade is None:
        return list(photos)

    filtered = []
    for photo in photos:
        year = extract_year(photo.year)
        if year is not None and decade <= year < decade + 10:
            filtered.append(photo)
    return filtered

def filter_by_location(photos: Sequence[GeoPhoto], search: str) -> List[GeoPhoto]:
    """Case-insensitive substring match on location name or address."""
    needle = (search or "").strip().lower()
    if not needle:
        return list(photos)

    return [
        photo for photo in photos
        if needle in (photo.location or "").lower()
        or (photo.address is not None and needle in photo.address.lower())
    ]

@dataclass(frozen=True)
class PhotoFilters:
    """Active map filters. ``decade`` None means all decades."""
    decade: Optional[int] = None
    search: str = ""

    @property
    def is_active(self) -> bool:
        return self.decade is not None or bool(self.search.strip())

def apply_filters(photos: Sequence[GeoPhoto], filters: PhotoFilters) -> List[GeoPhoto]:
    """Apply decade then location filters, preserving input order."""
    filtered = filter_by_decade(photos, filters.decade)
    filtered = filter_by_location(filtered, filters.search)
    if filters.is_active:
        logger.debug(f"Filters {filters} kept {len(filtered)} of {len(photos)} photos")
    return filtered
