import math
from typing import List, Sequence, Optional

from .models import GeoPhoto, Position, Individual, Cluster, ClusteredItem
from .config import ClusteringConfig
from .zoom import radius_for_zoom
from .error_handling import logger, ClusteringError

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0

def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    # Convert degrees to radians
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)

    # Haversine formula; sin^2 of the half longitude delta is periodic,
    # so points either side of the 180th meridian come out close together.
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    # Rounding can push antipodal pairs a hair past 1.0
    a = min(1.0, max(0.0, a))
    c = 2 * math.asin(math.sqrt(a))

    return c * EARTH_RADIUS_KM

def calculate_photo_distance(photo1: GeoPhoto, photo2: GeoPhoto) -> float:
    """Great-circle distance between two photos in kilometers."""
    return haversine_distance(
        photo1.latitude, photo1.longitude,
        photo2.latitude, photo2.longitude
    )

def calculate_centroid(photos: Sequence[GeoPhoto]) -> Position:
    """Arithmetic mean of latitudes and longitudes, computed independently."""
    if not photos:
        raise ClusteringError("Cannot compute the centroid of an empty group")

    avg_lat = sum(p.latitude for p in photos) / len(photos)
    avg_lon = sum(p.longitude for p in photos) / len(photos)
    return Position(latitude=avg_lat, longitude=avg_lon)

def _make_item(group: List[GeoPhoto]) -> ClusteredItem:
    if len(group) == 1:
        return Individual(position=group[0].position, photo=group[0])
    return Cluster(
        position=calculate_centroid(group),
        members=tuple(group),
        count=len(group),
    )

def _validate_radius(radius: float) -> float:
    if isinstance(radius, bool):
        raise ClusteringError(f"Cluster radius must be a number, got {radius!r}")
    try:
        radius = float(radius)
    except (TypeError, ValueError) as e:
        raise ClusteringError(f"Cluster radius must be a number, got {radius!r}") from e
    if math.isnan(radius) or radius < 0:
        raise ClusteringError(f"Cluster radius must be non-negative, got {radius}")
    return radius

def cluster_photos(photos: Sequence[GeoPhoto], radius: float) -> List[ClusteredItem]:
    """
    Group photos into map markers by proximity.

    Seed-based greedy grouping: photos are visited in input order, the first
    unclaimed photo becomes a seed, and every later unclaimed photo within
    ``radius`` km of that seed joins its group. Membership is tested against
    the seed only, so this is not transitive-closure clustering: a chain of
    photos each within the radius of its neighbour can still end up split.

    Args:
        photos: Photos with validated positions
        radius: Proximity radius in kilometers; 0 disables grouping

    Returns:
        List of Individual and Cluster items in seed order. Every input photo
        appears in exactly one item.

    Raises:
        ClusteringError: If radius is negative or not a number
    """
    radius = _validate_radius(radius)
    photos = list(photos)

    if not photos:
        return []

    if radius == 0 or len(photos) < 2:
        return [Individual(position=p.position, photo=p) for p in photos]

    claimed = [False] * len(photos)
    items: List[ClusteredItem] = []

    for i, seed in enumerate(photos):
        if claimed[i]:
            continue
        claimed[i] = True
        group = [seed]

        # Everything before i is already claimed
        for j in range(i + 1, len(photos)):
            if claimed[j]:
                continue
            if calculate_photo_distance(seed, photos[j]) <= radius:
                claimed[j] = True
                group.append(photos[j])

        items.append(_make_item(group))

    cluster_count = sum(1 for item in items if item.kind == "cluster")
    logger.info(f"Clustering completed: {len(photos)} photos -> {len(items)} markers "
                f"({cluster_count} clusters, radius {radius:.4f} km)")
    return items

def cluster_photos_for_zoom(photos: Sequence[GeoPhoto], zoom: float,
                            cfg: Optional[ClusteringConfig] = None) -> List[ClusteredItem]:
    """Cluster photos with the radius that matches a map zoom level."""
    return cluster_photos(photos, radius_for_zoom(zoom, cfg))

def flatten_clustered_items(items: Sequence[ClusteredItem]) -> List[GeoPhoto]:
    """All photos contained in the items, in output order."""
    flattened = []
    for item in items:
        flattened.extend(item.photos)
    return flattened
