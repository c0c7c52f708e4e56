"""
Summary counters for the map page and for clustering passes.
"""
from typing import Sequence

from .models import GeoPhoto, ClusteredItem, MapStatistics, ClusterSummary
from .filters import available_decades

def calculate_map_statistics(photos: Sequence[GeoPhoto]) -> MapStatistics:
    """
    Counters shown under the map.

    Args:
        photos: Located photos (normally the unfiltered set)

    Returns:
        MapStatistics with photo, location, address and decade counts
    """
    locations = {photo.location for photo in photos if photo.location}
    addresses = sum(1 for photo in photos if photo.address)

    return MapStatistics(
        located_photos=len(photos),
        locations=len(locations),
        specific_addresses=addresses,
        decades=len(available_decades(photos)),
    )

def summarize_clusters(items: Sequence[ClusteredItem]) -> ClusterSummary:
    clusters = [item for item in items if item.kind == "cluster"]

    return ClusterSummary(
        items=len(items),
        clusters=len(clusters),
        individuals=len(items) - len(clusters),
        clustered_photos=sum(cluster.count for cluster in clusters),
        largest_cluster=max((cluster.count for cluster in clusters), default=0),
    )
