"""
State holder for the interactive photo map.

Mirrors what the map page keeps between events: all located photos, the
active decade/location filters, the current zoom, and a cache of
clustering results so re-reading the markers at an unchanged
(photos, zoom) does not recompute them.
"""
import time
import logging
from typing import Dict, Iterable, List, Optional

from .models import Photo, Coordinates, GeoPhoto, ClusteredItem, MapStatistics, ClusterSummary
from .config import ClusteringConfig, CROATIA_CENTER, config as default_config
from .coordinates import apply_location_fallback, filter_photos_with_coordinates
from .filters import PhotoFilters, apply_filters, available_decades
from .statistics import calculate_map_statistics, summarize_clusters
from .cache import ClusterCache
from .zoom import clamp_zoom, radius_for_zoom
from .app_insights import AppInsights, app_insights

logger = logging.getLogger(__name__)

MOBILE_BREAKPOINT_PX = 768

def initial_zoom_for_width(viewport_width: Optional[int]) -> int:
    """Country view: 6 on narrow screens, 7 otherwise."""
    if viewport_width is not None and viewport_width < MOBILE_BREAKPOINT_PX:
        return 6
    return 7

def min_zoom_for_width(viewport_width: Optional[int]) -> int:
    """The map cannot zoom out past the country view for the viewport."""
    return initial_zoom_for_width(viewport_width)

class MapView:
    def __init__(self, cfg: Optional[ClusteringConfig] = None,
                 cache: Optional[ClusterCache] = None,
                 telemetry: Optional[AppInsights] = None,
                 viewport_width: Optional[int] = None):
        self.cfg = cfg or default_config
        self.cache = cache or ClusterCache(cfg=self.cfg)
        self.telemetry = telemetry or app_insights
        self.center = CROATIA_CENTER
        self.min_zoom = clamp_zoom(min_zoom_for_width(viewport_width), self.cfg)
        self.zoom = clamp_zoom(initial_zoom_for_width(viewport_width), self.cfg)
        self.filters = PhotoFilters()
        self.photos: List[GeoPhoto] = []
        self.filtered_photos: List[GeoPhoto] = []

    def load_photos(self, records: Iterable[Photo],
                    municipalities: Optional[Dict[str, Coordinates]] = None) -> int:
        """
        Replace the map's photos.

        Args:
            records: Photo records from the store
            municipalities: Optional town centres for photos without coordinates

        Returns:
            int: Number of photos that ended up on the map
        """
        records = list(records)
        if municipalities:
            records = apply_location_fallback(records, municipalities)

        self.photos = filter_photos_with_coordinates(records)
        skipped = len(records) - len(self.photos)
        if skipped:
            self.telemetry.track_photos_filtered(skipped)

        self._refilter()
        self.telemetry.track_event("map_photos_loaded", {"located": len(self.photos), "skipped": skipped})
        logger.info(f"Map loaded {len(self.photos)} located photos out of {len(records)}")
        return len(self.photos)

    def _refilter(self):
        self.filtered_photos = apply_filters(self.photos, self.filters)

    def set_zoom(self, zoom: float) -> int:
        self.zoom = max(self.min_zoom, clamp_zoom(zoom, self.cfg))
        return self.zoom

    def set_viewport_width(self, viewport_width: Optional[int]) -> int:
        """Apply a resized viewport: new minimum zoom, zooming in if now below it."""
        self.min_zoom = clamp_zoom(min_zoom_for_width(viewport_width), self.cfg)
        if self.zoom < self.min_zoom:
            self.zoom = self.min_zoom
        return self.zoom

    def set_decade(self, decade: Optional[int]):
        self.filters = PhotoFilters(decade=decade, search=self.filters.search)
        self._refilter()

    def set_search(self, search: str):
        self.filters = PhotoFilters(decade=self.filters.decade, search=search or "")
        self._refilter()

    def clear_filters(self):
        self.filters = PhotoFilters()
        self._refilter()

    @property
    def radius(self) -> float:
        return radius_for_zoom(self.zoom, self.cfg)

    @property
    def available_decades(self) -> List[int]:
        return available_decades(self.photos)

    def clustered_items(self) -> List[ClusteredItem]:
        """Markers for the filtered photos at the current zoom."""
        misses_before = self.cache.misses
        started = time.perf_counter()
        items = self.cache.get_or_compute(self.filtered_photos, self.zoom)

        if self.cache.misses != misses_before:
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            cluster_count = sum(1 for item in items if item.kind == "cluster")
            self.telemetry.track_clustering_pass(len(self.filtered_photos), cluster_count, elapsed_ms)
        return items

    def statistics(self) -> MapStatistics:
        return calculate_map_statistics(self.photos)

    def cluster_summary(self) -> ClusterSummary:
        return summarize_clusters(self.clustered_items())
