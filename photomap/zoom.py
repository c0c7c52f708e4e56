"""
Zoom level to clustering radius mapping.

The radius is the ground distance covered by one marker at a given zoom,
so markers closer than that would overlap on screen. It halves with each
zoom step, is capped at a country-scale distance when zoomed out, and is
exactly zero at the map's maximum zoom where every photo is shown on its
own.
"""
import math
from typing import Dict, Optional

from .config import ClusteringConfig, config as default_config

# Web Mercator ground resolution at the equator for zoom 0, in metres/pixel.
EQUATOR_METRES_PER_PIXEL = 156543.03392

def clamp_zoom(zoom: float, cfg: Optional[ClusteringConfig] = None) -> int:
    """Clamp a zoom level into the supported range and floor it to an integer."""
    cfg = cfg or default_config
    if zoom is None or (isinstance(zoom, float) and math.isnan(zoom)):
        return cfg.min_zoom
    clamped = max(cfg.min_zoom, min(cfg.max_zoom, zoom))
    return int(math.floor(clamped))

def metres_per_pixel(zoom: int, latitude: float) -> float:
    """Ground resolution of a Web Mercator tile pixel at ``latitude``."""
    return EQUATOR_METRES_PER_PIXEL * math.cos(math.radians(latitude)) / (2 ** zoom)

def radius_for_zoom(zoom: float, cfg: Optional[ClusteringConfig] = None) -> float:
    """
    Clustering radius in kilometres for a map zoom level.

    Args:
        zoom: Map zoom level; values outside the supported range are clamped
        cfg: Optional config overriding the global one

    Returns:
        float: Non-negative radius, non-increasing in zoom, 0.0 at max zoom
    """
    cfg = cfg or default_config
    level = clamp_zoom(zoom, cfg)
    if level >= cfg.max_zoom:
        return 0.0

    marker_km = cfg.marker_radius_px * metres_per_pixel(level, cfg.reference_latitude) / 1000.0
    return max(0.0, min(cfg.max_radius_km, marker_km))

def radius_table(cfg: Optional[ClusteringConfig] = None) -> Dict[int, float]:
    """Radius for every supported zoom level, keyed by zoom."""
    cfg = cfg or default_config
    return {level: radius_for_zoom(level, cfg) for level in range(cfg.min_zoom, cfg.max_zoom + 1)}
