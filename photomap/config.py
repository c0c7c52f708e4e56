"""
Runtime configuration for the photo map clustering pipeline.

Values come from environment variables when present, otherwise the
defaults below are used. Unparsable values fall back to the default.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Centre of Croatia, used as the map's initial centre and as the
# reference latitude for ground resolution.
CROATIA_CENTER = (44.5319, 16.7789)


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid value for {name}: {raw!r}")
        return default


@dataclass
class ClusteringConfig:
    """Tuning knobs for the zoom-to-radius curve and the map view."""
    min_zoom: int = 1
    max_zoom: int = 19
    marker_radius_px: float = 40.0
    max_radius_km: float = 250.0
    reference_latitude: float = 44.5
    cache_size: int = 32
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClusteringConfig":
        """Build a config from PHOTOMAP_* environment variables."""
        defaults = cls()
        return cls(
            min_zoom=_env("PHOTOMAP_MIN_ZOOM", defaults.min_zoom, int),
            max_zoom=_env("PHOTOMAP_MAX_ZOOM", defaults.max_zoom, int),
            marker_radius_px=_env("PHOTOMAP_MARKER_RADIUS_PX", defaults.marker_radius_px, float),
            max_radius_km=_env("PHOTOMAP_MAX_RADIUS_KM", defaults.max_radius_km, float),
            reference_latitude=_env("PHOTOMAP_REFERENCE_LATITUDE", defaults.reference_latitude, float),
            cache_size=_env("PHOTOMAP_CACHE_SIZE", defaults.cache_size, int),
            log_level=_env("PHOTOMAP_LOG_LEVEL", defaults.log_level, str),
            log_file=os.getenv("PHOTOMAP_LOG_FILE") or None,
        )


# Global config instance
config = ClusteringConfig.from_env()
