import logging
from collections import OrderedDict
from dataclasses import astuple
from typing import Any, List, Optional, Sequence, Tuple

from .models import GeoPhoto, ClusteredItem
from .config import ClusteringConfig, config as default_config
from .clustering import cluster_photos_for_zoom
from .zoom import clamp_zoom

logger = logging.getLogger(__name__)

Fingerprint = Tuple[Tuple[Any, ...], ...]

def photo_fingerprint(photos: Sequence[GeoPhoto]) -> Fingerprint:
    """
    Order-sensitive key for a photo list.

    Covers ids, positions and the record payload, so reloading a photo with
    the same id and position but new details is a cache miss.
    """
    return tuple(
        (p.id, p.latitude, p.longitude, p.address, astuple(p.photo))
        for p in photos
    )

class ClusterCache:
    """
    Memoizes clustering output per (photo list, zoom).

    Owned by the caller, not the engine: the engine stays a pure function and
    this cache only decides whether to call it. Least recently used entries
    are evicted once ``max_entries`` is reached.
    """

    def __init__(self, max_entries: Optional[int] = None, cfg: Optional[ClusteringConfig] = None):
        self.cfg = cfg or default_config
        self.max_entries = max(1, max_entries if max_entries is not None else self.cfg.cache_size)
        self._entries: "OrderedDict[Tuple[Fingerprint, int], List[ClusteredItem]]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(self, photos: Sequence[GeoPhoto], zoom: float) -> List[ClusteredItem]:
        key = (photo_fingerprint(photos), clamp_zoom(zoom, self.cfg))

        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            self.hits += 1
            return list(cached)

        self.misses += 1
        items = cluster_photos_for_zoom(photos, key[1], self.cfg)
        self._entries[key] = items
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
            logger.debug(f"Evicted oldest clustering result (max {self.max_entries})")
        return list(items)

    def clear(self):
        self._entries.clear()
        self.hits = 0
        self.misses = 0
