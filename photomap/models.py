from typing import Optional, Tuple, Union, List, Literal
from dataclasses import dataclass, field

@dataclass
class Coordinates:
    """Raw coordinates as stored on a photo record; may be missing or malformed."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None

@dataclass
class Photo:
    """Represents a heritage photo record as delivered by the photo store."""
    id: str = ""
    image_url: str = ""
    description: str = ""
    year: str = ""
    author: str = ""
    location: str = ""
    coordinates: Optional[Coordinates] = None
    likes: int = 0
    views: int = 0

@dataclass(frozen=True)
class Position:
    """A validated latitude/longitude pair in degrees."""
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

@dataclass(frozen=True)
class GeoPhoto:
    """A photo that passed coordinate filtering, with its normalized position."""
    id: str
    position: Position
    photo: Photo
    address: Optional[str] = None

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    @property
    def location(self) -> str:
        return self.photo.location

    @property
    def year(self) -> str:
        return self.photo.year

@dataclass(frozen=True)
class Individual:
    """A photo rendered as its own marker."""
    position: Position
    photo: GeoPhoto
    kind: Literal["individual"] = field(default="individual", init=False)

    @property
    def key(self) -> str:
        return f"photo-{self.photo.id}"

    @property
    def photos(self) -> List[GeoPhoto]:
        return [self.photo]

@dataclass(frozen=True)
class Cluster:
    """Two or more photos grouped under one marker at their centroid."""
    position: Position
    members: Tuple[GeoPhoto, ...]
    count: int
    kind: Literal["cluster"] = field(default="cluster", init=False)

    @property
    def key(self) -> str:
        return f"cluster-{self.members[0].id}-{self.count}"

    @property
    def photos(self) -> List[GeoPhoto]:
        return list(self.members)

    def preview(self, limit: int = 8) -> List[GeoPhoto]:
        """First members shown in the cluster popup."""
        return list(self.members[:limit])

# Tagged union produced by the clustering engine; dispatch on ``item.kind``.
ClusteredItem = Union[Individual, Cluster]

@dataclass
class MapStatistics:
    """Summary counters shown under the map."""
    located_photos: int = 0
    locations: int = 0
    specific_addresses: int = 0
    decades: int = 0

@dataclass
class ClusterSummary:
    """Counts describing a single clustering pass."""
    items: int = 0
    clusters: int = 0
    individuals: int = 0
    clustered_photos: int = 0
    largest_cluster: int = 0
