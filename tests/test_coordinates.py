"""
Tests for coordinate filtering and the municipality fallback.
"""

import pytest
from photomap.models import Photo, Coordinates, Position
from photomap.coordinates import (
    is_valid_coordinate,
    to_geo_photo,
    filter_photos_with_coordinates,
    apply_location_fallback,
)


class TestCoordinateValidation:
    """Test single coordinate pair validation."""

    @pytest.mark.parametrize("lat,lon", [
        (45.8150, 15.9819),
        (0.0, 0.0),
        (90.0, 180.0),
        (-90.0, -180.0),
        (45, 16),
        ("45.1", "16.2"),
    ])
    def test_valid_coordinates(self, lat, lon):
        """Finite numbers inside the ranges are accepted."""
        assert is_valid_coordinate(lat, lon) is True

    @pytest.mark.parametrize("lat,lon", [
        (None, 15.0),
        (45.0, None),
        (float("nan"), 15.0),
        (45.0, float("inf")),
        (float("-inf"), 15.0),
        (90.5, 15.0),
        (-91.0, 15.0),
        (45.0, 180.1),
        (45.0, -181.0),
        (True, 15.0),
        ("abc", 15.0),
        ([45.0], 15.0),
    ])
    def test_invalid_coordinates(self, lat, lon):
        """Missing, non-finite, out of range or non-numeric values are rejected."""
        assert is_valid_coordinate(lat, lon) is False


class TestCoordinateFilter:
    """Test photo filtering by coordinates."""

    def test_to_geo_photo_attaches_position(self):
        """Valid photos get a normalized position and keep their record."""
        photo = Photo(id="a", location="Zagreb",
                      coordinates=Coordinates(45.8150, 15.9819, "Ilica 1"))

        geo = to_geo_photo(photo)

        assert geo is not None
        assert geo.id == "a"
        assert geo.position == Position(45.8150, 15.9819)
        assert geo.address == "Ilica 1"
        assert geo.photo is photo
        assert geo.location == "Zagreb"

    def test_to_geo_photo_without_coordinates(self):
        """Photos without a coordinates field are rejected."""
        assert to_geo_photo(Photo(id="a")) is None

    def test_filter_preserves_order_and_skips_bad_records(self):
        """Bad geodata is dropped silently and order is kept."""
        photos = [
            Photo(id="1", coordinates=Coordinates(45.0, 16.0)),
            Photo(id="2"),
            Photo(id="3", coordinates=Coordinates(float("nan"), 16.0)),
            Photo(id="4", coordinates=Coordinates(43.5, 16.4)),
            Photo(id="5", coordinates=Coordinates(95.0, 16.0)),
            Photo(id="6", coordinates=Coordinates(44.0, None)),
            Photo(id="7", coordinates=Coordinates(42.6, 18.1)),
        ]

        result = filter_photos_with_coordinates(photos)

        assert [p.id for p in result] == ["1", "4", "7"]

    def test_filter_empty_input(self):
        """Empty input gives empty output."""
        assert filter_photos_with_coordinates([]) == []

    def test_filter_string_coordinates_are_normalized(self):
        """Numeric strings from loose exports become floats."""
        photos = [Photo(id="1", coordinates=Coordinates("45.5", "16.5"))]

        result = filter_photos_with_coordinates(photos)

        assert result[0].latitude == 45.5
        assert isinstance(result[0].longitude, float)


class TestLocationFallback:
    """Test filling missing coordinates from municipality centres."""

    @pytest.fixture
    def municipalities(self):
        return {
            "Zagreb": Coordinates(45.8150, 15.9819),
            "Split": Coordinates(43.5081, 16.4402),
        }

    def test_fallback_fills_missing_coordinates(self, municipalities):
        """Photos without coordinates get their town centre."""
        photos = [Photo(id="1", location="split")]

        result = apply_location_fallback(photos, municipalities)

        assert result[0].coordinates.latitude == 43.5081
        assert result[0].coordinates.longitude == 16.4402

    def test_fallback_keeps_valid_coordinates(self, municipalities):
        """Photos with their own coordinates are untouched."""
        photo = Photo(id="1", location="Zagreb", coordinates=Coordinates(45.80, 15.95))

        result = apply_location_fallback([photo], municipalities)

        assert result[0] is photo

    def test_fallback_replaces_malformed_keeping_address(self, municipalities):
        """Malformed coordinates are replaced but the address survives."""
        photo = Photo(id="1", location="Zagreb",
                      coordinates=Coordinates(float("nan"), None, "Ilica 5"))

        result = apply_location_fallback([photo], municipalities)

        assert result[0].coordinates == Coordinates(45.8150, 15.9819, "Ilica 5")
        # Input record is not mutated
        assert photo.coordinates.address == "Ilica 5"
        assert photo.coordinates.longitude is None

    def test_fallback_unknown_location(self, municipalities):
        """Unknown towns stay without coordinates and are later filtered out."""
        photos = [Photo(id="1", location="Atlantida"), Photo(id="2")]

        result = apply_location_fallback(photos, municipalities)

        assert [p.coordinates for p in result] == [None, None]
        assert filter_photos_with_coordinates(result) == []
