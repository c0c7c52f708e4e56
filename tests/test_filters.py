"""
Tests for decade and location filters and map statistics.
"""

import pytest
from photomap.models import Photo, GeoPhoto, Position, Cluster, Individual, MapStatistics, ClusterSummary
from photomap.filters import (
    extract_year,
    extract_decade,
    available_decades,
    filter_by_decade,
    filter_by_location,
    PhotoFilters,
    apply_filters,
)
from photomap.statistics import calculate_map_statistics, summarize_clusters


def make_photo(photo_id, year="", location="", address=None, lat=45.0, lon=16.0):
    photo = Photo(id=photo_id, year=year, location=location)
    return GeoPhoto(id=photo_id, position=Position(lat, lon), photo=photo, address=address)


@pytest.fixture
def photos():
    return [
        make_photo("1", "1965.", "Zagreb", "Ilica 12"),
        make_photo("2", "1960-ih", "Split"),
        make_photo("3", "1969", "Zagreb"),
        make_photo("4", "1970", "Rijeka", "Korzo 3"),
        make_photo("5", "oko 1930.", "Osijek"),
        make_photo("6", "", "Zagreb", "Splitska 4"),
        make_photo("7", "1912", "Dubrovnik"),
    ]


class TestYearParsing:
    """Test year and decade extraction."""

    @pytest.mark.parametrize("year,expected", [
        ("1965", 1965),
        ("1965.", 1965),
        ("1960-ih", 1960),
        (" 1901", 1901),
        ("oko 1930.", None),
        ("", None),
        (None, None),
    ])
    def test_extract_year(self, year, expected):
        assert extract_year(year) == expected

    def test_extract_decade(self):
        assert extract_decade("1968") == 1960
        assert extract_decade("1970.") == 1970
        assert extract_decade("nepoznato") is None

    def test_available_decades_sorted_unique(self, photos):
        """Decades are unique and ascending; unparsable years are ignored."""
        assert available_decades(photos) == [1910, 1960, 1970]


class TestPhotoFilters:
    """Test decade and location filtering."""

    def test_filter_by_decade(self, photos):
        """Years in [decade, decade + 10) are kept, in input order."""
        result = filter_by_decade(photos, 1960)
        assert [p.id for p in result] == ["1", "2", "3"]

    def test_filter_by_decade_none_keeps_all(self, photos):
        assert filter_by_decade(photos, None) == photos

    def test_filter_by_location_matches_name(self, photos):
        """Location search is case-insensitive."""
        result = filter_by_location(photos, "zagreb")
        assert [p.id for p in result] == ["1", "3", "6"]

    def test_filter_by_location_matches_address(self, photos):
        """Addresses are searched as well as location names."""
        result = filter_by_location(photos, "split")
        assert [p.id for p in result] == ["2", "6"]

    def test_filter_by_location_blank_keeps_all(self, photos):
        assert filter_by_location(photos, "   ") == photos

    def test_apply_filters_combines_both(self, photos):
        filters = PhotoFilters(decade=1960, search="Zagreb")
        result = apply_filters(photos, filters)
        assert [p.id for p in result] == ["1", "3"]
        assert filters.is_active

    def test_default_filters_are_inactive(self, photos):
        filters = PhotoFilters()
        assert not filters.is_active
        assert apply_filters(photos, filters) == photos


class TestStatistics:
    """Test map and clustering summaries."""

    def test_calculate_map_statistics(self, photos):
        stats = calculate_map_statistics(photos)
        assert stats == MapStatistics(
            located_photos=7,
            locations=5,
            specific_addresses=3,
            decades=3,
        )

    def test_calculate_map_statistics_empty(self):
        assert calculate_map_statistics([]) == MapStatistics()

    def test_summarize_clusters(self, photos):
        items = [
            Cluster(position=Position(45.0, 16.0), members=tuple(photos[:3]), count=3),
            Cluster(position=Position(45.0, 16.0), members=tuple(photos[3:5]), count=2),
            Individual(position=photos[5].position, photo=photos[5]),
        ]

        summary = summarize_clusters(items)

        assert summary == ClusterSummary(
            items=3,
            clusters=2,
            individuals=1,
            clustered_photos=5,
            largest_cluster=3,
        )

    def test_summarize_clusters_empty(self):
        assert summarize_clusters([]) == ClusterSummary()
