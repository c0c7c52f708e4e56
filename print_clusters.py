#!/usr/bin/env python3
"""
Script to print map markers for a photo export at a given zoom level.

Usage: python print_clusters.py photos.json [zoom] [--decade 1960] [--search Split]
"""

import argparse
import sys

from photomap.map_view import MapView
from photomap.photo_source import load_photos_from_json, load_municipalities
from photomap.zoom import radius_table
from photomap.error_handling import PhotoSourceError, handle_error
from photomap.app_insights import app_insights

def print_clusters(path, zoom, decade=None, search="", municipalities_path=None, viewport_width=None):
    """Print clustered markers and map statistics."""
    municipalities = load_municipalities(municipalities_path) if municipalities_path else None

    view = MapView(viewport_width=viewport_width)
    view.load_photos(load_photos_from_json(path), municipalities)
    view.set_zoom(zoom)
    view.set_decade(decade)
    view.set_search(search)

    stats = view.statistics()
    print("=== Photo Map ===\n")
    print(f"Located photos: {stats.located_photos}")
    print(f"Locations: {stats.locations}")
    print(f"Specific addresses: {stats.specific_addresses}")
    print(f"Decades: {stats.decades} {view.available_decades}")
    print(f"Zoom {view.zoom}, radius {view.radius:.4f} km, {len(view.filtered_photos)} photos after filters\n")

    for item in view.clustered_items():
        lat, lon = item.position.as_tuple()
        if item.kind == "cluster":
            print(f"[{item.key}] {item.count} photos at ({lat:.5f}, {lon:.5f})")
            for photo in item.preview():
                print(f"    {photo.id}: {photo.location} {photo.year}")
            if item.count > 8:
                print(f"    ... and {item.count - 8} more")
        else:
            print(f"[{item.key}] {item.photo.location} {item.photo.year} at ({lat:.5f}, {lon:.5f})")

    summary = view.cluster_summary()
    print(f"\n{summary.items} markers: {summary.clusters} clusters, {summary.individuals} individual")

def print_radius_table():
    for zoom, radius in radius_table().items():
        print(f"zoom {zoom:2d}: {radius:10.4f} km")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print photo map markers")
    parser.add_argument("path", nargs="?", help="Photo export (JSON)")
    parser.add_argument("zoom", nargs="?", type=float, default=7)
    parser.add_argument("--decade", type=int, default=None)
    parser.add_argument("--search", default="")
    parser.add_argument("--municipalities", default=None, help="Municipality centres (JSON)")
    parser.add_argument("--width", type=int, default=None, help="Viewport width in pixels (below 768 allows zoom 6)")
    parser.add_argument("--radius-table", action="store_true", help="Print radius per zoom and exit")
    args = parser.parse_args()

    if args.radius_table or not args.path:
        print_radius_table()
    else:
        try:
            print_clusters(args.path, args.zoom, args.decade, args.search, args.municipalities, args.width)
        except PhotoSourceError as e:
            app_insights.track_exception(e)
            handle_error(e, "print_clusters", raise_error=False)
            sys.exit(1)
