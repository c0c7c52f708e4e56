#!/usr/bin/env python3
"""
generate_sample_photos.py

Generates a sample photo export around Croatian towns, in the same JSON
shape the photo store exports, for trying out the map clustering.
"""

import json
import random
import sys

# Configuration
NUM_PHOTOS = 300
OUTPUT_FILE = "sample_photos.json"

# GPS clusters: define some locations
GPS_CLUSTERS = [
    {"lat": 45.8150, "lon": 15.9819, "name": "Zagreb"},
    {"lat": 43.5081, "lon": 16.4402, "name": "Split"},
    {"lat": 45.3271, "lon": 14.4422, "name": "Rijeka"},
    {"lat": 45.5550, "lon": 18.6955, "name": "Osijek"},
    {"lat": 42.6507, "lon": 18.0944, "name": "Dubrovnik"},
    {"lat": 44.1194, "lon": 15.2314, "name": "Zadar"},
]

AUTHORS = ["Ivan Horvat", "Ana Kovačević", "Marko Babić", "Petra Marić", "Nepoznat"]

def generate_coordinates(cluster):
    """Generate coordinates near a town, sometimes missing or broken."""
    roll = random.random()
    if roll < 0.05:
        return None  # 5% without coordinates
    if roll < 0.07:
        return {"latitude": "n/a", "longitude": None}  # 2% malformed

    # Add some variation to GPS
    lat = cluster["lat"] + random.uniform(-0.02, 0.02)
    lon = cluster["lon"] + random.uniform(-0.02, 0.02)
    coords = {"latitude": round(lat, 6), "longitude": round(lon, 6)}
    if random.random() < 0.3:
        coords["address"] = f"Ulica {random.randint(1, 120)}, {cluster['name']}"
    return coords

def generate_photo(index):
    cluster = random.choice(GPS_CLUSTERS)
    year = random.randint(1890, 1999)

    photo = {
        "id": f"photo-{index:04d}",
        "imageUrl": f"https://example.org/photos/{index:04d}.jpg",
        "description": f"Stara fotografija, {cluster['name']} {year}.",
        "year": str(year),
        "author": random.choice(AUTHORS),
        "location": cluster["name"],
        "likes": random.randint(0, 50),
        "views": random.randint(0, 500),
    }
    coords = generate_coordinates(cluster)
    if coords is not None:
        photo["coordinates"] = coords
    return photo

def main():
    output = sys.argv[1] if len(sys.argv) > 1 else OUTPUT_FILE
    random.seed(42)

    photos = [generate_photo(i + 1) for i in range(NUM_PHOTOS)]

    with open(output, "w", encoding="utf-8") as fh:
        json.dump({"photos": photos}, fh, ensure_ascii=False, indent=2)

    print(f"Wrote {len(photos)} photos to {output}")

if __name__ == "__main__":
    main()
