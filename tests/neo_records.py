"""Builders for NeoWs-shaped records used across the tests."""

import json
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"


def load_sample(name):
    with (DATA_DIR / name).open(encoding="utf-8") as f:
        return json.load(f)


def make_approach(date="2024-10-10", velocity="10.0", miss="1000000"):
    return {
        "close_approach_date": date,
        "relative_velocity": {"kilometers_per_second": velocity},
        "miss_distance": {"kilometers": miss},
        "orbiting_body": "Earth",
    }


def make_record(neo_id="11111", name="AsteroidOne", d_min=0.5, d_max=1.0,
                hazardous=False, magnitude=25.0, approaches=None):
    if approaches is None:
        approaches = [make_approach()]
    return {
        "id": neo_id,
        "neo_reference_id": neo_id,
        "name": name,
        "nasa_jpl_url": f"https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr={neo_id}",
        "absolute_magnitude_h": magnitude,
        "estimated_diameter": {
            "kilometers": {
                "estimated_diameter_min": d_min,
                "estimated_diameter_max": d_max,
            }
        },
        "is_potentially_hazardous_asteroid": hazardous,
        "close_approach_data": approaches,
    }
