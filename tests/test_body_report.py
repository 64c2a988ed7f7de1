import pytest

from asteroid import Asteroid
from body_report import approach_statistics, asteroid_rows, format_asteroid_table, format_close_approaches, format_planet
from neo_records import load_sample, make_record
from planet import Planet


def test_asteroid_rows_one_per_asteroid():
    asteroids = [Asteroid.from_record(load_sample("asteroid_sample1.json")),
                 Asteroid.from_record(load_sample("asteroid_sample2.json"))]
    rows = asteroid_rows(asteroids)
    assert [r[0] for r in rows] == [1, 2]
    assert rows[0][1] == "154229 (2002 JN97)"
    assert rows[0][-1] == "FINE"
    assert rows[1][-1] == "!DANGER!"


def test_format_asteroid_table_has_headers():
    table = format_asteroid_table([Asteroid.from_record(make_record(name="TableRock"))])
    assert "Energy (Mt TNT)" in table
    assert "TableRock" in table


def test_approach_statistics():
    asteroid = Asteroid.from_record(load_sample("asteroid_sample2.json"))
    stats = approach_statistics(asteroid)
    assert stats["count"] == 2
    assert stats["mean_velocity_km_s"] == pytest.approx((16.6547709893 + 21.0364010271) / 2)
    assert stats["closest_miss_km"] == 12742.0


def test_approach_statistics_without_history():
    stats = approach_statistics(Asteroid.from_record(make_record(approaches=[])))
    assert stats == {"count": 0, "mean_velocity_km_s": 0.0, "closest_miss_km": 0.0}


def test_format_close_approaches_lists_dates():
    text = format_close_approaches(Asteroid.from_record(load_sample("asteroid_sample2.json")))
    assert "2024-10-11" in text
    assert "2031-01-22" in text
    assert "2 approaches" in text


def test_format_planet_skips_derived_values_after_total_loss():
    planet = Planet("Pebble", 0.001, 1.0)
    planet.absorb_impact(Asteroid.from_record(make_record()))
    text = format_planet(planet)
    assert "Pebble" in text
    assert "Surface Gravity" not in text


def test_format_planet_includes_gravity():
    assert "Escape Velocity" in format_planet(Planet("Earth", 12742.0, 5.97237e24))
