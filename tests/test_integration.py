import json

import pytest

from asteroid import Asteroid, combine
from impact_simulator import main
from neo_records import DATA_DIR, load_sample, make_approach, make_record
from planet_catalog import PREDEFINED_PLANETS, build_planet
from planet import Planet


def test_asteroid_impact_on_earth():
    earth_data = PREDEFINED_PLANETS[2]
    earth = Planet(earth_data.name, earth_data.diameter, earth_data.mass)
    asteroid = Asteroid.from_record(load_sample("asteroid_sample1.json"))

    assert asteroid.calculate_impact_energy() > 1000.0

    original = earth.mass
    earth.absorb_impact(asteroid)
    assert earth.mass == original - asteroid.mass


def test_merge_then_impact():
    a = Asteroid.from_record(make_record("11111", "AsteroidOne", 0.5, 1.0,
                                         approaches=[make_approach(velocity="10.0")]))
    b = Asteroid.from_record(make_record("22222", "AsteroidTwo", 0.7, 1.2,
                                         approaches=[make_approach(velocity="12.5")]))
    combined = combine(a, b)
    assert combined.is_hazardous is True
    assert combined.reference_velocity_km_s == 22.5

    mars = build_planet("Mars")
    before = mars.mass
    mars.absorb_impact(combined)
    assert mars.mass == before - (a.mass + b.mass)


def test_cli_runs_scenario_from_file(tmp_path, capsys):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([load_sample("asteroid_sample1.json"), load_sample("asteroid_sample2.json")]),
                    encoding="utf-8")

    assert main(["--input", str(path), "--planet", "mars", "--combine"]) == 0

    out = capsys.readouterr().out
    assert "154229 (2002 JN97) & 230111 (2001 BE10)" in out
    assert "Before impact:" in out
    assert "After impact:" in out


def test_cli_fails_without_asteroids(tmp_path, capsys):
    record = make_record()
    del record["estimated_diameter"]
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(record), encoding="utf-8")

    assert main(["--input", str(path)]) == 1
    assert "No asteroids could be loaded." in capsys.readouterr().out


def test_cli_verbose_prints_approaches(capsys):
    assert main(["--input", str(DATA_DIR / "asteroid_sample2.json"), "--verbose"]) == 0
    assert "2031-01-22" in capsys.readouterr().out


def test_cli_rejects_negative_limit(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(DATA_DIR / "asteroid_sample1.json"), "--limit", "-1"])
    assert exc.value.code == 2
    assert "--limit" in capsys.readouterr().err


def test_cli_limit_keeps_first_asteroids(tmp_path, capsys):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([load_sample("asteroid_sample1.json"), load_sample("asteroid_sample2.json")]),
                    encoding="utf-8")
    assert main(["--input", str(path), "--limit", "1"]) == 0
    out = capsys.readouterr().out
    assert "154229 (2002 JN97)" in out
    assert "230111 (2001 BE10)" not in out
