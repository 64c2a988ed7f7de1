"""asteroid.py

Near-Earth asteroids built from NASA NeoWs records.

A NeoWs object record looks like::

    {
      "id": "2154229",
      "name": "154229 (2002 JN97)",
      "nasa_jpl_url": "https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr=2154229",
      "absolute_magnitude_h": 16.63,
      "estimated_diameter": {"kilometers": {"estimated_diameter_min": 1.25,
                                            "estimated_diameter_max": 2.80}},
      "is_potentially_hazardous_asteroid": false,
      "close_approach_data": [
        {"close_approach_date": "2024-10-10",
         "relative_velocity": {"kilometers_per_second": "19.75"},
         "miss_distance": {"kilometers": "63953842.15"}}
      ]
    }

Velocities and distances arrive as decimal strings and are parsed here.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Iterable, Tuple

from physical_body import (
    EARTH_RADIUS_KM,
    InvalidArgument,
    check_dimensions,
    escape_velocity,
    surface_gravity,
)

logger = logging.getLogger(__name__)

# -----------------------------
# Model constants
# -----------------------------
ASTEROID_DENSITY_KG_M3 = 3000.0
J_PER_MT_TNT = 4.184e15
MIN_MISS_DISTANCE_KM = 2 * EARTH_RADIUS_KM    # 12742.0
HAZARD_MIN_DIAMETER_KM = 280.0
HAZARD_VELOCITY_KM_S = 5.0


class MissingField(KeyError):
    """A required key is absent from a NeoWs record.

    ``field`` holds the dotted path, e.g.
    ``"estimated_diameter.kilometers.estimated_diameter_min"``.
    """

    def __init__(self, field):
        super().__init__(field)
        self.field = field

    def __str__(self):
        return f"missing required field '{self.field}'"


def _require(record, *path):
    node = record
    for depth, key in enumerate(path):
        if not isinstance(node, Mapping) or key not in node:
            raise MissingField(".".join(path[:depth + 1]))
        node = node[key]
    return node


def _parse_number(value, field):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{field} is not numeric: {value!r}") from None
    if not math.isfinite(number):
        raise InvalidArgument(f"{field} is not finite: {value!r}")
    return number


@dataclass(frozen=True)
class CloseApproachRecord:
    date: str
    relative_velocity_km_s: float
    miss_distance_km: float


def normalize_miss_distance(raw_km: float) -> float:
    """Halve the reported miss distance, never going below two Earth radii."""
    return max(raw_km / 2.0, MIN_MISS_DISTANCE_KM)


def normalize_close_approaches(entries: Iterable[Mapping[str, Any]]) -> Tuple[CloseApproachRecord, ...]:
    """Turn raw ``close_approach_data`` entries into records, keeping source order."""
    approaches = []
    for i, entry in enumerate(entries):
        prefix = f"close_approach_data[{i}]"
        try:
            date = _require(entry, "close_approach_date")
            velocity = _require(entry, "relative_velocity", "kilometers_per_second")
            miss = _require(entry, "miss_distance", "kilometers")
        except MissingField as e:
            raise MissingField(f"{prefix}.{e.field}") from None
        approaches.append(CloseApproachRecord(
            date=str(date),
            relative_velocity_km_s=_parse_number(velocity, f"{prefix}.relative_velocity.kilometers_per_second"),
            miss_distance_km=normalize_miss_distance(
                _parse_number(miss, f"{prefix}.miss_distance.kilometers")),
        ))
    return tuple(approaches)


def estimate_mass(min_diameter_km: float, max_diameter_km: float,
                  density_kg_m3: float = ASTEROID_DENSITY_KG_M3) -> float:
    """Mass (kg) as density times the average of the two sphere volumes.

    This is the mean of the extreme volumes, not the volume of the mean
    diameter.
    """
    r_min = min_diameter_km * 1000.0 / 2.0
    r_max = max_diameter_km * 1000.0 / 2.0
    v_min = (4.0 / 3.0) * math.pi * r_min ** 3
    v_max = (4.0 / 3.0) * math.pi * r_max ** 3
    return density_kg_m3 * (v_min + v_max) / 2.0


def diameter_bounds(record: Mapping[str, Any]) -> Tuple[float, float]:
    """(min, max) estimated diameter in km."""
    d_min = _require(record, "estimated_diameter", "kilometers", "estimated_diameter_min")
    d_max = _require(record, "estimated_diameter", "kilometers", "estimated_diameter_max")
    return (_parse_number(d_min, "estimated_diameter_min"),
            _parse_number(d_max, "estimated_diameter_max"))


def mass_from_record(record: Mapping[str, Any]) -> float:
    """Mass (kg) derived from a record's kilometre diameter estimates."""
    return estimate_mass(*diameter_bounds(record))


@dataclass(frozen=True)
class Asteroid:
    """A near-Earth asteroid.

    ``diameter`` is the minimum estimated diameter. ``reference_velocity_km_s``
    and ``reference_miss_distance_km`` are the values used for impact energy
    and merging; they start as the first close approach's values and are
    summed by ``combine``. ``close_approaches`` is history only.
    """

    name: str
    id: str
    reference_url: str
    absolute_magnitude: float
    min_diameter_km: float
    max_diameter_km: float
    mass: float
    is_hazardous: bool
    close_approaches: Tuple[CloseApproachRecord, ...] = ()
    reference_velocity_km_s: float = 0.0
    reference_miss_distance_km: float = 0.0

    def __post_init__(self):
        check_dimensions(self.min_diameter_km, self.mass)
        object.__setattr__(self, "close_approaches", tuple(self.close_approaches))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Asteroid":
        """Build an asteroid from a NeoWs record.

        Raises MissingField when a required key is absent and InvalidArgument
        when a value is not numeric or the derived diameter/mass is not
        positive. Diameter estimates are read first.
        """
        d_min, d_max = diameter_bounds(record)
        mass = estimate_mass(d_min, d_max)

        name = _require(record, "name")
        neo_id = _require(record, "id")
        url = _require(record, "nasa_jpl_url")
        magnitude = _parse_number(_require(record, "absolute_magnitude_h"), "absolute_magnitude_h")
        hazardous = _require(record, "is_potentially_hazardous_asteroid")
        if not isinstance(hazardous, bool):
            raise InvalidArgument(f"is_potentially_hazardous_asteroid is not a boolean: {hazardous!r}")
        approaches = normalize_close_approaches(_require(record, "close_approach_data"))

        if approaches:
            ref_velocity = approaches[0].relative_velocity_km_s
            ref_miss = approaches[0].miss_distance_km
        else:
            ref_velocity = ref_miss = 0.0

        asteroid = cls(
            name=str(name),
            id=str(neo_id),
            reference_url=str(url),
            absolute_magnitude=magnitude,
            min_diameter_km=d_min,
            max_diameter_km=d_max,
            mass=mass,
            is_hazardous=hazardous,
            close_approaches=approaches,
            reference_velocity_km_s=ref_velocity,
            reference_miss_distance_km=ref_miss,
        )
        logger.debug("Built asteroid %s (%s) with %d close approaches",
                     asteroid.name, asteroid.id, len(approaches))
        return asteroid

    @property
    def diameter(self) -> float:
        return self.min_diameter_km

    def surface_gravity(self) -> float:
        return surface_gravity(self)

    def escape_velocity(self) -> float:
        return escape_velocity(self)

    def calculate_impact_energy(self) -> float:
        """Kinetic energy at the reference velocity, in megatons of TNT."""
        velocity_m_s = self.reference_velocity_km_s * 1000.0
        return 0.5 * self.mass * velocity_m_s ** 2 / J_PER_MT_TNT

    def duplicate(self) -> "Asteroid":
        """Independent copy, including its own close-approach sequence."""
        return replace(self, close_approaches=tuple(replace(a) for a in self.close_approaches))


def is_hazardous_by_policy(min_diameter_km: float, reference_velocity_km_s: float) -> bool:
    return min_diameter_km > HAZARD_MIN_DIAMETER_KM or reference_velocity_km_s > HAZARD_VELOCITY_KM_S


def combine(a: Asteroid, b: Asteroid) -> Asteroid:
    """Merge two asteroids into a new one. Neither input is modified.

    Diameters, mass and the reference velocity/miss distance are summed and
    the hazard flag is recomputed from the summed values. Identity fields and
    the close-approach history come from ``a`` alone; ``b`` contributes
    nothing else, so ``combine(a, b)`` and ``combine(b, a)`` differ.
    """
    min_diameter = a.min_diameter_km + b.min_diameter_km
    velocity = a.reference_velocity_km_s + b.reference_velocity_km_s
    combined = replace(
        a.duplicate(),
        name=f"{a.name} & {b.name}",
        min_diameter_km=min_diameter,
        max_diameter_km=a.max_diameter_km + b.max_diameter_km,
        mass=a.mass + b.mass,
        reference_velocity_km_s=velocity,
        reference_miss_distance_km=a.reference_miss_distance_km + b.reference_miss_distance_km,
        is_hazardous=is_hazardous_by_policy(min_diameter, velocity),
    )
    logger.debug("Combined %s: %.3f km, %.3f km/s, hazardous=%s",
                 combined.name, combined.min_diameter_km, velocity, combined.is_hazardous)
    return combined
