"""physical_body.py

Shared physics for every modeled body (planets and asteroids).

A body is anything exposing ``name``, ``diameter`` (km) and ``mass`` (kg).
Planet and Asteroid implement that shape independently; the derived
quantities are plain functions over it so neither type inherits from the
other.
"""

import math
from typing import Protocol

# -----------------------------
# Physical constants
# -----------------------------
G = 6.67430e-11            # m^3 kg^-1 s^-2
EARTH_RADIUS_KM = 6371.0


class InvalidArgument(ValueError):
    """A value is present but physically meaningless (e.g. a negative mass)."""


class PhysicalBody(Protocol):
    name: str
    diameter: float
    mass: float

    def surface_gravity(self) -> float: ...

    def escape_velocity(self) -> float: ...


def check_dimensions(diameter, mass):
    """Raise InvalidArgument unless both diameter and mass are strictly positive."""
    if not diameter > 0:
        raise InvalidArgument(f"Diameter must be positive (got {diameter!r} km).")
    if not mass > 0:
        raise InvalidArgument(f"Mass must be positive (got {mass!r} kg).")


def radius_m(diameter_km: float) -> float:
    return diameter_km * 1000.0 / 2.0


def surface_gravity(body: PhysicalBody) -> float:
    """Surface gravity in m/s^2."""
    r = radius_m(body.diameter)
    return G * body.mass / (r * r)


def escape_velocity(body: PhysicalBody) -> float:
    """Escape velocity in km/s."""
    r = radius_m(body.diameter)
    return math.sqrt(2.0 * G * body.mass / r) / 1000.0
