#Predefined planets of the solar system, used to seed default impact targets.

from dataclasses import dataclass
from typing import Dict, List

from planet import Planet


@dataclass(frozen=True)
class PlanetData:
    name: str
    diameter: float   # mean diameter [km]
    mass: float       # [kg]


# Ordered from the Sun outwards; Earth is index 2.
PREDEFINED_PLANETS: List[PlanetData] = [
    PlanetData("Mercury", 4879.4, 3.3011e23),
    PlanetData("Venus", 12103.6, 4.8675e24),
    PlanetData("Earth", 12742.0, 5.97237e24),
    PlanetData("Mars", 6779.0, 6.4171e23),
    PlanetData("Jupiter", 139820.0, 1.8982e27),
    PlanetData("Saturn", 116460.0, 5.6834e26),
    PlanetData("Uranus", 50724.0, 8.6810e25),
    PlanetData("Neptune", 49244.0, 1.02413e26),
]

_BY_NAME: Dict[str, PlanetData] = {p.name.lower(): p for p in PREDEFINED_PLANETS}


def planet_names():
    return [p.name for p in PREDEFINED_PLANETS]


def get_planet_data(name: str) -> PlanetData:
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown planet {name!r}; expected one of {', '.join(planet_names())}") from None


def build_planet(name: str) -> Planet:
    """Fresh Planet for a catalog entry; each call returns an independent object."""
    data = get_planet_data(name)
    return Planet(data.name, data.diameter, data.mass)
