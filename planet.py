"""Planets: fixed-size bodies that can absorb an asteroid impact."""

import logging

from physical_body import check_dimensions, escape_velocity, surface_gravity

logger = logging.getLogger(__name__)


class Planet:
    """A planet with a name, mean diameter (km) and mass (kg).

    ``mass`` is read-only from the outside; ``absorb_impact`` is the only
    thing allowed to change it.
    """

    def __init__(self, name: str, diameter: float, mass: float):
        check_dimensions(diameter, mass)
        self._name = name
        self._diameter = float(diameter)
        self._mass = float(mass)

    @property
    def name(self) -> str:
        return self._name

    @property
    def diameter(self) -> float:
        return self._diameter

    @property
    def mass(self) -> float:
        return self._mass

    def surface_gravity(self) -> float:
        return surface_gravity(self)

    def escape_velocity(self) -> float:
        return escape_velocity(self)

    def absorb_impact(self, impactor) -> None:
        """Subtract the impactor's mass from this planet.

        There is no floor: an impactor heavier than the planet leaves it with
        zero or negative mass.
        """
        self._mass -= impactor.mass
        logger.info("Impact occurred! %s absorbed %s; new mass %.6e kg",
                    self._name, impactor.name, self._mass)
        if self._mass <= 0:
            logger.warning("%s mass is no longer positive (%.6e kg)", self._name, self._mass)

    def __repr__(self):
        return f"Planet(name={self._name!r}, diameter={self._diameter!r}, mass={self._mass!r})"
