"""body_report.py

Text tables for planets and asteroids.

Nothing here feeds back into the model; it only reads accessors and the
derived quantities and formats them with tabulate.
"""

from typing import Dict, List

import numpy as np
from tabulate import tabulate

TABLE_FORMAT = "fancy_grid"

ASTEROID_HEADERS = [
    "#",
    "Name",
    "ID",
    "Diameter (km)",
    "Mass (kg)",
    "Velocity (km/s)",
    "Miss Dist. (km)",
    "Energy (Mt TNT)",
    "Hazardous",
]


def approach_statistics(asteroid) -> Dict[str, float]:
    """Count, mean relative velocity and closest miss distance over the approach history."""
    approaches = asteroid.close_approaches
    if not approaches:
        return {"count": 0, "mean_velocity_km_s": 0.0, "closest_miss_km": 0.0}
    velocities = np.array([a.relative_velocity_km_s for a in approaches], dtype=float)
    misses = np.array([a.miss_distance_km for a in approaches], dtype=float)
    return {
        "count": len(approaches),
        "mean_velocity_km_s": float(velocities.mean()),
        "closest_miss_km": float(misses.min()),
    }


def asteroid_rows(asteroids) -> List[list]:
    rows = []
    for idx, a in enumerate(asteroids, start=1):
        rows.append([
            idx,
            a.name,
            a.id,
            f"{a.min_diameter_km:,.3f} - {a.max_diameter_km:,.3f}",
            f"{a.mass:.3e}",
            f"{a.reference_velocity_km_s:,.2f}",
            f"{a.reference_miss_distance_km:,.0f}",
            f"{a.calculate_impact_energy():,.2f}",
            "!DANGER!" if a.is_hazardous else "FINE",
        ])
    return rows


def format_asteroid_table(asteroids) -> str:
    return tabulate(asteroid_rows(asteroids), headers=ASTEROID_HEADERS, tablefmt=TABLE_FORMAT)


def format_close_approaches(asteroid) -> str:
    rows = [[a.date, f"{a.relative_velocity_km_s:,.2f}", f"{a.miss_distance_km:,.0f}"]
            for a in asteroid.close_approaches]
    stats = approach_statistics(asteroid)
    table = tabulate(rows, headers=["Date", "Velocity (km/s)", "Miss Dist. (km)"], tablefmt=TABLE_FORMAT)
    return (f"{asteroid.name} ({asteroid.id}) - {asteroid.reference_url}\n"
            f"Absolute magnitude (H): {asteroid.absolute_magnitude}\n"
            f"{table}\n"
            f"{stats['count']} approaches, mean velocity {stats['mean_velocity_km_s']:,.2f} km/s, "
            f"closest {stats['closest_miss_km']:,.0f} km")


def format_planet(planet) -> str:
    rows = [
        ["Mass (kg)", f"{planet.mass:.6e}"],
        ["Diameter (km)", f"{planet.diameter:,.1f}"],
    ]
    # Derived quantities are meaningless once an impact has driven the mass non-positive
    if planet.mass > 0:
        rows.append(["Surface Gravity (m/s^2)", f"{planet.surface_gravity():.3f}"])
        rows.append(["Escape Velocity (km/s)", f"{planet.escape_velocity():.3f}"])
    return tabulate(rows, headers=["Planet", planet.name], tablefmt=TABLE_FORMAT)
