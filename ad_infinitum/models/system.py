"""Star system generation for Ad Infinitum.

A system is one star plus 1–10 planets spread over three orbital zones.
Planets are placed outside the star's Roche limit. Optionally, planets that
sit inside a heavier neighbour's Hill sphere are captured as its satellites.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, replace
from typing import Sequence

from ..constants import (
    K_PERIOD,
    K_ROCHE,
    MAX_PLANETS,
    MIN_PLANETS,
    ORBIT_OFFSET_RANGE,
    ORBIT_SCALE,
)
from .body import Body, PlanetZone, generate_planets, generate_star
from .names import generate_system_name, load_planet_names

logger = logging.getLogger(__name__)

# Zones are filled, and planets listed, in this order
ZONE_ORDER: tuple[PlanetZone, ...] = (
    PlanetZone.INNER_RING,
    PlanetZone.HABITABLE_ZONE,
    PlanetZone.OUTER_RING,
)

# (lowest count, highest count, inner, habitable); the outer ring takes the rest
_ZONE_BUCKETS: list[tuple[int, int, int, int]] = [
    (1, 3, 0, 1),
    (4, 5, 1, 1),
    (6, 7, 1, 2),
    (8, 10, 2, 2),
]


@dataclass(frozen=True)
class System:
    """A generated star system. Read-only once built."""

    star: Body
    bodies: tuple[Body, ...]
    name: str
    roche_limit: float = 0.0  # m, as used when placing the planets
    seed: int | None = None

    @property
    def planet_count(self) -> int:
        return len(self.bodies)

    def all_bodies(self) -> list[Body]:
        """The star followed by its planets, in display order."""
        return [self.star, *self.bodies]

    @classmethod
    def generate(cls, **kwargs) -> System:
        return generate_system(**kwargs)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def zone_quota(planet_count: int) -> dict[PlanetZone, int]:
    """How many planets each zone receives for a given system size."""
    for low, high, inner, habitable in _ZONE_BUCKETS:
        if low <= planet_count <= high:
            quota = {
                PlanetZone.INNER_RING: inner,
                PlanetZone.HABITABLE_ZONE: habitable,
                PlanetZone.OUTER_RING: planet_count - inner - habitable,
            }
            return {zone: n for zone, n in quota.items() if n > 0}
    raise ValueError(
        f"planet_count must be between {MIN_PLANETS} and {MAX_PLANETS}, got {planet_count}"
    )


def roche_limit(star: Body) -> float:
    return star.radius * K_ROCHE


def orbital_period(orbit_radius: float) -> float:
    """Simplified period relation, not Kepler's third law."""
    return math.sqrt(orbit_radius ** 2 / K_PERIOD)


def place_in_orbit(planet: Body, limit: float, rng: random.Random) -> Body:
    """Return a copy of ``planet`` on a random orbit beyond ``limit``."""
    orbit_radius = rng.uniform(*ORBIT_OFFSET_RANGE) * ORBIT_SCALE + limit
    return replace(
        planet,
        orbit_radius=orbit_radius,
        orbit_period=orbital_period(orbit_radius),
    )


# ---------------------------------------------------------------------------
# Satellite capture
# ---------------------------------------------------------------------------

def hill_sphere_radius(body: Body, star_mass: float) -> float:
    """Radius within which ``body`` dominates the star's gravity."""
    return body.orbit_radius * (body.mass / (3 * (body.mass + star_mass))) ** (1 / 3)


def resolve_captures(planets: Sequence[Body], star_mass: float) -> list[Body]:
    """Fold planets that sit inside a heavier planet's Hill sphere into it.

    Heavier planets capture first. A captured planet is removed from the
    returned list and appended to its captor's satellites; it can neither
    capture nor be captured again. Order of the survivors is preserved.
    """
    by_mass = sorted(range(len(planets)), key=lambda i: planets[i].mass, reverse=True)
    captures: dict[int, list[int]] = {}
    taken: set[int] = set()

    for i in by_mass:
        if i in taken:
            continue
        captor = planets[i]
        reach = hill_sphere_radius(captor, star_mass)
        for j in by_mass:
            if j == i or j in taken or j in captures:
                continue
            other = planets[j]
            if other.mass >= captor.mass:
                continue
            if abs(captor.orbit_radius - other.orbit_radius) < reach:
                captures.setdefault(i, []).append(j)
                taken.add(j)
                logger.debug("%s captured %s", captor.name, other.name)

    result: list[Body] = []
    for i, planet in enumerate(planets):
        if i in taken:
            continue
        if i in captures:
            moons = tuple(planets[j] for j in sorted(captures[i]))
            planet = replace(planet, satellites=planet.satellites + moons)
        result.append(planet)
    return result


# ---------------------------------------------------------------------------
# System generation
# ---------------------------------------------------------------------------

def generate_system(
    seed: int | None = None,
    rng: random.Random | None = None,
    names: Sequence[str] | None = None,
    planet_count: int | None = None,
    capture_satellites: bool = False,
) -> System:
    """Generate a complete star system.

    Pass ``rng`` to drive generation from an existing random source, or
    ``seed`` for a reproducible one. With neither, a seed is drawn and
    recorded on the returned system. ``planet_count`` fixes the system size
    instead of rolling it.
    """
    if rng is None:
        if seed is None:
            seed = random.randint(0, 2**32)
        rng = random.Random(seed)

    if names is None:
        names = load_planet_names()

    star = generate_star(rng)
    limit = roche_limit(star)

    if planet_count is None:
        planet_count = rng.randint(MIN_PLANETS, MAX_PLANETS)
    quota = zone_quota(planet_count)
    logger.debug(
        "Generating system (seed=%s): star %s, %d planets", seed, star.name, planet_count,
    )

    planets: list[Body] = []
    for zone in ZONE_ORDER:
        planets.extend(generate_planets(zone, quota.get(zone, 0), rng, names))

    planets = [place_in_orbit(p, limit, rng) for p in planets]

    if capture_satellites:
        planets = resolve_captures(planets, star.mass)

    return System(
        star=star,
        bodies=tuple(planets),
        name=generate_system_name(rng),
        roche_limit=limit,
        seed=seed,
    )
