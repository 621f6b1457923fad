"""Stars, planets and the tables they are sampled from.

A body's kind is either a StarClass or a PlanetType; the enum type is the
tag. Every sampling step draws from the ``random.Random`` passed in, so a
seeded generator reproduces the same bodies.
"""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import Sequence, Union

from ..constants import (
    BODY_COLORS,
    METRES_PER_KM,
    PLANET_RADIUS_UNIT,
    SOLAR_MASS,
    SOLAR_RADIUS,
    STAR_NAME_SUFFIX_RANGE,
)
from .names import load_planet_names


class StarClass(enum.Enum):
    """Harvard spectral classes, hottest to coolest."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


class PlanetZone(enum.Enum):
    """Orbital zones. Only used while generating, never stored on a body."""

    INNER_RING = "inner_ring"
    HABITABLE_ZONE = "habitable_zone"
    OUTER_RING = "outer_ring"


class PlanetType(enum.Enum):
    """Types of planets found in star systems."""

    ASTEROID_RING = "asteroid_ring"
    ROCK = "rock"
    DESERT = "desert"
    ICE = "ice"
    GAS_GIANT = "gas_giant"
    EARTHLIKE = "earthlike"


BodyKind = Union[StarClass, PlanetType]


class PartitionError(LookupError):
    """A roll fell outside every range of a probability table."""


# ---------------------------------------------------------------------------
# Star tables
# ---------------------------------------------------------------------------

# Inclusive integer ranges over a 0–100 roll. O and B are rare, M is common.
STAR_CLASS_RANGES: list[tuple[StarClass, int, int]] = [
    (StarClass.O, 0, 0),
    (StarClass.B, 1, 1),
    (StarClass.A, 2, 2),
    (StarClass.F, 3, 5),
    (StarClass.G, 6, 13),
    (StarClass.K, 14, 25),
    (StarClass.M, 26, 100),
]

# (min, max) in solar masses
STAR_MASS_RANGES: dict[StarClass, tuple[float, float]] = {
    StarClass.O: (16.0, 150.0),
    StarClass.B: (2.10, 16.00),
    StarClass.A: (1.40, 2.100),
    StarClass.F: (1.04, 1.400),
    StarClass.G: (0.80, 1.040),
    StarClass.K: (0.45, 0.800),
    StarClass.M: (0.08, 0.450),
}

# (min, max) in solar radii
STAR_RADIUS_RANGES: dict[StarClass, tuple[float, float]] = {
    StarClass.O: (6.60, 100.0),
    StarClass.B: (1.80, 6.600),
    StarClass.A: (1.40, 1.800),
    StarClass.F: (1.15, 1.400),
    StarClass.G: (0.96, 1.150),
    StarClass.K: (0.70, 0.960),
    StarClass.M: (0.10, 0.700),
}


# ---------------------------------------------------------------------------
# Planet tables
# ---------------------------------------------------------------------------

# A roll of 1–5 is an asteroid ring in every zone
ASTEROID_RING_RANGE: tuple[PlanetType, int, int] = (PlanetType.ASTEROID_RING, 1, 5)

# Inclusive integer ranges over a 1–100 roll, per zone
PLANET_TYPE_RANGES: dict[PlanetZone, list[tuple[PlanetType, int, int]]] = {
    PlanetZone.INNER_RING: [
        ASTEROID_RING_RANGE,
        (PlanetType.ROCK, 6, 60),
        (PlanetType.DESERT, 61, 100),
    ],
    PlanetZone.HABITABLE_ZONE: [
        ASTEROID_RING_RANGE,
        (PlanetType.GAS_GIANT, 6, 8),
        (PlanetType.ROCK, 9, 40),
        (PlanetType.DESERT, 41, 90),
        (PlanetType.EARTHLIKE, 91, 100),
    ],
    PlanetZone.OUTER_RING: [
        ASTEROID_RING_RANGE,
        (PlanetType.GAS_GIANT, 6, 75),
        (PlanetType.ROCK, 76, 80),
        (PlanetType.ICE, 81, 90),
        (PlanetType.DESERT, 91, 100),
    ],
}

# (min, max) in km; asteroid rings have no solid body
PLANET_RADIUS_RANGES: dict[PlanetType, tuple[float, float]] = {
    PlanetType.EARTHLIKE: (7_000.0, 17_000.0),
    PlanetType.ICE: (1_000.0, 10_000.0),
    PlanetType.ROCK: (1_000.0, 10_000.0),
    PlanetType.DESERT: (4_000.0, 14_000.0),
    PlanetType.GAS_GIANT: (20_000.0, 180_000.0),
}

ASTEROID_RING_RADIUS = -1.0

# kg/m³
GAS_GIANT_DENSITY = (700.0, 1600.0)
SOLID_DENSITY = (3500.0, 5400.0)

_PLANET_DESCRIPTIONS: dict[PlanetType, str] = {
    PlanetType.ASTEROID_RING: "Asteroid ring",
    PlanetType.ROCK: "Rocky planet",
    PlanetType.DESERT: "Desert planet",
    PlanetType.ICE: "Ice planet",
    PlanetType.GAS_GIANT: "Gas giant",
    PlanetType.EARTHLIKE: "Earthlike planet",
}


def _lookup(table: list[tuple], roll: int, what: str) -> object:
    """Return the item whose inclusive range contains ``roll``."""
    for item, low, high in table:
        if low <= roll <= high:
            return item
    raise PartitionError(f"Roll {roll} is outside every {what} range")


def star_class_for_roll(roll: int) -> StarClass:
    return _lookup(STAR_CLASS_RANGES, roll, "star class")


def planet_type_for_roll(zone: PlanetZone, roll: int) -> PlanetType:
    return _lookup(PLANET_TYPE_RANGES[zone], roll, f"{zone.value} planet type")


def planet_mass(radius: float, density: float) -> float:
    """Planet mass from radius (m) and density (kg/m³).

    Uses 4πr²ρ, a surface-area relation rather than the (4/3)πr³ρ of a
    solid sphere. Kept as is until the intended relation is confirmed.
    """
    return 4 * math.pi * radius ** 2 * density


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Body:
    """A star or planet. Immutable once generated."""

    name: str
    kind: BodyKind
    radius: float  # m, -1 for asteroid rings
    mass: float  # kg
    density: float | None = None  # kg/m³, planets only
    orbit_radius: float | None = None  # m, unset for the star
    orbit_period: float | None = None
    satellites: tuple[Body, ...] = ()

    @property
    def is_star(self) -> bool:
        return isinstance(self.kind, StarClass)

    @property
    def is_planet(self) -> bool:
        return isinstance(self.kind, PlanetType)

    @property
    def is_asteroid_ring(self) -> bool:
        return self.kind is PlanetType.ASTEROID_RING

    @property
    def description(self) -> str:
        if self.is_star:
            return f"Class {self.kind.value} star"
        return _PLANET_DESCRIPTIONS[self.kind]

    @property
    def color(self) -> tuple[int, int, int]:
        return BODY_COLORS[self.kind.value]

    def make_info(self) -> list[str]:
        """Human-readable attribute lines for display."""
        if self.is_asteroid_ring:
            radius = "Radius: debris ring"
        else:
            radius = f"Radius: {self.radius:.3e} m"

        if self.orbit_radius is None:
            orbit = "Orbit radius: -"
        else:
            orbit = f"Orbit radius: {self.orbit_radius / METRES_PER_KM:.3e} km"

        info = [
            f"Name: {self.name}",
            f"Mass: {self.mass:.3e} kg",
            radius,
            f"Type: {self.description}",
            orbit,
        ]
        if self.orbit_period is not None:
            info.append(f"Orbit period: {self.orbit_period:.3e}")
        if self.satellites:
            info.append(f"Satellites: {len(self.satellites)}")
        return info


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

def generate_star(rng: random.Random) -> Body:
    """Generate a star with class-conditioned mass and radius."""
    star_class = star_class_for_roll(rng.randint(0, 100))

    mass = rng.uniform(*STAR_MASS_RANGES[star_class]) * SOLAR_MASS
    radius = rng.uniform(*STAR_RADIUS_RANGES[star_class]) * SOLAR_RADIUS

    name = f"{star_class.value}-{rng.randint(*STAR_NAME_SUFFIX_RANGE)}"

    return Body(name=name, kind=star_class, radius=radius, mass=mass)


def generate_planet(
    zone: PlanetZone, rng: random.Random, names: Sequence[str] | None = None,
) -> Body:
    """Generate a single planet whose type depends on its orbital zone."""
    planet_type = planet_type_for_roll(zone, rng.randint(1, 100))

    if planet_type == PlanetType.ASTEROID_RING:
        radius = ASTEROID_RING_RADIUS
    else:
        radius = rng.uniform(*PLANET_RADIUS_RANGES[planet_type]) * PLANET_RADIUS_UNIT

    if planet_type == PlanetType.GAS_GIANT:
        density = rng.uniform(*GAS_GIANT_DENSITY)
    else:
        density = rng.uniform(*SOLID_DENSITY)

    if names is None:
        names = load_planet_names()

    return Body(
        name=rng.choice(names),
        kind=planet_type,
        radius=radius,
        mass=planet_mass(radius, density),
        density=density,
    )


def generate_planets(
    zone: PlanetZone, count: int, rng: random.Random, names: Sequence[str] | None = None,
) -> list[Body]:
    """Generate ``count`` independent planets in one zone."""
    if names is None:
        names = load_planet_names()
    return [generate_planet(zone, rng, names) for _ in range(count)]
