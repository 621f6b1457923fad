"""Generator-wide constants for Ad Infinitum."""

# --- Application ---
APP_NAME = "ad_infinitum"
NAME_LIST_FILENAME = "planet_names.txt"

# --- Physical scale factors ---
SOLAR_MASS = 1.989e30  # kg
SOLAR_RADIUS = 6.957e8  # m
PLANET_RADIUS_UNIT = 1_000.0  # Planet radius tables are in km, bodies store m
METRES_PER_KM = 1_000.0

# --- Star naming ---
STAR_NAME_SUFFIX_RANGE = (10_000, 999_999)

# --- System layout ---
MIN_PLANETS = 1
MAX_PLANETS = 10

# --- Orbits ---
K_ROCHE = 1.6  # Star radius multiplier marking the tidal-disruption zone
K_PERIOD = 7.5
ORBIT_OFFSET_RANGE = (2.9, 20.0)
ORBIT_SCALE = 1.0e10  # m per unit of orbit offset

# --- Body colors (RGB, keyed by StarClass.value / PlanetType.value) ---
BODY_COLORS: dict[str, tuple[int, int, int]] = {
    # Stars
    "O": (90, 140, 255),
    "B": (150, 180, 255),
    "A": (220, 225, 255),
    "F": (255, 250, 225),
    "G": (255, 220, 100),
    "K": (255, 160, 70),
    "M": (220, 80, 60),
    # Planets
    "asteroid_ring": (140, 140, 150),
    "rock": (160, 150, 140),
    "desert": (230, 190, 110),
    "ice": (180, 230, 255),
    "gas_giant": (215, 160, 90),
    "earthlike": (60, 170, 90),
}
