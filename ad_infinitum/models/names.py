"""Planet name list and procedural system names.

The planet name list is a newline-separated UTF-8 text file. Lookup order:
  1. an explicit path passed to ``load_planet_names``
  2. ``planet_names.txt`` in the user data directory (platformdirs):
       Linux:   ~/.local/share/ad_infinitum/planet_names.txt
       macOS:   ~/Library/Application Support/ad_infinitum/planet_names.txt
       Windows: C:/Users/.../AppData/Local/ad_infinitum/planet_names.txt
  3. the list bundled with the package

The loaded list is an immutable tuple, cached per path and shared by every
generation call.
"""

from __future__ import annotations

import functools
import logging
import random
from pathlib import Path

from platformdirs import user_data_dir

from ..constants import APP_NAME, NAME_LIST_FILENAME

logger = logging.getLogger(__name__)

BUNDLED_NAME_LIST = Path(__file__).resolve().parent.parent / "data" / NAME_LIST_FILENAME


class ResourceUnavailableError(RuntimeError):
    """The planet name list could not be read."""


def user_name_list_path() -> Path:
    """Where a user-supplied name list overrides the bundled one."""
    return Path(user_data_dir(APP_NAME)) / NAME_LIST_FILENAME


def resolve_name_list_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    user_path = user_name_list_path()
    if user_path.is_file():
        return user_path
    return BUNDLED_NAME_LIST


def parse_name_list(text: str) -> tuple[str, ...]:
    """Split a name list on newlines, dropping blank lines."""
    return tuple(line.strip() for line in text.split("\n") if line.strip())


@functools.lru_cache(maxsize=None)
def _load_cached(path: Path) -> tuple[str, ...]:
    logger.debug("Loading planet names from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailableError(f"Cannot read planet name list {path}: {exc}") from exc

    names = parse_name_list(text)
    if not names:
        raise ResourceUnavailableError(f"Planet name list {path} contains no names")
    return names


def load_planet_names(path: str | Path | None = None) -> tuple[str, ...]:
    """Load the planet name list. Raises ResourceUnavailableError on failure."""
    return _load_cached(resolve_name_list_path(path))


def clear_name_cache() -> None:
    """Forget previously loaded name lists."""
    _load_cached.cache_clear()


# ---------------------------------------------------------------------------
# System names
# ---------------------------------------------------------------------------

_PREFIXES = [
    "Ald", "Bel", "Cor", "Den", "Eri", "Fom", "Gal", "Hyd", "Ith",
    "Jov", "Kep", "Lyr", "Mir", "Neb", "Ori", "Pol", "Qua", "Rig",
    "Sol", "Tau", "Ult", "Veg", "Wol", "Xen", "Ygg", "Zan",
]

_SUFFIXES = [
    "aris", "eon", "ix", "us", "ara", "ion", "ax", "is", "or",
    "ium", "oth", "ael", "ine", "ova", "ux", "enn", "ark", "os",
]

_DESIGNATIONS = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta",
    "Theta", "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron",
    "Pi", "Rho", "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
]

_CATALOGUES = ["HD", "GJ", "HR", "TYC", "KOI"]


def generate_system_name(rng: random.Random) -> str:
    """Generate a procedural star system name."""
    style = rng.randint(0, 2)
    if style == 0:
        # "Aldaris"
        return rng.choice(_PREFIXES) + rng.choice(_SUFFIXES)
    elif style == 1:
        # "Aldaris Beta"
        return rng.choice(_PREFIXES) + rng.choice(_SUFFIXES) + " " + rng.choice(_DESIGNATIONS)
    else:
        # "HD-47291"
        return f"{rng.choice(_CATALOGUES)}-{rng.randint(1000, 99999)}"
