"""
HitCraft Configuration
Contains game constants, file paths, and settings.
"""
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from .events import ErrorPolicy

# Paths
PACKAGE_ROOT = Path(__file__).parent.parent
DATA_DIR = PACKAGE_ROOT / "data"
SETTINGS_FILE = DATA_DIR / "settings.json"

# Display
TILE_SIZE = 32
FPS = 60


@dataclass(frozen=True)
class Settings:
    """Tunable values, normally read from settings.json."""
    sim_hz: int = 30                 # Simulation ticks per second
    fire_interval: float = 0.5       # Seconds between automatic shots
    enemy_count: int = 3
    enemy_hp: int = 5
    error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE
    screen_width: int = 800
    screen_height: int = 600

    @property
    def sim_dt(self) -> float:
        return 1.0 / self.sim_hz


def load_settings(path: Optional[Path] = None, **overrides) -> Settings:
    """Load settings from JSON and apply keyword overrides on top.

    Raises ValueError for unknown keys, an unknown error_policy, or a
    non-positive sim_hz / fire_interval.
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    with open(path, "r") as f:
        values = json.load(f)
    values.update(overrides)

    known = {f.name for f in fields(Settings)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")

    if "error_policy" in values:
        try:
            values["error_policy"] = ErrorPolicy(values["error_policy"])
        except ValueError:
            raise ValueError(f"Unknown error_policy: {values['error_policy']!r}") from None

    for name in ("sim_hz", "fire_interval"):
        if name in values and values[name] <= 0:
            raise ValueError(f"{name} must be positive, got {values[name]!r}")

    return replace(Settings(), **values)


# Pre-load settings for convenience (used by entities.py)
SETTINGS = load_settings()
