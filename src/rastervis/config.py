"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (unit counts, colors, timer
   intervals) scattered throughout the code.
2. Tuning: `ViewSettings.from_env()` lets a lecturer change the look and pace
   of the animation without touching the code, via RASTERVIS_* variables.

Exports:
    UNITS_PER_AXIS (int): Grid units across the full canvas width/height.
    ViewSettings: Dataclass with the effective settings.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Global Constants
UNITS_PER_AXIS: int = 20
GRID_ENABLED: bool = True
GRID_COLOR: str = "#C0C0C0"
SHAPE_COLOR: str = "#000000"
POINT_COLOR: str = "#000000"
POINT_RADIUS: float = 0.2  # grid units

LINE_REVEAL_INTERVAL_MS: int = 200
CIRCLE_REVEAL_INTERVAL_MS: int = 500

DEMO_CIRCLE_RADIUS: float = 8.0

WINDOW_SIZE: tuple[int, int] = (1200, 850)
CANVAS_MIN_SIZE: int = 400

ENV_PREFIX = "RASTERVIS_"


@dataclass(frozen=True)
class ViewSettings:
    """Effective drawing / animation settings."""
    units_per_axis: int = UNITS_PER_AXIS
    grid_enabled: bool = GRID_ENABLED
    grid_color: str = GRID_COLOR
    shape_color: str = SHAPE_COLOR
    point_color: str = POINT_COLOR
    point_radius: float = POINT_RADIUS
    line_interval_ms: int = LINE_REVEAL_INTERVAL_MS
    circle_interval_ms: int = CIRCLE_REVEAL_INTERVAL_MS
    include_endpoints: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ViewSettings:
        """
        Build settings from RASTERVIS_<FIELD> environment variables.

        Unknown or malformed values are ignored (with a warning) and the
        default is kept, so a typo never prevents the app from starting.

        Example:
            RASTERVIS_UNITS_PER_AXIS=40 RASTERVIS_LINE_INTERVAL_MS=50 rastervis
        """
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            value = _coerce(raw, getattr(cls, f.name))
            if value is None:
                logger.warning("Ignoring invalid value %r for %s", raw, ENV_PREFIX + f.name.upper())
                continue
            overrides[f.name] = value
        if overrides:
            logger.info("View settings overridden from environment: %s", overrides)
        return cls(**overrides)


def _coerce(raw: str, default: object) -> object | None:
    s = raw.strip()
    if isinstance(default, bool):
        if s.lower() in ("1", "true", "yes", "on"):
            return True
        if s.lower() in ("0", "false", "no", "off"):
            return False
        return None
    if isinstance(default, int):
        try:
            n = int(s)
        except ValueError:
            return None
        return n if n > 0 else None
    if isinstance(default, float):
        try:
            x = float(s)
        except ValueError:
            return None
        return x if x > 0 else None
    return s or None
