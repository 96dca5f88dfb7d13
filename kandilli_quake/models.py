"""Value types shared across the pipeline."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_MAX_DEPTH, DEFAULT_MIN_MAGNITUDE


def to_float32(value: float) -> float:
    """Round `value` to the nearest single precision float."""
    return float(np.float32(value))


@dataclass(frozen=True)
class Config:
    """Run options, built once from the command line."""

    include_all: bool = False
    max_depth: float = DEFAULT_MAX_DEPTH
    min_magnitude: float = DEFAULT_MIN_MAGNITUDE


@dataclass(frozen=True)
class EarthquakeRecord:
    """
    One event from the observatory bulletin.

    Attributes
    ----------
    location : str
        "<province> <epicenter>" as printed by the table.
    latitude, longitude : float
        Decimal degrees.
    occurred_at : datetime
        Tz-aware origin time in the display timezone.
    magnitude : float
        Single precision, like the bulletin's one-decimal values.
    depth : float
        Kilometers, single precision.
    """

    location: str
    latitude: float
    longitude: float
    occurred_at: _dt.datetime
    magnitude: float
    depth: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", to_float32(self.magnitude))
        object.__setattr__(self, "depth", to_float32(self.depth))
