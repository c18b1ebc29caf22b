from __future__ import annotations

import numpy as np


def sin_deg(x: float) -> float:
    return float(np.sin(np.deg2rad(x)))


def cos_deg(x: float) -> float:
    return float(np.cos(np.deg2rad(x)))


def tan_deg(x: float) -> float:
    return float(np.tan(np.deg2rad(x)))


def asin_deg(x: float) -> float:
    return float(np.rad2deg(np.arcsin(x)))


def acos_deg(x: float) -> float:
    return float(np.rad2deg(np.arccos(x)))


def atan_deg(x: float) -> float:
    return float(np.rad2deg(np.arctan(x)))


def _wrap(x: float, period: float) -> float:
    """
    Wrap x into [0, period).

    np.mod already returns a non-negative value for negative x, but tiny
    negatives (e.g. -1e-15) round up to exactly `period`; fold those to 0.
    """
    out = float(np.mod(x, period))
    if out >= period:
        return 0.0
    return out


def normalize_degrees(x: float) -> float:
    """Angle in degrees wrapped into [0, 360)."""
    return _wrap(x, 360.0)


def normalize_hours(x: float) -> float:
    """Time of day in hours wrapped into [0, 24)."""
    return _wrap(x, 24.0)


def quadrant_floor(x: float) -> float:
    """Start of the 90° quadrant containing x (0, 90, 180 or 270 for x in [0, 360))."""
    return float(np.floor(x / 90.0) * 90.0)
