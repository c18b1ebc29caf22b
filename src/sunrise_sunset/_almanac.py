from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .angles import (
    acos_deg,
    asin_deg,
    atan_deg,
    cos_deg,
    normalize_degrees,
    normalize_hours,
    quadrant_floor,
    sin_deg,
    tan_deg,
)

EventKind = Literal["sunrise", "sunset"]
SunCondition = Literal["normal", "polar_day", "polar_night"]

# Sun centre 50' below the horizon: 34' refraction + 16' semi-diameter.
ZENITH_OFFICIAL = 90.8333

SUNRISE_HOUR = 6.0
SUNSET_HOUR = 18.0

_EVENT_HOURS: dict[str, float] = {"sunrise": SUNRISE_HOUR, "sunset": SUNSET_HOUR}


@dataclass(frozen=True)
class SunEventDetail:
    """
    Intermediate quantities of one rising/setting computation.

    Angles are in degrees, times in hours. `local_mean_time_hours` and
    `ut_hours` are None when `condition` is not "normal".
    """
    kind: EventKind
    approx_day: float               # t
    mean_anomaly_deg: float         # M
    true_longitude_deg: float       # L, [0, 360)
    right_ascension_hours: float    # RA, same quadrant as L
    sin_declination: float
    cos_hour_angle: float           # cosH
    local_mean_time_hours: Optional[float]  # T, [0, 24)
    ut_hours: Optional[float]       # UT, [0, 24)
    condition: SunCondition


def right_ascension_hours(true_longitude_deg: float) -> float:
    """Sun's right ascension (hours) from its true longitude, kept in L's quadrant."""
    ra = normalize_degrees(atan_deg(0.91764 * tan_deg(true_longitude_deg)))
    ra += quadrant_floor(true_longitude_deg) - quadrant_floor(ra)
    return ra / 15.0


def compute_event(
    kind: EventKind,
    latitude: float,
    longitude: float,
    day_of_year: int,
    *,
    zenith_deg: float = ZENITH_OFFICIAL,
) -> SunEventDetail:
    """
    Run the almanac method for a single event.

    Returns the detail record; the caller decides how to turn `ut_hours`
    into an instant. Boundary cases are reported through `condition`:
      cosH >  1 -> "polar_night" (sun never rises)
      cosH < -1 -> "polar_day"   (sun never sets)
    """
    if kind not in _EVENT_HOURS:
        raise ValueError(f"Invalid event kind: {kind}")

    lng_hour = longitude / 15.0
    t = day_of_year + (_EVENT_HOURS[kind] - lng_hour) / 24.0

    m = (0.9856 * t) - 3.289
    l = normalize_degrees(m + (1.916 * sin_deg(m)) + (0.020 * sin_deg(2.0 * m)) + 282.634)
    ra = right_ascension_hours(l)

    sin_dec = 0.39782 * sin_deg(l)
    cos_dec = cos_deg(asin_deg(sin_dec))

    cos_h = (cos_deg(zenith_deg) - (sin_dec * sin_deg(latitude))) / (cos_dec * cos_deg(latitude))

    condition: SunCondition = "normal"
    if cos_h > 1.0:
        condition = "polar_night"
    elif cos_h < -1.0:
        condition = "polar_day"

    if condition != "normal":
        return SunEventDetail(
            kind=kind,
            approx_day=t,
            mean_anomaly_deg=m,
            true_longitude_deg=l,
            right_ascension_hours=ra,
            sin_declination=sin_dec,
            cos_hour_angle=cos_h,
            local_mean_time_hours=None,
            ut_hours=None,
            condition=condition,
        )

    h = acos_deg(cos_h)
    if kind == "sunrise":
        h = 360.0 - h
    h /= 15.0

    local_t = normalize_hours(h + ra - (0.06571 * t) - 6.622)
    ut = normalize_hours(local_t - lng_hour)

    return SunEventDetail(
        kind=kind,
        approx_day=t,
        mean_anomaly_deg=m,
        true_longitude_deg=l,
        right_ascension_hours=ra,
        sin_declination=sin_dec,
        cos_hour_angle=cos_h,
        local_mean_time_hours=local_t,
        ut_hours=ut,
        condition=condition,
    )
