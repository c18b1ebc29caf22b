from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal, Optional

from ._almanac import (
    ZENITH_OFFICIAL,
    SunCondition,
    SunEventDetail,
    compute_event,
)
from .calendar_dates import CalendarDate

logger = logging.getLogger(__name__)

DayAnchor = Literal["local", "utc"]


@dataclass(frozen=True)
class GeoCoordinate:
    """Decimal degrees, north and east positive. Not range-checked."""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class SunriseSunsetResult:
    """
    Outcome of one sunrise/sunset computation.

    condition:
      "normal"      -> sunrise and sunset are UTC datetimes (whole seconds)
      "polar_day"   -> sun stays above the horizon; both are None
      "polar_night" -> sun stays below the horizon; both are None
    """
    condition: SunCondition
    sunrise: Optional[datetime]
    sunset: Optional[datetime]

    latitude: float
    longitude: float
    date: CalendarDate
    anchor: DayAnchor
    zenith_deg: float

    details: tuple[SunEventDetail, SunEventDetail]

    @property
    def is_normal(self) -> bool:
        return self.condition == "normal"

    @property
    def day_length(self) -> timedelta:
        if self.condition == "polar_day":
            return timedelta(hours=24)
        if self.condition == "polar_night":
            return timedelta(0)
        length = self.sunset - self.sunrise
        # anchor="utc" puts both events on the input date, so sunset may wrap
        if length < timedelta(0):
            length += timedelta(days=1)
        return length

    def as_tuple(self) -> tuple[Optional[datetime], Optional[datetime]]:
        return self.sunrise, self.sunset


def _event_instant(
    detail: SunEventDetail,
    date: CalendarDate,
    longitude: float,
    anchor: DayAnchor,
) -> datetime:
    """
    Place an event's time of day on the time line, truncated to whole seconds.

    "utc":   midnight UTC of the date + UT
    "local": midnight UTC of the date + (T - lngHour); may land on the
             previous/next UTC date so that the event stays on the
             observer's local civil day.
    """
    if anchor == "utc":
        hours = detail.ut_hours
    else:
        hours = detail.local_mean_time_hours - longitude / 15.0
    seconds = math.floor(hours * 3600.0)
    return date.midnight_utc() + timedelta(seconds=seconds)


def _combined_condition(rise: SunEventDetail, sett: SunEventDetail) -> SunCondition:
    conditions = (rise.condition, sett.condition)
    if "polar_night" in conditions:
        return "polar_night"
    if "polar_day" in conditions:
        return "polar_day"
    return "normal"


def sunrise_sunset(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: int,
    *,
    zenith_deg: float = ZENITH_OFFICIAL,
    anchor: DayAnchor = "local",
) -> SunriseSunsetResult:
    """
    Sunrise and sunset in UTC for a location and calendar date.

    Notes
    -----
    - Latitude/longitude in decimal degrees, East positive, West negative.
      Neither is validated.
    - Uses the almanac solar-position method; accuracy is about a minute at
      mid-latitudes.
    - Times are truncated to whole seconds and carry tzinfo=UTC.
    - anchor="local" puts both events on the observer's local civil day
      (so sunrise < sunset away from the poles). anchor="utc" attaches the
      UT time of day to the input date as-is.
    - When the sun does not cross the horizon the result's condition is
      "polar_day" or "polar_night" and both times are None.
    """
    if not (0.0 < zenith_deg < 180.0):
        raise ValueError("zenith_deg must be between 0 and 180 (e.g., 90.8333).")
    if anchor not in ("local", "utc"):
        raise ValueError(f"Invalid anchor: {anchor}")

    date = CalendarDate(year=year, month=month, day=day)
    n = date.day_of_year()

    rise = compute_event("sunrise", latitude, longitude, n, zenith_deg=zenith_deg)
    sett = compute_event("sunset", latitude, longitude, n, zenith_deg=zenith_deg)

    condition = _combined_condition(rise, sett)

    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    if condition == "normal":
        sunrise = _event_instant(rise, date, longitude, anchor)
        sunset = _event_instant(sett, date, longitude, anchor)
    else:
        logger.debug(
            "%s at lat=%.4f lon=%.4f on %04d-%02d-%02d (cosH rise=%.4f set=%.4f)",
            condition, latitude, longitude, year, month, day,
            rise.cos_hour_angle, sett.cos_hour_angle,
        )

    return SunriseSunsetResult(
        condition=condition,
        sunrise=sunrise,
        sunset=sunset,
        latitude=float(latitude),
        longitude=float(longitude),
        date=date,
        anchor=anchor,
        zenith_deg=float(zenith_deg),
        details=(rise, sett),
    )


def sunrise_sunset_at(
    location: GeoCoordinate,
    date: CalendarDate,
    *,
    zenith_deg: float = ZENITH_OFFICIAL,
    anchor: DayAnchor = "local",
) -> SunriseSunsetResult:
    """Same as sunrise_sunset() but takes the data-model types."""
    return sunrise_sunset(
        location.latitude,
        location.longitude,
        date.year,
        date.month,
        date.day,
        zenith_deg=zenith_deg,
        anchor=anchor,
    )
