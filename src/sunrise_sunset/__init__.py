from ._almanac import ZENITH_OFFICIAL, SunEventDetail
from .calendar_dates import CalendarDate, day_of_year, midnight_utc
from .solar_events import (
    GeoCoordinate,
    SunriseSunsetResult,
    sunrise_sunset,
    sunrise_sunset_at,
)

__all__ = [
    "sunrise_sunset",
    "sunrise_sunset_at",
    "SunriseSunsetResult",
    "SunEventDetail",
    "GeoCoordinate",
    "CalendarDate",
    "day_of_year",
    "midnight_utc",
    "ZENITH_OFFICIAL",
]
