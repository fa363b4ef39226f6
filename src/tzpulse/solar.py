"""Solar terminator — subsolar point, day/night boundary curve, and lit-point tests.

Solar position follows the NOAA Julian-century series (declination and
equation of time). Accuracy is a few minutes of sunrise/sunset time, which
is plenty for a map overlay.
"""

import math
from datetime import datetime, timezone

import numpy as np

from tzpulse.geometry import angular_distance, wrap_longitude
from tzpulse.models import LatLng, SolarState

J2000 = 2451545.0
UNIX_EPOCH_JD = 2440587.5
DAYS_PER_CENTURY = 36525.0


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        raise ValueError("instant must be timezone-aware")
    return instant.astimezone(timezone.utc)


def julian_century(instant: datetime) -> float:
    """Julian centuries since J2000.0 for a tz-aware instant."""
    jd = _as_utc(instant).timestamp() / 86400.0 + UNIX_EPOCH_JD
    return (jd - J2000) / DAYS_PER_CENTURY


def declination_and_equation_of_time(t: float) -> tuple[float, float]:
    """Solar declination (degrees) and equation of time (minutes) at Julian century t."""
    mean_long = (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0
    mean_anom = 357.52911 + t * (35999.05029 - 0.0001537 * t)
    ecc = 0.016708634 - t * (0.000042037 + 0.0000001267 * t)

    m = math.radians(mean_anom)
    center = (
        math.sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2 * m) * (0.019993 - 0.000101 * t)
        + math.sin(3 * m) * 0.000289
    )
    omega = math.radians(125.04 - 1934.136 * t)
    apparent_long = math.radians(mean_long + center - 0.00569 - 0.00478 * math.sin(omega))

    mean_obliq = 23.0 + (26.0 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60.0) / 60.0
    obliq = math.radians(mean_obliq + 0.00256 * math.cos(omega))

    decl = math.degrees(math.asin(math.sin(obliq) * math.sin(apparent_long)))

    y = math.tan(obliq / 2) ** 2
    l0 = math.radians(mean_long)
    eot = 4.0 * math.degrees(
        y * math.sin(2 * l0)
        - 2 * ecc * math.sin(m)
        + 4 * ecc * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * ecc * ecc * math.sin(2 * m)
    )
    return decl, eot


def subsolar_point(instant: datetime) -> LatLng:
    """(lat, lng) of the point where the sun is directly overhead."""
    utc = _as_utc(instant)
    decl, eot = declination_and_equation_of_time(julian_century(utc))
    utc_hours = utc.hour + utc.minute / 60.0 + (utc.second + utc.microsecond / 1e6) / 3600.0
    # Apparent solar noon happens where local solar time is 12:00
    lng = wrap_longitude(-15.0 * (utc_hours - 12.0 + eot / 60.0))
    return (decl, lng)


def solar_elevation(point: LatLng, instant: datetime) -> float:
    """Geometric elevation of the sun above the horizon at point, in degrees."""
    return 90.0 - angular_distance(point, subsolar_point(instant))


def is_lit(point: LatLng, instant: datetime) -> bool:
    """True when point is less than 90° of arc from the subsolar point."""
    return angular_distance(point, subsolar_point(instant)) < 90.0


def terminator_curve(subsolar: LatLng, step: float = 1.0) -> tuple[LatLng, ...]:
    """Sample the terminator great circle from -180° to 180°, at most `step` degrees apart.

    The terminator is the set of points 90° from the subsolar point:
    cos(lat)·cos(decl)·cos(lng - sub_lng) + sin(lat)·sin(decl) = 0, solved
    for lat. At an equinox (decl = 0) it degenerates to two meridians and the
    samples snap to the poles.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    decl, sub_lng = subsolar
    # Evenly spaced, at most `step` apart, with both seam ends sampled exactly
    lngs = np.linspace(-180.0, 180.0, math.ceil(360.0 / step) + 1)

    sin_d = math.sin(math.radians(decl))
    cos_d = math.cos(math.radians(decl))
    sign = 1.0 if sin_d >= 0 else -1.0
    lats = np.degrees(
        np.arctan2(-np.cos(np.radians(lngs - sub_lng)) * cos_d * sign, abs(sin_d))
    )
    return tuple((float(lat), float(lng)) for lat, lng in zip(lats, lngs))


def terminator(instant: datetime, step: float = 1.0) -> SolarState:
    """Day/night geometry for instant: subsolar point, terminator curve, lit test."""
    utc = _as_utc(instant)
    subsolar = subsolar_point(utc)

    def _is_lit(lat: float, lng: float) -> bool:
        return angular_distance((lat, lng), subsolar) < 90.0

    return SolarState(
        instant=utc,
        subsolar=subsolar,
        declination=subsolar[0],
        curve=terminator_curve(subsolar, step),
        _is_lit=_is_lit,
    )
