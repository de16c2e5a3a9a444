# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Look angle computation from a ship to a geostationary satellite.

The satellite sits on the equator at the geostationary radius; the earth is a
sphere of radius 6371 km. The formulas are the closed-form spherical
approximations used by the operator console and its link thresholds:

    cos(beta) = cos(lat) * cos(dlng)
    range     = sqrt(R^2 + Rg^2 - 2 R Rg cos(beta))
    elevation = atan((cos(beta) - R/Rg) / sin(beta))
    azimuth   = atan2(tan(dlng), sin(lat)) + 180

where ``dlng`` is the raw difference ``sat_lng - ship_lng`` (not reduced into
[-180, 180]; every use is periodic). The azimuth expression is a two-term
simplification of the horizon transform. It is kept as is; near the poles and
on the equator its output differs from a vector-based ENU solution.
"""

import numpy as np

from ..coordinate.angles import normalize_deg
from ..core.constants import EARTH_RADIUS_KM, GEO_RADIUS_KM, LNG_RANGE, RADIUS_RATIO
from ..core.data_structures import Coordinates, LookAngle

ZENITH_ELEVATION = 90.0


def _validate_satellite_longitude(sat_lng):
    if not np.isfinite(sat_lng):
        raise ValueError(f"Satellite longitude must be a finite number, got {sat_lng!r}")
    lo, hi = LNG_RANGE
    if not lo <= sat_lng <= hi:
        raise ValueError(f"Satellite longitude must be within [{lo:g}, {hi:g}] degrees, got {sat_lng!r}")


def compute_look_angle(ship_pos, sat_lng: float, ship_heading: float) -> LookAngle:
    """
    Compute azimuth, elevation, range and bow-relative azimuth to a GEO satellite.

    Parameters
    ----------
    ship_pos : Coordinates or tuple
        Ship position, either a :class:`Coordinates` or a ``(lat, lng)`` pair
        in degrees
    sat_lng : float
        Satellite longitude in degrees, [-180, 180]
    ship_heading : float
        Ship heading in degrees true (0 = north, 90 = east)

    Returns
    -------
    LookAngle
        Azimuth and relative azimuth in [0, 360), elevation in degrees, range
        in km

    Raises
    ------
    ValueError
        If the position or satellite longitude is out of range, or the heading
        is not finite

    Notes
    -----
    When ``sin(beta)`` is exactly zero (ship on the equator directly under the
    satellite) the elevation is 90 degrees; no exception is raised.

    Examples
    --------
    >>> la = compute_look_angle(Coordinates(20.0, -155.0), -170.0, 0.0)
    >>> print(f"Az {la.azimuth:.1f} El {la.elevation:.1f}")
    Az 141.9 El 61.0
    """
    pos = Coordinates.from_value(ship_pos)
    _validate_satellite_longitude(sat_lng)
    if not np.isfinite(ship_heading):
        raise ValueError(f"Ship heading must be a finite number, got {ship_heading!r}")

    lat = np.radians(pos.lat)
    dlng = np.radians(sat_lng - pos.lng)

    # Central angle between the sub-satellite point and the ship
    cos_beta = np.cos(lat) * np.cos(dlng)
    beta = np.arccos(cos_beta)
    sin_beta = np.sin(beta)

    rng = np.sqrt(EARTH_RADIUS_KM**2 + GEO_RADIUS_KM**2
                  - 2.0 * EARTH_RADIUS_KM * GEO_RADIUS_KM * cos_beta)

    if sin_beta == 0.0:
        elevation = ZENITH_ELEVATION
    else:
        elevation = float(np.degrees(np.arctan((cos_beta - RADIUS_RATIO) / sin_beta)))

    azimuth = normalize_deg(np.degrees(np.arctan2(np.tan(dlng), np.sin(lat))) + 180.0)
    relative_azimuth = normalize_deg(azimuth - ship_heading)

    return LookAngle(
        azimuth=azimuth,
        elevation=elevation,
        range=float(rng),
        relative_azimuth=relative_azimuth,
    )


def compute_look_angles(lat, lng, sat_lng, heading=0.0) -> dict:
    """
    Vectorised look angles for arrays of positions, satellites or headings.

    Inputs broadcast against each other with numpy rules. No range checks are
    made; callers feed grids they built themselves.

    Parameters
    ----------
    lat : array_like
        Ship latitudes in degrees
    lng : array_like
        Ship longitudes in degrees
    sat_lng : array_like
        Satellite longitudes in degrees
    heading : array_like, optional
        Ship headings in degrees true

    Returns
    -------
    dict
        ``azimuth``, ``elevation``, ``range`` and ``relative_azimuth`` arrays
        of the broadcast shape, matching :func:`compute_look_angle` element
        by element
    """
    lat = np.radians(np.asarray(lat, dtype=np.float64))
    dlng = np.radians(np.asarray(sat_lng, dtype=np.float64) - np.asarray(lng, dtype=np.float64))
    heading = np.asarray(heading, dtype=np.float64)

    cos_beta = np.cos(lat) * np.cos(dlng)
    sin_beta = np.sin(np.arccos(cos_beta))

    rng = np.sqrt(EARTH_RADIUS_KM**2 + GEO_RADIUS_KM**2
                  - 2.0 * EARTH_RADIUS_KM * GEO_RADIUS_KM * cos_beta)

    with np.errstate(divide='ignore', invalid='ignore'):
        elevation = np.where(sin_beta == 0.0,
                             ZENITH_ELEVATION,
                             np.degrees(np.arctan((cos_beta - RADIUS_RATIO) / sin_beta)))

    azimuth = _wrap(np.degrees(np.arctan2(np.tan(dlng), np.sin(lat))) + 180.0)
    relative_azimuth = _wrap(azimuth - heading)

    return {
        'azimuth': azimuth,
        'elevation': elevation,
        'range': rng,
        'relative_azimuth': relative_azimuth,
    }


def _wrap(deg):
    deg = np.mod(deg, 360.0)
    return np.where(deg >= 360.0, 0.0, deg)
