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

"""Core data structures for ship-to-GEO link evaluation"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .constants import LAT_RANGE, LNG_RANGE, ZONE_ELEVATION_RANGE


def _check_finite(name, value):
    if not np.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")


def _check_range(name, value, bounds):
    _check_finite(name, value)
    lo, hi = bounds
    if not lo <= value <= hi:
        raise ValueError(f"{name} must be within [{lo:g}, {hi:g}] degrees, got {value!r}")


class SignalStatus(Enum):
    """Discrete link quality states.

    Attributes
    ----------
    OPTIMAL : str
        Clear line of sight at a comfortable elevation
    MARGINAL : str
        Clear line of sight but at low elevation
    BLOCKED : str
        Line of sight obstructed by ship structure
    NO_LOS : str
        Transmission inhibited, elevation below the interference threshold
    """
    OPTIMAL = 'OPTIMAL'
    MARGINAL = 'MARGINAL'
    BLOCKED = 'BLOCKED'
    NO_LOS = 'NO_LOS'


@dataclass(frozen=True)
class Coordinates:
    """Geodetic position of the ship.

    Attributes
    ----------
    lat : float
        Latitude in degrees, [-90, 90]
    lng : float
        Longitude in degrees, [-180, 180]

    Raises
    ------
    ValueError
        If either value is non-finite or out of range
    """
    lat: float
    lng: float

    def __post_init__(self):
        _check_range("Latitude", self.lat, LAT_RANGE)
        _check_range("Longitude", self.lng, LNG_RANGE)

    @classmethod
    def from_value(cls, value):
        """Accept a Coordinates instance, a ``{'lat', 'lng'}`` mapping or a ``(lat, lng)`` pair"""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            missing = {'lat', 'lng'} - set(value)
            if missing:
                raise ValueError(f"Position mapping is missing keys: {sorted(missing)}")
            return cls(float(value['lat']), float(value['lng']))
        if isinstance(value, str):
            raise ValueError(f"Position must be a (lat, lng) pair, got {value!r}")
        lat, lng = value
        return cls(float(lat), float(lng))


@dataclass(frozen=True)
class LookAngle:
    """Pointing solution from the ship to the satellite.

    Attributes
    ----------
    azimuth : float
        True-north azimuth in degrees, [0, 360)
    elevation : float
        Elevation above the horizon in degrees, [-90, 90]
    range : float
        Slant range in km
    relative_azimuth : float
        Azimuth relative to the bow in degrees, [0, 360)
    """
    azimuth: float
    elevation: float
    range: float
    relative_azimuth: float


@dataclass(frozen=True)
class BlockageZone:
    """Angular sector where ship structure obstructs the sky.

    The sector runs clockwise from ``start_rel_az`` to ``end_rel_az`` (bow
    relative). Both bounds are normalised into [0, 360) when evaluated, so a
    start greater than the end describes a sector through the bow.

    Attributes
    ----------
    id : str
        Unique key within a zone collection
    name : str
        Operator-facing label (e.g. "Main Funnel")
    start_rel_az : float
        Sector start in degrees relative to the bow
    end_rel_az : float
        Sector end in degrees relative to the bow
    max_elevation : float
        Silhouette height of the obstruction in degrees, [0, 90]
    """
    id: str
    name: str
    start_rel_az: float
    end_rel_az: float
    max_elevation: float

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Zone id must be a non-empty string, got {self.id!r}")
        _check_finite(f"Zone '{self.id}' start_rel_az", self.start_rel_az)
        _check_finite(f"Zone '{self.id}' end_rel_az", self.end_rel_az)
        _check_range(f"Zone '{self.id}' max_elevation", self.max_elevation, ZONE_ELEVATION_RANGE)


# Stock obstructions of a typical vessel
DEFAULT_BLOCKAGE_ZONES = (
    BlockageZone('1', 'Main Funnel', 170.0, 190.0, 80.0),
    BlockageZone('2', 'Crane Stbd', 85.0, 95.0, 20.0),
    BlockageZone('3', 'Crane Port', 265.0, 275.0, 20.0),
)
