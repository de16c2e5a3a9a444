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

"""Coverage footprint of a GEO satellite over a latitude/longitude grid"""

import numpy as np

from ..core.constants import NO_LOS_ELEVATION_DEG
from .look_angle import _validate_satellite_longitude, compute_look_angles


def elevation_grid(sat_lng: float, lats, lngs) -> np.ndarray:
    """
    Elevation of the satellite seen from every node of a lat/lng grid.

    Parameters
    ----------
    sat_lng : float
        Satellite longitude in degrees
    lats : array_like
        Grid latitudes in degrees, shape (n,)
    lngs : array_like
        Grid longitudes in degrees, shape (m,)

    Returns
    -------
    np.ndarray
        Elevations in degrees, shape (n, m); row i is latitude ``lats[i]``
    """
    _validate_satellite_longitude(sat_lng)
    lat_mesh, lng_mesh = np.meshgrid(np.asarray(lats, dtype=np.float64),
                                     np.asarray(lngs, dtype=np.float64),
                                     indexing='ij')
    return compute_look_angles(lat_mesh, lng_mesh, sat_lng)['elevation']


def visibility_mask(sat_lng: float, lats, lngs,
                    min_elevation: float = NO_LOS_ELEVATION_DEG) -> np.ndarray:
    """Boolean grid of nodes where the satellite is at or above ``min_elevation``"""
    return elevation_grid(sat_lng, lats, lngs) >= min_elevation
