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

"""Physical constants and link policy parameters"""

import numpy as np

# Earth / orbit geometry (spherical model)
EARTH_RADIUS_KM = 6371.0                          # mean earth radius (km)
GEO_ALTITUDE_KM = 35786.0                         # geostationary altitude above surface (km)
GEO_RADIUS_KM = EARTH_RADIUS_KM + GEO_ALTITUDE_KM  # geostationary orbital radius (km)
RADIUS_RATIO = EARTH_RADIUS_KM / GEO_RADIUS_KM    # R / Rg used by the elevation formula

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Link policy thresholds (degrees of elevation)
NO_LOS_ELEVATION_DEG = 5.0     # transmit inhibit below this (adjacent-slot interference)
MARGINAL_ELEVATION_DEG = 15.0  # usable but degraded below this

# Input domains (degrees)
LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)
ZONE_ELEVATION_RANGE = (0.0, 90.0)

# Named GEO slots offered to operators (name, longitude in degrees east)
COMMON_SATELLITES = (
    ("Horizons 4 (127°W)", -127.0),
    ("Intelsat 21 (58°W)", -58.0),
    ("Intelsat 32e (43°W)", -43.0),
    ("Intelsat 35e (34.5°W)", -34.5),
    ("Intelsat 37e (18°W)", -18.0),
    ("Intelsat 33e (60°E)", 60.0),
    ("Intelsat 20 (68.5°E)", 68.5),
    ("Intelsat 22 (72°E)", 72.0),
    ("APSTAR 6D (134°E)", 134.0),
    ("Horizons 3e (169°E)", 169.0),
    ("Intelsat 18 (180°E)", 180.0),
)


def find_catalog_satellite(sat_lng, tolerance=0.1):
    """Return the catalogue entry ``(name, lng)`` within ``tolerance`` degrees of
    ``sat_lng``, or None for a custom slot"""
    for name, lng in COMMON_SATELLITES:
        if abs(lng - sat_lng) < tolerance:
            return name, lng
    return None
