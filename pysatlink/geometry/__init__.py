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
Look-angle geometry for ship-borne GEO terminals.

Functions
---------
compute_look_angle : function
    Azimuth, elevation, range and bow-relative azimuth for one ship state
compute_look_angles : function
    The same computation broadcast over numpy arrays
elevation_grid : function
    Satellite elevation over a latitude/longitude grid
visibility_mask : function
    Grid nodes where the satellite clears a minimum elevation

Examples
--------
>>> from pysatlink.geometry import compute_look_angle
>>> la = compute_look_angle((20.0, -155.0), -170.0, 0.0)
"""

from .coverage import elevation_grid, visibility_mask
from .look_angle import compute_look_angle, compute_look_angles

__all__ = ['compute_look_angle', 'compute_look_angles', 'elevation_grid', 'visibility_mask']
