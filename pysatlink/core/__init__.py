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

"""Core link-engine module.

This module provides the fundamental components shared by every other package:

- **Constants**: spherical earth and geostationary orbit radii, unit
  conversions, link policy thresholds and the catalogue of common GEO slots
- **Data Structures**: ship coordinates, look angles, blockage zones and the
  signal status enumeration
- **Configuration**: classifier elevation thresholds

Example Usage:
    >>> from pysatlink.core import Coordinates, BlockageZone, SignalStatus
    >>> ship = Coordinates(lat=20.0, lng=-155.0)
    >>> funnel = BlockageZone('1', 'Main Funnel', 170.0, 190.0, 80.0)
"""

from .config import *
from .constants import *
from .data_structures import *
