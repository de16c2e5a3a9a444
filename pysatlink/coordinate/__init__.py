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

"""Angle utilities

- Normalisation of bearings into [0, 360)
- Wrap-aware angular sector membership, shared by every zone evaluation
- Numba compiled array variants for bearing sweeps
"""

from .angles import (
    FULL_CIRCLE,
    arc_contains,
    arc_contains_array,
    deg2rad,
    normalize_deg,
    rad2deg,
    wrap_to_360,
)

__all__ = [
    'FULL_CIRCLE',
    'normalize_deg', 'arc_contains',
    'wrap_to_360', 'arc_contains_array',
    'deg2rad', 'rad2deg',
]
