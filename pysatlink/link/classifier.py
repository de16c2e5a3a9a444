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
Signal status classification.

The status is a pure function of the current look angle and the zone
collection, evaluated as ordered guards (first match wins):

1. elevation below the no-LOS threshold -> NO_LOS (transmit inhibit, always first)
2. any zone blocks the look angle       -> BLOCKED
3. elevation below the marginal threshold -> MARGINAL
4. otherwise                            -> OPTIMAL
"""

from typing import Iterable, Optional

from ..blockage.zones import is_blocking
from ..core.config import DEFAULT_THRESHOLDS, SignalThresholds
from ..core.data_structures import BlockageZone, LookAngle, SignalStatus


def classify_signal(look_angle: LookAngle,
                    zones: Iterable[BlockageZone],
                    thresholds: Optional[SignalThresholds] = None) -> SignalStatus:
    """
    Classify the link for one look angle.

    Parameters
    ----------
    look_angle : LookAngle
        Current pointing solution
    zones : iterable of BlockageZone
        Snapshot of the ship's blockage zones; only read
    thresholds : SignalThresholds, optional
        Elevation thresholds, defaults to 5 / 15 degrees

    Returns
    -------
    SignalStatus
    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS

    if look_angle.elevation < thresholds.no_los_elevation:
        return SignalStatus.NO_LOS
    if any(is_blocking(zone, look_angle) for zone in zones):
        return SignalStatus.BLOCKED
    if look_angle.elevation < thresholds.marginal_elevation:
        return SignalStatus.MARGINAL
    return SignalStatus.OPTIMAL
