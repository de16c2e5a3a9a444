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

"""End-to-end link evaluation for one ship state"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..blockage.zones import blocking_zones
from ..core.config import SignalThresholds
from ..core.data_structures import BlockageZone, LookAngle, SignalStatus
from ..geometry.look_angle import compute_look_angle
from .classifier import classify_signal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkEvaluation:
    """Result of evaluating the link for one ship state

    Attributes
    ----------
    look_angle : LookAngle
        Pointing solution
    status : SignalStatus
        Classified link state
    blocking_zones : tuple of BlockageZone
        Zones obstructing the look angle, in collection order. Reported even
        when the status is NO_LOS, where the elevation rule takes precedence.
    """
    look_angle: LookAngle
    status: SignalStatus
    blocking_zones: Tuple[BlockageZone, ...] = ()

    @property
    def can_transmit(self) -> bool:
        return self.status in (SignalStatus.OPTIMAL, SignalStatus.MARGINAL)


def evaluate_link(ship_pos, sat_lng: float, heading: float,
                  zones: Iterable[BlockageZone],
                  thresholds: Optional[SignalThresholds] = None) -> LinkEvaluation:
    """
    Compute the look angle and classify the link.

    Parameters
    ----------
    ship_pos : Coordinates or tuple
        Ship position in degrees
    sat_lng : float
        Satellite longitude in degrees
    heading : float
        Ship heading in degrees true
    zones : iterable of BlockageZone
        Snapshot of the zone collection
    thresholds : SignalThresholds, optional
        Elevation thresholds

    Returns
    -------
    LinkEvaluation
    """
    zones = tuple(zones)
    look_angle = compute_look_angle(ship_pos, sat_lng, heading)
    status = classify_signal(look_angle, zones, thresholds)
    blockers = tuple(blocking_zones(zones, look_angle))

    logger.debug(f"Az {look_angle.azimuth:.2f} El {look_angle.elevation:.2f} "
                 f"RelAz {look_angle.relative_azimuth:.2f} -> {status.value}"
                 + (f" (blocked by {', '.join(z.name for z in blockers)})" if blockers else ""))

    return LinkEvaluation(look_angle=look_angle, status=status, blocking_zones=blockers)
