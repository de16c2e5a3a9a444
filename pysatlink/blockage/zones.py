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
Blockage zone matching and zone collection helpers.

A zone blocks the link when the satellite's bow-relative bearing lies inside
the zone's sector and the satellite is still below the obstruction's
silhouette. Zones combine with OR; overlapping zones are legal.

Collections are plain sequences owned by the caller. The helpers here never
mutate them; edits return new lists.
"""

import logging
import uuid
from typing import Iterable, List, Optional, Sequence

from ..coordinate.angles import arc_contains, normalize_deg
from ..core.data_structures import BlockageZone, LookAngle

logger = logging.getLogger(__name__)


def zone_sector(zone: BlockageZone):
    """Return the zone's ``(start, end)`` bearings normalised into [0, 360)"""
    return normalize_deg(zone.start_rel_az), normalize_deg(zone.end_rel_az)


def is_blocking(zone: BlockageZone, look_angle: LookAngle) -> bool:
    """
    Check whether a zone obstructs the current look angle.

    Parameters
    ----------
    zone : BlockageZone
        Obstruction sector; raw bounds may be negative or above 360
    look_angle : LookAngle
        Current pointing solution

    Returns
    -------
    bool
        True if the relative azimuth is inside the sector (bounds included)
        and the elevation is strictly below the zone's max elevation

    Notes
    -----
    A zero-width zone (equal bounds after normalisation) covers exactly one
    bearing.
    """
    start, end = zone_sector(zone)
    return (arc_contains(look_angle.relative_azimuth, start, end)
            and look_angle.elevation < zone.max_elevation)


def blocking_zones(zones: Iterable[BlockageZone], look_angle: LookAngle) -> List[BlockageZone]:
    """Zones that block ``look_angle``, in collection order"""
    return [zone for zone in zones if is_blocking(zone, look_angle)]


def zone_from_center(name: str, center: float, width: float, max_elevation: float,
                     zone_id: Optional[str] = None) -> BlockageZone:
    """
    Build a zone from a centre bearing and an angular width.

    Parameters
    ----------
    name : str
        Operator-facing label
    center : float
        Centre of the obstruction, degrees relative to the bow
    width : float
        Angular width in degrees, [0, 360]
    max_elevation : float
        Silhouette height in degrees, [0, 90]
    zone_id : str, optional
        Key for the zone; a random hex id is generated when omitted

    Returns
    -------
    BlockageZone
        Zone with bounds normalised into [0, 360)
    """
    if not 0.0 <= width <= 360.0:
        raise ValueError(f"Zone width must be within [0, 360] degrees, got {width!r}")
    if width == 360.0:
        logger.warning(f"Zone '{name}' spans the full circle; its bounds collapse to a single bearing")
    half_width = width / 2.0
    return BlockageZone(
        id=zone_id if zone_id is not None else uuid.uuid4().hex,
        name=name,
        start_rel_az=normalize_deg(center - half_width),
        end_rel_az=normalize_deg(center + half_width),
        max_elevation=float(max_elevation),
    )


def add_zone(zones: Sequence[BlockageZone], zone: BlockageZone) -> List[BlockageZone]:
    """Return a new list with ``zone`` appended; ids must stay unique"""
    if any(existing.id == zone.id for existing in zones):
        raise ValueError(f"Zone id '{zone.id}' already exists")
    return [*zones, zone]


def remove_zone(zones: Sequence[BlockageZone], zone_id: str) -> List[BlockageZone]:
    """Return a new list without the zone keyed ``zone_id``"""
    remaining = [zone for zone in zones if zone.id != zone_id]
    if len(remaining) == len(zones):
        raise KeyError(zone_id)
    return remaining
