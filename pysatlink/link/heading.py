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
Heading sweeps and heading suggestions.

Azimuth and elevation do not depend on the ship's heading; only the
bow-relative azimuth does. A sweep therefore computes the look angle once and
rotates it through every candidate heading with the compiled array helpers.
"""

import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from ..blockage.zones import zone_sector
from ..coordinate.angles import arc_contains_array, normalize_deg, wrap_to_360
from ..core.config import DEFAULT_THRESHOLDS, SignalThresholds
from ..core.data_structures import BlockageZone, SignalStatus
from ..geometry.look_angle import compute_look_angle
from .classifier import classify_signal

logger = logging.getLogger(__name__)

SWEEP_COLUMNS = ['heading', 'relative_azimuth', 'elevation', 'status']


def _heading_grid(step: float) -> np.ndarray:
    if not np.isfinite(step) or not 0.0 < step <= 360.0:
        raise ValueError(f"Heading step must be within (0, 360] degrees, got {step!r}")
    return np.arange(0.0, 360.0, step, dtype=np.float64)


def sweep_headings(ship_pos, sat_lng: float, zones: Iterable[BlockageZone],
                   step: float = 1.0,
                   thresholds: Optional[SignalThresholds] = None) -> pd.DataFrame:
    """
    Classify the link for every heading on a regular grid.

    Parameters
    ----------
    ship_pos : Coordinates or tuple
        Ship position in degrees
    sat_lng : float
        Satellite longitude in degrees
    zones : iterable of BlockageZone
        Snapshot of the zone collection
    step : float, optional
        Heading spacing in degrees, grid starts at 0 (default: 1.0)
    thresholds : SignalThresholds, optional
        Elevation thresholds

    Returns
    -------
    pd.DataFrame
        Columns: heading, relative_azimuth, elevation, status (status value
        strings, e.g. ``'BLOCKED'``)
    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS
    zones = tuple(zones)
    headings = _heading_grid(step)

    look_angle = compute_look_angle(ship_pos, sat_lng, 0.0)
    elevation = look_angle.elevation
    relative = wrap_to_360(look_angle.azimuth - headings)

    if elevation < thresholds.no_los_elevation:
        status = np.full(headings.shape, SignalStatus.NO_LOS.value, dtype=object)
    else:
        blocked = np.zeros(headings.shape, dtype=bool)
        for zone in zones:
            if elevation < zone.max_elevation:
                start, end = zone_sector(zone)
                blocked |= arc_contains_array(relative, start, end)
        clear = (SignalStatus.MARGINAL.value if elevation < thresholds.marginal_elevation
                 else SignalStatus.OPTIMAL.value)
        status = np.where(blocked, SignalStatus.BLOCKED.value, clear).astype(object)

    return pd.DataFrame({
        'heading': headings,
        'relative_azimuth': relative,
        'elevation': np.full(headings.shape, elevation),
        'status': status,
    }, columns=SWEEP_COLUMNS)


def _angular_distance(a, b):
    diff = np.abs(np.mod(a - b, 360.0))
    return np.minimum(diff, 360.0 - diff)


def suggest_heading(ship_pos, sat_lng: float, current_heading: float,
                    zones: Iterable[BlockageZone],
                    thresholds: Optional[SignalThresholds] = None,
                    step: float = 1.0) -> Optional[float]:
    """
    Closest heading that clears every blockage zone.

    Parameters
    ----------
    ship_pos : Coordinates or tuple
        Ship position in degrees
    sat_lng : float
        Satellite longitude in degrees
    current_heading : float
        Present heading in degrees true
    zones : iterable of BlockageZone
        Snapshot of the zone collection
    thresholds : SignalThresholds, optional
        Elevation thresholds
    step : float, optional
        Resolution of the candidate headings, grid starts at 0 (default: 1.0)

    Returns
    -------
    float or None
        The current heading (normalised) when it is not blocked; otherwise the
        grid heading nearest to it that is not blocked, ties going to the
        smaller heading. None when the link is NO_LOS, since turning the ship
        does not change elevation, or when every heading is blocked.
    """
    zones = tuple(zones)
    look_angle = compute_look_angle(ship_pos, sat_lng, current_heading)
    status = classify_signal(look_angle, zones, thresholds)

    if status is SignalStatus.NO_LOS:
        return None
    if status is not SignalStatus.BLOCKED:
        return normalize_deg(current_heading)

    sweep = sweep_headings(ship_pos, sat_lng, zones, step=step, thresholds=thresholds)
    candidates = sweep.loc[sweep['status'] != SignalStatus.BLOCKED.value, 'heading'].to_numpy()
    if candidates.size == 0:
        logger.warning("Every heading is blocked for this satellite; no heading to suggest")
        return None

    distance = _angular_distance(candidates, normalize_deg(current_heading))
    best = float(candidates[int(np.argmin(distance))])
    logger.debug(f"Heading {current_heading:.1f} blocked, nearest clear heading {best:.1f}")
    return best
