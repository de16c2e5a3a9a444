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

"""Deck radar plot: blockage zones and satellite position around the bow"""

from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np

from ..blockage.zones import zone_sector
from ..core.data_structures import BlockageZone, LookAngle, SignalStatus

STATUS_COLORS = {
    SignalStatus.OPTIMAL: '#22c55e',
    SignalStatus.MARGINAL: '#f59e0b',
    SignalStatus.BLOCKED: '#ef4444',
    SignalStatus.NO_LOS: '#64748b',
}
ZONE_COLOR = '#ef4444'


def _sector_width(start, end):
    return (end - start) % 360.0


def plot_deck_radar(look_angle: LookAngle, zones: Iterable[BlockageZone],
                    status: SignalStatus, ax=None):
    """
    Plot the sky around the ship in bow-relative coordinates.

    The bow points up and bearings increase clockwise. Radius is zenith
    distance (90 - elevation), so the horizon is the outer ring. Each zone is
    a wedge from the horizon up to its max elevation; the satellite marker is
    coloured by link status and pinned to the horizon when below it.

    Parameters
    ----------
    look_angle : LookAngle
        Current pointing solution
    zones : iterable of BlockageZone
        Zones to draw
    status : SignalStatus
        Link state used for the marker colour
    ax : matplotlib polar Axes, optional
        Axes to draw into; a new figure is created when omitted

    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(subplot_kw={'projection': 'polar'})

    ax.set_theta_zero_location('N')
    ax.set_theta_direction(-1)
    ax.set_rlim(0.0, 90.0)
    ax.set_rticks([30.0, 60.0, 90.0])
    ax.set_yticklabels(['60°', '30°', '0°'])

    for zone in zones:
        start, end = zone_sector(zone)
        width = _sector_width(start, end)
        ax.bar(np.radians(start + width / 2.0), zone.max_elevation,
               width=np.radians(width), bottom=90.0 - zone.max_elevation,
               color=ZONE_COLOR, alpha=0.35, edgecolor=ZONE_COLOR, label=zone.name)

    radius = 90.0 - min(max(look_angle.elevation, 0.0), 90.0)
    ax.plot([np.radians(look_angle.relative_azimuth)], [radius], marker='o',
            markersize=10, color=STATUS_COLORS[status], linestyle='none',
            label=f"SAT ({status.value})")
    ax.set_title(f"Rel Az {look_angle.relative_azimuth:.1f}°  El {look_angle.elevation:.1f}°")
    return ax
