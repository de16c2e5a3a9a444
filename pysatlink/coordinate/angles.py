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
Angle normalisation and angular-sector membership.

All angles are in degrees. Sectors are closed intervals running clockwise from
``start`` to ``end``; when ``start > end`` the sector passes through 0/360.
The scalar functions serve single evaluations, the numba compiled array
functions serve sweeps over many bearings and share the same semantics.
"""

import numpy as np
from numba import njit

FULL_CIRCLE = 360.0


def deg2rad(deg):
    """Degrees to radians"""
    return np.radians(deg)


def rad2deg(rad):
    """Radians to degrees"""
    return np.degrees(rad)


def normalize_deg(x: float) -> float:
    """
    Reduce an angle into [0, 360).

    Parameters
    ----------
    x : float
        Angle in degrees, any finite value

    Returns
    -------
    float
        Equivalent angle in [0, 360)

    Notes
    -----
    Python's modulo already maps negative inputs into [0, 360), but a tiny
    negative input such as -1e-20 rounds up to exactly 360.0; that case is
    folded back to 0.
    """
    value = float(x) % FULL_CIRCLE
    if value >= FULL_CIRCLE:
        return 0.0
    return value


def arc_contains(value: float, start: float, end: float) -> bool:
    """
    Test whether ``value`` lies in the clockwise sector ``[start, end]``.

    Parameters
    ----------
    value : float
        Angle to test, in [0, 360)
    start : float
        Sector start, already normalised into [0, 360)
    end : float
        Sector end, already normalised into [0, 360)

    Returns
    -------
    bool
        True if the angle is inside the sector, bounds included

    Examples
    --------
    >>> arc_contains(5.0, 350.0, 10.0)
    True
    >>> arc_contains(180.0, 350.0, 10.0)
    False
    """
    if start <= end:
        return start <= value <= end
    return value >= start or value <= end


@njit(cache=True)
def wrap_to_360(v1):
    """
    Wrap an array of angles into [0, 360).

    Parameters
    ----------
    v1 : ndarray
        Angles in degrees

    Returns
    -------
    v2 : ndarray
        Angles in degrees, [0, 360)
    """
    v2 = np.mod(v1, FULL_CIRCLE)
    v2[v2 >= FULL_CIRCLE] = 0.0
    return v2


@njit(cache=True)
def arc_contains_array(values, start, end):
    """
    Element-wise :func:`arc_contains` over an array of normalised angles.

    Parameters
    ----------
    values : ndarray
        Angles in [0, 360)
    start : float
        Sector start in [0, 360)
    end : float
        Sector end in [0, 360)

    Returns
    -------
    ndarray of bool
    """
    if start <= end:
        return (values >= start) & (values <= end)
    return (values >= start) | (values <= end)
