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
Link Classification Parameters
==============================

Elevation thresholds used by the signal classifier. The defaults reproduce the
fixed operating policy: no transmission below 5 degrees, degraded link below 15.
"""

from dataclasses import asdict, dataclass, fields

import numpy as np

from .constants import MARGINAL_ELEVATION_DEG, NO_LOS_ELEVATION_DEG


@dataclass(frozen=True)
class SignalThresholds:
    """Elevation thresholds in degrees.

    Attributes
    ----------
    no_los_elevation : float
        Below this elevation the link is NO_LOS regardless of zones
    marginal_elevation : float
        Below this elevation an unobstructed link is MARGINAL
    """
    no_los_elevation: float = NO_LOS_ELEVATION_DEG
    marginal_elevation: float = MARGINAL_ELEVATION_DEG

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value):
                raise ValueError(f"{f.name} must be a finite number, got {value!r}")
        if not 0.0 <= self.no_los_elevation <= self.marginal_elevation <= 90.0:
            raise ValueError(
                "Thresholds must satisfy 0 <= no_los_elevation <= marginal_elevation <= 90, "
                f"got no_los_elevation={self.no_los_elevation}, "
                f"marginal_elevation={self.marginal_elevation}")

    @classmethod
    def from_dict(cls, config: dict) -> "SignalThresholds":
        """Build thresholds from a plain mapping, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown threshold keys: {sorted(unknown)}")
        return cls(**{key: float(value) for key, value in config.items()})

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_THRESHOLDS = SignalThresholds()
