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
pysatlink - Ship-to-GEO look angles and link status

A Python library that computes the pointing angle from a ship to a
geostationary satellite and classifies the link (OPTIMAL, MARGINAL, BLOCKED,
NO_LOS) against ship-structure blockage zones and the minimum-elevation
transmit rule.
"""

__version__ = "1.0.0"
__author__ = "pysatlink Development Team"
__title__ = "pysatlink"
__description__ = "Ship-to-GEO look angle and link status engine"

from . import logger
from .core import *
from .coordinate import *
from .geometry import *
from .blockage import *
from .link import *
from .advisory import *
# matplotlib is loaded on demand: import pysatlink.plot explicitly
