#!/usr/bin/env python3
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
Example of evaluating a ship's GEO link and planning a heading change
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pysatlink.advisory import build_advisory_prompt, offline_guidance
from pysatlink.core import Coordinates, DEFAULT_BLOCKAGE_ZONES, find_catalog_satellite
from pysatlink.link import evaluate_link, suggest_heading
from pysatlink.logger import setup_logger


def example_link_status():
    """Evaluate the link for a ship in the Pacific at several headings"""
    print("\n=== Example: Link Status ===")

    ship = Coordinates(lat=20.0, lng=-155.0)
    sat_lng = -170.0
    catalog = find_catalog_satellite(sat_lng)
    print(f"Ship at {ship.lat:.2f}, {ship.lng:.2f}; satellite at {sat_lng:g} "
          f"({catalog[0] if catalog else 'custom slot'})")

    for heading in [0.0, 90.0, 180.0, 322.0]:
        result = evaluate_link(ship, sat_lng, heading, DEFAULT_BLOCKAGE_ZONES)
        la = result.look_angle
        print(f"\nHeading {heading:5.1f}:")
        print(f"  Azimuth:  {la.azimuth:.1f} deg (relative {la.relative_azimuth:.1f} deg)")
        print(f"  Elevation: {la.elevation:.1f} deg, range {la.range:.0f} km")
        print(f"  Status:   {result.status.value}")

        suggestion = None
        if result.blocking_zones:
            print(f"  Blocked by: {', '.join(z.name for z in result.blocking_zones)}")
            suggestion = suggest_heading(ship, sat_lng, heading, DEFAULT_BLOCKAGE_ZONES)
        print(f"  Advice:   {offline_guidance(la, result.status, suggested_heading=suggestion)}")


def example_advisory_prompt():
    """Show the prompt handed to the external advisory service"""
    print("\n=== Example: Advisory Prompt ===")

    ship = Coordinates(lat=20.0, lng=-155.0)
    result = evaluate_link(ship, -170.0, 322.0, DEFAULT_BLOCKAGE_ZONES)
    print(build_advisory_prompt(ship, 322.0, -170.0, result.look_angle, result.status))


if __name__ == "__main__":
    setup_logger(level="DEBUG")
    example_link_status()
    example_advisory_prompt()
