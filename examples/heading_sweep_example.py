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
Example of a heading sweep, a coverage footprint and a deck radar plot
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

from pysatlink.blockage import add_zone, zone_from_center
from pysatlink.core import Coordinates, DEFAULT_BLOCKAGE_ZONES
from pysatlink.geometry import visibility_mask
from pysatlink.io import read_zones_csv, write_zones_csv
from pysatlink.link import evaluate_link, sweep_headings
from pysatlink.plot import plot_deck_radar


def example_heading_sweep(zones):
    """Tabulate the link status for every heading"""
    print("\n=== Example: Heading Sweep ===")

    ship = Coordinates(lat=52.0, lng=3.0)
    sweep = sweep_headings(ship, 9.0, zones, step=5.0)
    print(sweep['status'].value_counts().to_string())

    blocked = sweep.loc[sweep['status'] == 'BLOCKED', 'heading']
    if not blocked.empty:
        print(f"Blocked headings: {', '.join(f'{h:.0f}' for h in blocked)}")


def example_coverage():
    """Fraction of a coarse world grid that sees the satellite above 5 deg"""
    print("\n=== Example: Coverage Footprint ===")

    lats = np.arange(-80.0, 81.0, 10.0)
    lngs = np.arange(-180.0, 180.0, 10.0)
    mask = visibility_mask(9.0, lats, lngs)
    print(f"Visible grid nodes: {mask.sum()} of {mask.size} ({100.0 * mask.mean():.1f}%)")


def example_radar(zones, output_file):
    """Save a deck radar plot"""
    print("\n=== Example: Deck Radar ===")

    result = evaluate_link((52.0, 3.0), 9.0, 20.0, zones)
    ax = plot_deck_radar(result.look_angle, zones, result.status)
    ax.figure.savefig(output_file, dpi=120)
    plt.close(ax.figure)
    print(f"Saved {output_file}")


if __name__ == "__main__":
    zones = add_zone(DEFAULT_BLOCKAGE_ZONES, zone_from_center("Radar Mast", 0.0, 12.0, 35.0, zone_id="4"))
    write_zones_csv(zones, "deck_zones.csv")
    zones = read_zones_csv("deck_zones.csv")

    example_heading_sweep(zones)
    example_coverage()
    example_radar(zones, "deck_radar.png")
