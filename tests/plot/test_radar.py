import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

from pysatlink.core.data_structures import (
    BlockageZone, LookAngle, SignalStatus, DEFAULT_BLOCKAGE_ZONES
)
from pysatlink.plot.radar import STATUS_COLORS, plot_deck_radar


class TestDeckRadar(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_creates_polar_axes(self):
        look_angle = LookAngle(141.9, 61.0, 36472.0, 179.9)
        ax = plot_deck_radar(look_angle, DEFAULT_BLOCKAGE_ZONES, SignalStatus.BLOCKED)
        self.assertEqual(ax.name, 'polar')
        self.assertEqual(len(ax.patches), len(DEFAULT_BLOCKAGE_ZONES))

    def test_satellite_marker_colour(self):
        look_angle = LookAngle(141.9, 61.0, 36472.0, 10.0)
        ax = plot_deck_radar(look_angle, [], SignalStatus.OPTIMAL)
        marker = ax.lines[-1]
        self.assertEqual(to_hex(marker.get_color()), STATUS_COLORS[SignalStatus.OPTIMAL])
        self.assertAlmostEqual(marker.get_ydata()[0], 29.0)

    def test_below_horizon_pinned_to_rim(self):
        look_angle = LookAngle(200.0, -12.0, 41000.0, 20.0)
        ax = plot_deck_radar(look_angle, [], SignalStatus.NO_LOS)
        self.assertAlmostEqual(ax.lines[-1].get_ydata()[0], 90.0)

    def test_draws_into_given_axes(self):
        _, ax = plt.subplots(subplot_kw={'projection': 'polar'})
        zones = [BlockageZone('m', 'Bow Mast', 350.0, 10.0, 30.0)]
        result = plot_deck_radar(LookAngle(0.0, 45.0, 36000.0, 0.0), zones, SignalStatus.BLOCKED, ax=ax)
        self.assertIs(result, ax)
        self.assertEqual(len(ax.patches), 1)


if __name__ == '__main__':
    unittest.main()
