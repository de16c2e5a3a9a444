import unittest
import logging
import numpy as np
from pysatlink.core.data_structures import (
    BlockageZone, Coordinates, SignalStatus, DEFAULT_BLOCKAGE_ZONES
)
from pysatlink.geometry.look_angle import compute_look_angle
from pysatlink.link.classifier import classify_signal
from pysatlink.link.heading import SWEEP_COLUMNS, suggest_heading, sweep_headings


class TestSweepHeadings(unittest.TestCase):

    def setUp(self):
        self.ship = Coordinates(20.0, -155.0)
        self.sat_lng = -170.0

    def test_columns_and_length(self):
        sweep = sweep_headings(self.ship, self.sat_lng, DEFAULT_BLOCKAGE_ZONES)
        self.assertEqual(list(sweep.columns), SWEEP_COLUMNS)
        self.assertEqual(len(sweep), 360)
        self.assertEqual(len(sweep_headings(self.ship, self.sat_lng, [], step=90.0)), 4)

    def test_matches_scalar_classifier(self):
        sweep = sweep_headings(self.ship, self.sat_lng, DEFAULT_BLOCKAGE_ZONES)
        for row in sweep.itertuples(index=False):
            la = compute_look_angle(self.ship, self.sat_lng, row.heading)
            self.assertAlmostEqual(row.relative_azimuth, la.relative_azimuth, places=9)
            self.assertEqual(row.status, classify_signal(la, DEFAULT_BLOCKAGE_ZONES).value)

    def test_blocked_headings(self):
        sweep = sweep_headings(self.ship, self.sat_lng, DEFAULT_BLOCKAGE_ZONES)
        blocked = sweep.loc[sweep['status'] == 'BLOCKED', 'heading'].to_numpy()
        # Funnel covers relative 170-190, i.e. headings 311.92 to 331.92
        np.testing.assert_array_equal(blocked, np.arange(312.0, 332.0))

    def test_no_los_everywhere(self):
        sweep = sweep_headings((0.0, 0.0), 100.0, DEFAULT_BLOCKAGE_ZONES, step=30.0)
        self.assertTrue((sweep['status'] == SignalStatus.NO_LOS.value).all())

    def test_invalid_step(self):
        for step in [0.0, -1.0, 400.0, float('nan')]:
            with self.assertRaises(ValueError):
                sweep_headings(self.ship, self.sat_lng, [], step=step)


class TestSuggestHeading(unittest.TestCase):

    def setUp(self):
        self.ship = Coordinates(20.0, -155.0)
        self.sat_lng = -170.0

    def test_blocked_turns_to_nearest_clear_heading(self):
        heading = suggest_heading(self.ship, self.sat_lng, 322.0, DEFAULT_BLOCKAGE_ZONES)
        self.assertEqual(heading, 332.0)

    def test_suggestion_is_clear(self):
        heading = suggest_heading(self.ship, self.sat_lng, 315.0, DEFAULT_BLOCKAGE_ZONES)
        self.assertEqual(heading, 311.0)
        la = compute_look_angle(self.ship, self.sat_lng, heading)
        self.assertIsNot(classify_signal(la, DEFAULT_BLOCKAGE_ZONES), SignalStatus.BLOCKED)

    def test_clear_heading_kept(self):
        self.assertEqual(suggest_heading(self.ship, self.sat_lng, 10.0, DEFAULT_BLOCKAGE_ZONES), 10.0)
        self.assertEqual(suggest_heading(self.ship, self.sat_lng, 370.0, DEFAULT_BLOCKAGE_ZONES), 10.0)

    def test_no_los_has_no_suggestion(self):
        self.assertIsNone(suggest_heading((0.0, 0.0), 100.0, 0.0, DEFAULT_BLOCKAGE_ZONES))

    def test_fully_blocked(self):
        canopy = [BlockageZone('all', 'Canopy', 0.0, 359.999, 90.0)]
        with self.assertLogs('pysatlink.link.heading', level=logging.WARNING):
            self.assertIsNone(suggest_heading(self.ship, self.sat_lng, 0.0, canopy))


if __name__ == '__main__':
    unittest.main()
