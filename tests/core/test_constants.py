#!/usr/bin/env python3
"""Test suite for physical constants"""

import unittest
import numpy as np
from pysatlink.core.constants import (
    EARTH_RADIUS_KM, GEO_ALTITUDE_KM, GEO_RADIUS_KM, RADIUS_RATIO,
    R2D, D2R, NO_LOS_ELEVATION_DEG, MARGINAL_ELEVATION_DEG,
    COMMON_SATELLITES, find_catalog_satellite
)


class TestPhysicalConstants(unittest.TestCase):

    def test_radii(self):
        self.assertEqual(EARTH_RADIUS_KM, 6371.0)
        self.assertEqual(GEO_ALTITUDE_KM, 35786.0)
        self.assertEqual(GEO_RADIUS_KM, 42157.0)
        self.assertAlmostEqual(RADIUS_RATIO, 6371.0 / 42157.0, places=15)

    def test_unit_conversions(self):
        self.assertAlmostEqual(180.0 * D2R, np.pi, places=12)
        self.assertAlmostEqual(np.pi * R2D, 180.0, places=12)

    def test_policy_thresholds(self):
        self.assertEqual(NO_LOS_ELEVATION_DEG, 5.0)
        self.assertEqual(MARGINAL_ELEVATION_DEG, 15.0)


class TestSatelliteCatalog(unittest.TestCase):

    def test_catalog_longitudes_valid(self):
        for name, lng in COMMON_SATELLITES:
            self.assertTrue(name)
            self.assertGreaterEqual(lng, -180.0)
            self.assertLessEqual(lng, 180.0)

    def test_find_catalog_satellite(self):
        self.assertEqual(find_catalog_satellite(180.05), ("Intelsat 18 (180°E)", 180.0))
        self.assertEqual(find_catalog_satellite(-34.5)[1], -34.5)
        self.assertIsNone(find_catalog_satellite(-170.0))
        self.assertIsNone(find_catalog_satellite(-127.2))


if __name__ == '__main__':
    unittest.main()
