import unittest
import numpy as np
from pysatlink.geometry.coverage import elevation_grid, visibility_mask


class TestCoverage(unittest.TestCase):

    def setUp(self):
        self.lats = np.array([-60.0, -20.0, 0.0, 20.0, 60.0])
        self.lngs = np.array([-170.0, -120.0, -30.0, 40.0])

    def test_grid_shape(self):
        grid = elevation_grid(-30.0, self.lats, self.lngs)
        self.assertEqual(grid.shape, (5, 4))

    def test_sub_satellite_point_is_zenith(self):
        grid = elevation_grid(-30.0, self.lats, self.lngs)
        self.assertEqual(grid[2, 2], 90.0)
        self.assertTrue(np.all(grid <= 90.0))

    def test_symmetric_in_latitude(self):
        grid = elevation_grid(-30.0, self.lats, self.lngs)
        np.testing.assert_allclose(grid[0], grid[-1], atol=1e-9)
        np.testing.assert_allclose(grid[1], grid[-2], atol=1e-9)

    def test_visibility_mask(self):
        mask = visibility_mask(-30.0, np.array([0.0]), np.array([-30.0, 150.0]))
        self.assertTrue(mask[0, 0])
        self.assertFalse(mask[0, 1])

    def test_custom_min_elevation(self):
        lats = np.array([0.0, 40.0])
        lngs = np.array([-30.0])
        grid = elevation_grid(-30.0, lats, lngs)
        mask = visibility_mask(-30.0, lats, lngs, min_elevation=grid[1, 0] + 1.0)
        np.testing.assert_array_equal(mask[:, 0], [True, False])

    def test_invalid_satellite_longitude(self):
        with self.assertRaises(ValueError):
            elevation_grid(181.0, self.lats, self.lngs)


if __name__ == '__main__':
    unittest.main()
