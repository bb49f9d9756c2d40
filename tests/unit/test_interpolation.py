"""
Unit tests for interpolation between the reference voltages (Equations 16-24)
"""

import unittest

from arcflash import interpolate, InvariantViolation, Current


class TestInterpolate(unittest.TestCase):
    """Test the three-point voltage interpolation"""

    def test_linear_data_reproduces_voltage(self):
        for v in (0.61, 1.0, 2.0, 2.7, 4.16, 13.8, 15.0):
            self.assertAlmostEqual(interpolate(v, 0.6, 2.7, 14.3), v)

    def test_below_2700v(self):
        self.assertAlmostEqual(interpolate(1.5, 1.0, 2.0, 4.0), 1.5848, delta=1e-4)

    def test_above_2700v(self):
        self.assertAlmostEqual(interpolate(5.0, 1.0, 2.0, 4.0), 2.39655, delta=1e-5)

    def test_reference_points(self):
        self.assertAlmostEqual(interpolate(2.7, 1.0, 2.0, 4.0), 2.0)
        self.assertAlmostEqual(interpolate(14.3, 1.0, 2.0, 4.0), 4.0)

    def test_quantities(self):
        i = interpolate(4.16, Current(11.117, "kA"), Current(12.816, "kA"), Current(14.116, "kA"))
        self.assertIsInstance(i, Current)
        self.assertAlmostEqual(i.to("kA"), 12.980, delta=2e-3)

    def test_lv_voltage_rejected(self):
        with self.assertRaises(InvariantViolation):
            interpolate(0.6, 1.0, 2.0, 4.0)
        with self.assertRaises(InvariantViolation):
            interpolate(0.48, 1.0, 2.0, 4.0)


if __name__ == "__main__":
    unittest.main()
