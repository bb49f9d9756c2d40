"""
Unit tests for physical quantities
"""

import pickle
import unittest

from arcflash.units import Voltage, Current, Length, Time, EnergyDensity


class TestConversion(unittest.TestCase):
    """Test unit conversion"""

    def test_length_units(self):
        gap = Length(104.0, "mm")
        self.assertAlmostEqual(gap.to("m"), 0.104)
        self.assertAlmostEqual(gap.to("cm"), 10.4)
        self.assertAlmostEqual(gap.to("um"), 104000.0)
        self.assertAlmostEqual(Length(1.0, "in").to("mm"), 25.4)
        self.assertAlmostEqual(Length(1.0, "ft").to("in"), 12.0)

    def test_decimal_sub_units_are_exact(self):
        self.assertEqual(Length(0.104, "m"), Length(104.0, "mm"))
        self.assertEqual(Voltage(480.0, "V"), Voltage(0.48, "kV"))
        self.assertEqual(Length(0.032, "m"), Length(32.0, "mm"))
        self.assertAlmostEqual(Time(61.3, "ms").si, 0.0613)

    def test_voltage_and_current(self):
        self.assertAlmostEqual(Voltage(4160000.0, "mV").to("kV"), 4.16)
        self.assertAlmostEqual(Current(15000000.0, "mA").to("kA"), 15.0)

    def test_energy_density(self):
        threshold = EnergyDensity(1.2, "cal/cm2")
        self.assertAlmostEqual(threshold.to("J/cm2"), 5.0208)
        self.assertAlmostEqual(EnergyDensity(1.0, "J/cm2").to("J/m2"), 10000.0)

    def test_unknown_unit(self):
        with self.assertRaises(ValueError):
            Length(1.0, "furlong")
        with self.assertRaises(ValueError):
            Voltage(1.0, "V").to("A")

    def test_format(self):
        self.assertEqual(Current(12.9791, "kA").format("kA"), "12.979 kA")
        self.assertEqual(Length(1606.4, "mm").format("mm", 0), "1606 mm")
        self.assertEqual(str(Voltage(480.0, "V")), "480.000 V")


class TestArithmetic(unittest.TestCase):
    """Test quantity arithmetic and comparison"""

    def test_add_and_subtract(self):
        total = Time(170.0, "ms") + Time(27.0, "ms")
        self.assertAlmostEqual(total.to("ms"), 197.0)
        self.assertAlmostEqual((total - Time(0.1, "s")).to("ms"), 97.0)

    def test_mixed_dimensions_rejected(self):
        with self.assertRaises(TypeError):
            Length(1.0, "m") + Time(1.0, "s")
        with self.assertRaises(TypeError):
            Current(1.0, "A") * Voltage(1.0, "V")

    def test_scaling(self):
        i = Current(10.0, "kA")
        self.assertAlmostEqual((i * 0.5).to("kA"), 5.0)
        self.assertAlmostEqual((0.5 * i).to("kA"), 5.0)
        self.assertAlmostEqual((i / 4.0).to("kA"), 2.5)
        self.assertIsInstance(i * 0.5, Current)

    def test_ratio_is_dimensionless(self):
        ratio = Length(1.0, "m") / Length(250.0, "mm")
        self.assertIsInstance(ratio, float)
        self.assertAlmostEqual(ratio, 4.0)

    def test_ordering(self):
        self.assertGreater(Length(1.0, "m"), Length(999.0, "mm"))
        self.assertLessEqual(Voltage(0.6, "kV"), Voltage(600.0, "V"))
        self.assertEqual(max(Current(1.0, "kA"), Current(900.0, "A")), Current(1.0, "kA"))

    def test_different_dimensions_never_equal(self):
        self.assertNotEqual(Length(1.0, "m"), Time(1.0, "s"))
        with self.assertRaises(TypeError):
            Length(1.0, "m") < Time(1.0, "s")

    def test_sum_with_start(self):
        total = sum([EnergyDensity(1.0, "J/cm2"), EnergyDensity(2.0, "J/cm2")], EnergyDensity(0.0, "J/m2"))
        self.assertAlmostEqual(total.to("J/cm2"), 3.0)


class TestImmutability(unittest.TestCase):
    """Test that quantities behave as values"""

    def test_cannot_assign(self):
        gap = Length(32.0, "mm")
        with self.assertRaises(AttributeError):
            gap._si = 1.0
        with self.assertRaises(AttributeError):
            gap.unit = "m"

    def test_hashable(self):
        values = {Length(0.032, "m"), Length(32.0, "mm")}
        self.assertEqual(len(values), 1)

    def test_pickle(self):
        d = Length(914.4, "mm")
        self.assertEqual(pickle.loads(pickle.dumps(d)), d)

    def test_from_si(self):
        self.assertEqual(Voltage.from_si(480.0), Voltage(0.48, "kV"))
        self.assertIsInstance(Voltage.from_si(480.0), Voltage)


if __name__ == "__main__":
    unittest.main()
