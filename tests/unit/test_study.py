"""
Unit tests for batch arc flash studies
"""

import unittest

import numpy as np
import pandas as pd
from pydantic import ValidationError

from arcflash import RangeError, ElectrodeConfiguration
from arcflash.study import ArcFlashScenario, run_scenario, run_study, scenarios_from_records


D1_RECORD = {
    "name": "SWGR-4160",
    "voltage_kv": 4.16,
    "electrode_configuration": "VCB",
    "gap_mm": 104.0,
    "working_distance_mm": 914.4,
    "height_mm": 1143.0,
    "width_mm": 762.0,
    "depth_mm": 508.0,
    "bolted_fault_current_ka": 15.0,
    "arc_duration_ms": 197.0,
    "reduced_arc_duration_ms": 223.0,
}

D2_RECORD = {
    "name": "SWGR-480",
    "voltage_kv": 0.48,
    "electrode_configuration": "VCB",
    "gap_mm": 32.0,
    "working_distance_mm": 609.6,
    "height_mm": 610.0,
    "width_mm": 610.0,
    "depth_mm": 254.0,
    "bolted_fault_current_ka": 45.0,
    "arc_duration_ms": 61.3,
    "reduced_arc_duration_ms": 319.0,
}


class TestScenarioValidation(unittest.TestCase):
    """Test pydantic scenario validation"""

    def test_parse_record(self):
        scenario = ArcFlashScenario.model_validate(D1_RECORD)
        self.assertEqual(scenario.electrode_configuration, ElectrodeConfiguration.VCB)
        self.assertEqual(scenario.reduced_arc_duration_ms, 223.0)

    def test_reduced_duration_optional(self):
        record = dict(D1_RECORD)
        del record["reduced_arc_duration_ms"]
        self.assertIsNone(ArcFlashScenario.model_validate(record).reduced_arc_duration_ms)

    def test_non_positive_rejected(self):
        with self.assertRaises(ValidationError):
            ArcFlashScenario.model_validate(dict(D1_RECORD, gap_mm=-1.0))
        with self.assertRaises(ValidationError):
            ArcFlashScenario.model_validate(dict(D1_RECORD, arc_duration_ms=0.0))

    def test_unknown_configuration_rejected(self):
        with self.assertRaises(ValidationError):
            ArcFlashScenario.model_validate(dict(D1_RECORD, electrode_configuration="XYZ"))

    def test_from_dataframe(self):
        df = pd.DataFrame([D1_RECORD, dict(D2_RECORD, reduced_arc_duration_ms=np.nan)])
        scenarios = scenarios_from_records(df)
        self.assertEqual(len(scenarios), 2)
        self.assertEqual(scenarios[0].name, "SWGR-4160")
        self.assertIsNone(scenarios[1].reduced_arc_duration_ms)

    def test_cubicle(self):
        c = ArcFlashScenario.model_validate(D2_RECORD).cubicle()
        self.assertFalse(c.hv)
        self.assertAlmostEqual(c.cf, 1.085, delta=1e-3)


class TestRunScenario(unittest.TestCase):
    """Test single scenario calculation"""

    def test_annex_d1(self):
        row = run_scenario(ArcFlashScenario.model_validate(D1_RECORD))
        self.assertEqual(row["model"], "HV")
        self.assertAlmostEqual(row["i_arc_full_ka"], 12.979, delta=1e-3)
        self.assertAlmostEqual(row["i_arc_reduced_ka"], 12.675, delta=1e-3)
        self.assertAlmostEqual(row["e_full_j_cm2"], 12.152, delta=1e-3)
        self.assertAlmostEqual(row["e_reduced_j_cm2"], 13.343, delta=1e-3)
        self.assertEqual(row["worst_case"], "reduced")
        self.assertAlmostEqual(row["afb_mm"], 1704.0, delta=1.0)
        self.assertIsNone(row["error"])

    def test_annex_d2(self):
        row = run_scenario(ArcFlashScenario.model_validate(D2_RECORD))
        self.assertEqual(row["model"], "LV")
        self.assertEqual(row["worst_case"], "reduced")
        self.assertAlmostEqual(row["e_j_cm2"], 53.156, delta=1e-3)
        self.assertAlmostEqual(row["e_cal_cm2"], 53.156 / 4.184, delta=1e-3)

    def test_same_duration_full_is_worst(self):
        # With equal durations the higher full arcing current dominates in D.1
        record = dict(D1_RECORD, reduced_arc_duration_ms=None)
        row = run_scenario(ArcFlashScenario.model_validate(record))
        self.assertEqual(row["worst_case"], "full")
        self.assertEqual(row["e_j_cm2"], row["e_full_j_cm2"])

    def test_out_of_range(self):
        with self.assertRaises(RangeError):
            run_scenario(ArcFlashScenario.model_validate(dict(D2_RECORD, gap_mm=100.0)))


class TestRunStudy(unittest.TestCase):
    """Test study DataFrame output"""

    def test_dataframe(self):
        df = run_study(scenarios_from_records([D1_RECORD, D2_RECORD]))
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.index), ["SWGR-4160", "SWGR-480"])
        self.assertAlmostEqual(df.loc["SWGR-480", "afb_full_mm"], 1029.0, delta=1.0)
        self.assertTrue(df["error"].isna().all())

    def test_errors_raised_by_default(self):
        bad = dict(D2_RECORD, name="BAD", bolted_fault_current_ka=200.0)
        with self.assertRaises(RangeError):
            run_study(scenarios_from_records([D1_RECORD, bad]))

    def test_errors_collected(self):
        bad = dict(D2_RECORD, name="BAD", bolted_fault_current_ka=200.0)
        with self.assertLogs("arcflash.study", level="WARNING"):
            df = run_study(scenarios_from_records([D1_RECORD, bad]), raise_on_error=False)
        self.assertEqual(len(df), 2)
        self.assertIn("bolted fault current", df.loc["BAD", "error"])
        self.assertTrue(np.isnan(df.loc["BAD", "e_j_cm2"]))
        self.assertAlmostEqual(df.loc["SWGR-4160", "e_full_j_cm2"], 12.152, delta=1e-3)

    def test_empty_study(self):
        df = run_study([])
        self.assertTrue(df.empty)
        self.assertIn("e_cal_cm2", df.columns)

    def test_all_scenarios_failing_keeps_columns(self):
        bad = [
            dict(D2_RECORD, name="BAD-1", bolted_fault_current_ka=200.0),
            dict(D2_RECORD, name="BAD-2", gap_mm=100.0),
        ]
        with self.assertLogs("arcflash.study", level="WARNING"):
            df = run_study(scenarios_from_records(bad), raise_on_error=False)
        self.assertEqual(list(df.index), ["BAD-1", "BAD-2"])
        summary = df[["model", "worst_case", "e_cal_cm2", "afb_mm", "error"]]
        self.assertTrue(summary["e_cal_cm2"].isna().all())
        self.assertTrue(summary["error"].notna().all())


if __name__ == "__main__":
    unittest.main()
