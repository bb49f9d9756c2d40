"""
Unit tests for multistep incident energy aggregation
"""

import pytest

from arcflash import (
    Current,
    EnergyDensity,
    InvariantViolation,
    Length,
    Time,
    aggregate,
    estimate_arc_current,
    estimate_energy_and_boundary,
)


def run_steps(cubicle, steps):
    """Incident energy results for a list of (I_bf kA, duration ms, reduced)."""
    results = []
    for i_bf_ka, t_ms, reduced in steps:
        i_arc = estimate_arc_current(cubicle, Current(i_bf_ka, "kA"), reduced=reduced)
        results.append(estimate_energy_and_boundary(cubicle, i_arc, Time(t_ms, "ms")))
    return results


class TestSplitDuration:
    """A single fault split into steps equals the unsplit calculation"""

    def test_annex_d1_full(self, d1_cubicle):
        e, afb = aggregate(d1_cubicle, run_steps(d1_cubicle, [(15.0, 170.0, False), (15.0, 27.0, False)]))
        assert e.to("J/cm2") == pytest.approx(12.152, abs=1e-3)
        assert afb.to("mm") == pytest.approx(1606.0, abs=1.0)

    def test_annex_d1_reduced(self, d1_cubicle):
        e, afb = aggregate(d1_cubicle, run_steps(d1_cubicle, [(15.0, 200.0, True), (15.0, 23.0, True)]))
        assert e.to("J/cm2") == pytest.approx(13.343, abs=1e-3)
        assert afb.to("mm") == pytest.approx(1704.0, abs=1.0)

    def test_annex_d2_full(self, d2_cubicle):
        e, afb = aggregate(d2_cubicle, run_steps(d2_cubicle, [(45.0, 50.0, False), (45.0, 11.3, False)]))
        assert e.to("J/cm2") == pytest.approx(11.585, abs=1e-3)
        assert afb.to("mm") == pytest.approx(1029.0, abs=1.0)

    def test_annex_d2_reduced(self, d2_cubicle):
        e, afb = aggregate(d2_cubicle, run_steps(d2_cubicle, [(45.0, 200.0, True), (45.0, 119.0, True)]))
        assert e.to("J/cm2") == pytest.approx(53.156, abs=1e-3)
        assert afb.to("mm") == pytest.approx(2669.0, abs=1.0)

    def test_single_step_matches_result(self, d1_cubicle):
        [step] = run_steps(d1_cubicle, [(15.0, 197.0, False)])
        e, afb = aggregate(d1_cubicle, [step])
        assert e.si == pytest.approx(step.e.si)
        assert afb.si == pytest.approx(step.afb.si)


class TestDifferentCurrents:
    """Steps with different fault currents"""

    def test_energies_add(self, d1_cubicle):
        steps = run_steps(d1_cubicle, [(20.0, 100.0, False), (8.0, 300.0, False)])
        e, afb = aggregate(d1_cubicle, steps)
        assert e.si == pytest.approx(steps[0].e.si + steps[1].e.si)
        assert afb > max(s.afb for s in steps)

    def test_lv_energies_add(self, d2_cubicle):
        steps = run_steps(d2_cubicle, [(45.0, 30.0, False), (20.0, 200.0, False)])
        e, afb = aggregate(d2_cubicle, steps)
        assert e.si == pytest.approx(steps[0].e.si + steps[1].e.si)
        assert afb > max(s.afb for s in steps)


class TestEdgeCases:
    """Empty input and voltage class mismatch"""

    def test_no_steps(self, d1_cubicle):
        e, afb = aggregate(d1_cubicle, [])
        assert e == EnergyDensity(0.0, "J/m2")
        assert afb == Length(0.0, "m")

    def test_zero_duration_steps_hv(self, d1_cubicle):
        steps = run_steps(d1_cubicle, [(15.0, 0.0, False), (10.0, 0.0, True)])
        e, afb = aggregate(d1_cubicle, steps)
        assert e.si == pytest.approx(0.0)
        assert afb.si == pytest.approx(0.0)

    def test_zero_duration_steps_lv(self, d2_cubicle):
        steps = run_steps(d2_cubicle, [(45.0, 0.0, False), (45.0, 0.0, True)])
        e, afb = aggregate(d2_cubicle, steps)
        assert e.si == 0.0
        assert afb == Length(0.0, "m")

    def test_zero_duration_step_adds_nothing(self, d2_cubicle):
        steps = run_steps(d2_cubicle, [(45.0, 0.0, False), (45.0, 61.3, False)])
        e, afb = aggregate(d2_cubicle, steps)
        assert e.to("J/cm2") == pytest.approx(11.585, abs=1e-3)
        assert afb.to("mm") == pytest.approx(1029.0, abs=1.0)

    def test_lv_step_with_hv_cubicle(self, d1_cubicle, d2_cubicle):
        steps = run_steps(d2_cubicle, [(45.0, 61.3, False)])
        with pytest.raises(InvariantViolation):
            aggregate(d1_cubicle, steps)

    def test_hv_step_with_lv_cubicle(self, d1_cubicle, d2_cubicle):
        steps = run_steps(d1_cubicle, [(15.0, 197.0, False)])
        with pytest.raises(InvariantViolation):
            aggregate(d2_cubicle, steps)
