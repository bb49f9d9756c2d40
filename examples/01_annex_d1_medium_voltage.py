#!/usr/bin/env python3
"""Example: IEEE 1584-2018 Annex D.1 (4.16 kV switchgear).

Reproduces the medium voltage worked example step by step:
- Intermediate and final arcing currents (full and reduced)
- Enclosure size correction factor
- Intermediate and final incident energy and arc flash boundary
"""

import logging
import sys
sys.path.insert(0, 'src')

from arcflash import (
    Cubicle,
    ElectrodeConfiguration,
    Voltage,
    Current,
    Length,
    Time,
    estimate_arc_current,
    estimate_energy_and_boundary,
)


def print_case(title, i_arc, result):
    hv_i = i_arc.hv()
    hv_e = result.hv()
    print(f"\n{title}")
    print("-" * 60)
    print(f"{'':>10} {'I_arc (kA)':>12} {'E (J/cm²)':>12} {'AFB (mm)':>10}")
    for label, i, e, afb in (
        ("600 V", hv_i.i_arc_600, hv_e.e_600, hv_e.afb_600),
        ("2700 V", hv_i.i_arc_2700, hv_e.e_2700, hv_e.afb_2700),
        ("14300 V", hv_i.i_arc_14300, hv_e.e_14300, hv_e.afb_14300),
        ("Final", hv_i.i_arc, hv_e.e, hv_e.afb),
    ):
        print(f"{label:>10} {i.to('kA'):>12.3f} {e.to('J/cm2'):>12.3f} {afb.to('mm'):>10.0f}")
    print(f"Incident energy: {hv_e.e.format('cal/cm2', 2)}")


def main():
    print(f"\n{'='*60}")
    print("IEEE 1584-2018 Annex D.1 - Medium Voltage Example")
    print(f"{'='*60}")

    cubicle = Cubicle(
        v_oc=Voltage(4.16, "kV"),
        ec=ElectrodeConfiguration.VCB,
        g=Length(104.0, "mm"),
        d=Length(914.4, "mm"),
        height=Length(1143.0, "mm"),
        width=Length(762.0, "mm"),
        depth=Length(508.0, "mm"),
    )
    i_bf = Current(15.0, "kA")

    print(f"V_oc: {cubicle.v_oc.format('kV', 2)}, I_bf: {i_bf.format('kA', 1)}")
    print(f"Electrode configuration: {cubicle.ec.value}")
    print(f"Equivalent width:  {cubicle.equivalent_width.format('in')}")
    print(f"Equivalent height: {cubicle.equivalent_height.format('in')}")
    print(f"EES: {cubicle.ees.format('in')}, CF: {cubicle.cf:.3f}")
    print(f"VarCf: {cubicle.var_cf:.3f}")

    i_arc_max = estimate_arc_current(cubicle, i_bf, reduced=False)
    e_afb_max = estimate_energy_and_boundary(cubicle, i_arc_max, Time(197.0, "ms"))
    print_case("Full arcing current, T = 197 ms", i_arc_max, e_afb_max)

    i_arc_min = estimate_arc_current(cubicle, i_bf, reduced=True)
    e_afb_min = estimate_energy_and_boundary(cubicle, i_arc_min, Time(223.0, "ms"))
    print_case("Reduced arcing current, T = 223 ms", i_arc_min, e_afb_min)

    worst = max(e_afb_max, e_afb_min, key=lambda r: r.e)
    print(f"\n{'='*60}")
    print(f"Worst case: {worst}")
    print(f"{'='*60}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
