#!/usr/bin/env python3
"""Example: IEEE 1584-2018 Annex D.2 (480 V switchgear).

Low voltage calculation: Equation 25 for the final arcing current and
Equation 6 for the incident energy. The reduced case keeps the full
600 V intermediate arcing current in the energy equation.
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
    energy_at_distance,
)


def main():
    print(f"\n{'='*60}")
    print("IEEE 1584-2018 Annex D.2 - Low Voltage Example")
    print(f"{'='*60}")

    # Same inputs as the standard, partly in other units
    cubicle = Cubicle(
        v_oc=Voltage(480.0, "V"),
        ec=ElectrodeConfiguration.VCB,
        g=Length(32.0, "mm"),
        d=Length(24.0, "in"),
        height=Length(610.0, "mm"),
        width=Length(610.0, "mm"),
        depth=Length(254.0, "mm"),
    )
    i_bf = Current(45.0, "kA")

    for key, value in cubicle.summary().items():
        print(f"  {key:<24} {value}")

    cases = (
        ("Full", estimate_arc_current(cubicle, i_bf, reduced=False), Time(61.3, "ms")),
        ("Reduced", estimate_arc_current(cubicle, i_bf, reduced=True), Time(319.0, "ms")),
    )

    for label, i_arc, t_arc in cases:
        result = estimate_energy_and_boundary(cubicle, i_arc, t_arc)
        lv = i_arc.lv()
        print(f"\n{label} arcing current")
        print("-" * 60)
        print(f"I_arc_600:       {lv.i_arc_600.format('kA')}")
        print(f"I_arc:           {lv.i_arc.format('kA')}")
        print(f"T_arc:           {t_arc.format('ms', 1)}")
        print(f"Incident energy: {result.e.format('J/cm2')} ({result.e.format('cal/cm2', 2)})")
        print(f"AFB:             {result.afb.format('mm', 0)}")

        for distance_in in (18.0, 36.0, 48.0):
            e = energy_at_distance(cubicle, result, Length(distance_in, "in"))
            print(f"  E at {distance_in:>4.0f} in:    {e.format('cal/cm2', 2)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
