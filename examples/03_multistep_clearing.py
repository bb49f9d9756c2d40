#!/usr/bin/env python3
"""Example: Multistep incident energy.

An arcing fault on a 13.8 kV bus is fed by the utility and by a local
generator. The generator breaker opens first; the remaining utility
contribution is cleared later by the upstream relay:

    Step 1:  0 - 120 ms   I_bf = 25 kA  (utility + generator)
    Step 2: 120 - 450 ms  I_bf = 18 kA  (utility only)

The total incident energy is the sum of the step energies. The arc flash
boundary is back-calculated from the summed intermediate energies.
"""

import logging
import sys
sys.path.insert(0, 'src')

from arcflash import (
    Cubicle,
    ElectrodeConfiguration,
    Voltage,
    Current,
    Time,
    aggregate,
    estimate_arc_current,
    estimate_energy_and_boundary,
)


def main():
    print(f"\n{'='*60}")
    print("Multistep Arc Flash Calculation - 13.8 kV Switchgear")
    print(f"{'='*60}")

    cubicle = Cubicle.from_equipment_class(
        Voltage(13.8, "kV"), ElectrodeConfiguration.VCB, "15kV Switchgear"
    )
    print(f"CF: {cubicle.cf:.3f}, VarCf: {cubicle.var_cf:.3f}")

    steps = [
        (Current(25.0, "kA"), Time(120.0, "ms")),
        (Current(18.0, "kA"), Time(330.0, "ms")),
    ]

    for reduced in (False, True):
        label = "Reduced" if reduced else "Full"
        print(f"\n{label} arcing current")
        print("-" * 60)
        results = []
        for n, (i_bf, t_arc) in enumerate(steps, start=1):
            i_arc = estimate_arc_current(cubicle, i_bf, reduced=reduced)
            result = estimate_energy_and_boundary(cubicle, i_arc, t_arc)
            results.append(result)
            print(f"Step {n}: I_arc = {i_arc.i_arc.format('kA')}, {result}")

        total_e, total_afb = aggregate(cubicle, results)
        print(f"Total:  E = {total_e.format('J/cm2')} ({total_e.format('cal/cm2', 2)}), "
              f"AFB = {total_afb.format('mm', 0)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
