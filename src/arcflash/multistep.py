"""Multistep Incident Energy

Combines the results of several calculation time steps, e.g. successive
protection clearing stages with different fault currents:

    Step 1: I_bf = 10 kA for 100 ms  ->  E = 10 J/cm², AFB = 1000 mm
    Step 2: I_bf =  5 kA for 200 ms  ->  E =  2 J/cm², AFB =  500 mm

The total energy is the sum of the step energies (12 J/cm²). The arc flash
boundary is non-linear in energy and cannot be summed:

    HV: sum E_600, E_2700 and E_14300 over all steps, back-calculate
        AFB_600, AFB_2700 and AFB_14300 from the sums, then interpolate.
    LV: back-calculate the boundary from the total energy.
"""

import logging
from typing import Sequence, Tuple

from arcflash.cubicle import Cubicle
from arcflash.enums import ReferenceVoltage
from arcflash.equations import intermediate_afb_from_e, interpolate
from arcflash.incident_energy import IncidentEnergy
from arcflash.units import EnergyDensity, Length

logger = logging.getLogger(__name__)


def _total(energies) -> EnergyDensity:
    return sum(energies, EnergyDensity(0.0, "J/m2"))


def aggregate(c: Cubicle, steps: Sequence[IncidentEnergy]) -> Tuple[EnergyDensity, Length]:
    """Total incident energy and arc flash boundary of a multistep calculation.

    Args:
        c: Cubicle all steps were calculated for
        steps: Incident energy result of each time step

    Returns:
        Tuple of (total_energy, total_afb). An empty sequence gives zero
        energy and a zero boundary.

    Raises:
        InvariantViolation: If a step does not match the cubicle's voltage class
    """
    if not steps:
        return EnergyDensity(0.0, "J/m2"), Length(0.0, "m")

    total_e = _total(step.e for step in steps)

    if c.hv:
        hv_steps = [step.hv() for step in steps]
        afb_600 = intermediate_afb_from_e(c, ReferenceVoltage.V600, _total(s.e_600 for s in hv_steps))
        afb_2700 = intermediate_afb_from_e(c, ReferenceVoltage.V2700, _total(s.e_2700 for s in hv_steps))
        afb_14300 = intermediate_afb_from_e(c, ReferenceVoltage.V14300, _total(s.e_14300 for s in hv_steps))
        total_afb = interpolate(c.v_oc.to("kV"), afb_600, afb_2700, afb_14300)
    else:
        for step in steps:
            step.lv()
        total_afb = intermediate_afb_from_e(c, ReferenceVoltage.V600, total_e)

    logger.debug(
        f"Multistep total over {len(steps)} steps: E = {total_e.format('J/cm2')}, "
        f"AFB = {total_afb.format('mm', 0)}"
    )
    return total_e, total_afb
