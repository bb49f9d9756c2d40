"""IEEE 1584-2018 Model Equations

Intermediate quantities of the empirical model, evaluated at one of the
reference voltages 0.6 kV, 2.7 kV and 14.3 kV:

    Equation 1        intermediate arcing current I_arc_Voc
    Equation 2        reduced (minimum) arcing current
    Equations 3-6     intermediate incident energy E_Voc
    Equations 7-10    intermediate arc flash boundary AFB_Voc (via E_Voc)
    Equations 16-24   interpolation between the reference voltages
    Equation 25       final LV arcing current

Units inside the equations follow the standard: kA, kV, mm, ms and J/cm².
"""

import logging
from typing import Optional, TypeVar

import numpy as np

from arcflash.config import AFB_THRESHOLD, ENERGY_COEFFICIENT, VARIATION_WEIGHT
from arcflash.cubicle import Cubicle
from arcflash.enums import ReferenceVoltage
from arcflash.exceptions import InvariantViolation
from arcflash.tables import ENERGY_TABLES, TABLE_1
from arcflash.units import Current, EnergyDensity, Length, Time

logger = logging.getLogger(__name__)

X = TypeVar("X")


def interpolate(v_oc_kv: float, x_600: X, x_2700: X, x_14300: X) -> X:
    """Interpolate a quantity between the three reference voltages.

    Applies identically to arcing currents (Eqs 16-18), incident energies
    (Eqs 19-21) and arc flash boundaries (Eqs 22-24). Works for plain
    floats and for Quantity values.

        x1 = x_2700 + (x_2700 - x_600) / 2.1 · (V - 2.7)
        x2 = x_14300 + (x_14300 - x_2700) / 11.6 · (V - 14.3)
        x3 = x1 · (2.7 - V) / 2.1 + x2 · (V - 0.6) / 2.1

    The result is x3 for 0.6 < V <= 2.7 and x2 for V > 2.7.

    Args:
        v_oc_kv: Nominal voltage (kV), must be above 0.6 kV
        x_600, x_2700, x_14300: Values at the reference voltages

    Returns:
        Interpolated value

    Raises:
        InvariantViolation: If v_oc_kv <= 0.6, which only the LV model may use
    """
    # Eq 16, Eq 19, Eq 22
    x1 = (x_2700 - x_600) / 2.1 * (v_oc_kv - 2.7) + x_2700
    # Eq 17, Eq 20, Eq 23
    x2 = (x_14300 - x_2700) / 11.6 * (v_oc_kv - 14.3) + x_14300
    # Eq 18, Eq 21, Eq 24
    x3 = x1 * (2.7 - v_oc_kv) / 2.1 + x2 * (v_oc_kv - 0.6) / 2.1

    if 0.6 < v_oc_kv <= 2.7:
        return x3
    elif v_oc_kv > 2.7:
        return x2
    raise InvariantViolation(f"interpolation requested at V_oc = {v_oc_kv} kV (<= 0.6 kV)")


def i_arc_intermediate(c: Cubicle, v_ref: ReferenceVoltage, i_bf: Current) -> Current:
    """Equation 1: intermediate arcing current at a reference voltage."""
    i_bf_ka = i_bf.to("kA")
    g_mm = c.g.to("mm")
    k = TABLE_1[(c.ec, v_ref)]

    x1 = k.k1 + k.k2 * np.log10(i_bf_ka) + k.k3 * np.log10(g_mm)
    x2 = np.polyval(k.polynomial, i_bf_ka)

    return Current(10.0 ** x1 * x2, "kA")


def i_arc_min(c: Cubicle, i_arc: Current) -> Current:
    """Equation 2: reduced arcing current I_arc_min = I_arc · (1 - 0.5 · VarCf)."""
    return i_arc * (1.0 - VARIATION_WEIGHT * c.var_cf)


def i_arc_final_lv(c: Cubicle, i_arc_600: Current, i_bf: Current) -> Current:
    """Equation 25: final arcing current for V_oc <= 0.6 kV.

        I_arc = 1 / sqrt( (0.6/V)² · [ 1/I_arc_600² - (0.6² - V²) / (0.6² · I_bf²) ] )
    """
    v_kv = c.v_oc.to("kV")
    i_600 = i_arc_600.to("kA")
    i_bf_ka = i_bf.to("kA")

    x1 = (0.6 / v_kv) ** 2
    x2 = 1.0 / i_600 ** 2
    x3 = (0.6 ** 2 - v_kv ** 2) / (0.6 ** 2 * i_bf_ka ** 2)

    return Current(1.0 / np.sqrt(x1 * (x2 - x3)), "kA")


def intermediate_e(
    c: Cubicle,
    v_ref: ReferenceVoltage,
    i_arc: Current,
    i_bf: Current,
    t: Time,
    i_arc_600: Optional[Current] = None,
) -> EnergyDensity:
    """Equations 3, 4, 5 and 6: intermediate incident energy.

    Args:
        c: Cubicle
        v_ref: Reference voltage selecting Table 3, 4 or 5
        i_arc: Arcing current (intermediate for HV, final for LV)
        i_bf: Bolted fault current
        t: Arc duration
        i_arc_600: LV only (Eq 6). The 0.6 kV intermediate arcing current,
            which replaces i_arc in the k3 term. Always the full value, also
            for a reduced-current calculation.

    Returns:
        Incident energy at the working distance
    """
    i_arc_ka = i_arc.to("kA")
    i_bf_ka = i_bf.to("kA")
    t_ms = t.to("ms")
    g_mm = c.g.to("mm")
    d_mm = c.d.to("mm")
    k = ENERGY_TABLES[v_ref][c.ec]

    x1 = ENERGY_COEFFICIENT * t_ms
    x2 = k.k1 + k.k2 * np.log10(g_mm)

    if i_arc_600 is not None:
        # Eq 6
        x3_num = k.k3 * i_arc_600.to("kA")
    else:
        # Eqs 3, 4, 5
        x3_num = k.k3 * i_arc_ka
    x3_den = np.polyval(k.denominator_polynomial, i_bf_ka)
    x3 = x3_num / x3_den

    x4 = k.k11 * np.log10(i_bf_ka) + k.k13 * np.log10(i_arc_ka) + np.log10(1.0 / c.cf)
    x5 = k.k12 * np.log10(d_mm)

    return EnergyDensity(x1 * 10.0 ** (x2 + x3 + x4 + x5), "J/cm2")


def intermediate_afb_from_e(c: Cubicle, v_ref: ReferenceVoltage, e: EnergyDensity) -> Length:
    """Intermediate arc flash boundary from intermediate incident energy.

    Equivalent to Equations 7-10, but needs only E and the working distance
    D. Equations 3-6 reduce to

        E = F · D^k12

    where F collects T, G, I_arc, I_bf and CF and k12 is the distance
    exponent of the table. With F = E / D^k12 known, the boundary is the
    distance at which E falls to 1.2 cal/cm² (5.0208 J/cm²):

        AFB = (5.0208 / F)^(1 / k12)

    This is what allows multistep calculations, where there is no single
    T, I_arc or I_bf to substitute into Equations 7-10. The factor 50/12.552
    of Eqs 3-6 becomes the constant 20 of Eqs 7-10 (50 / 12.552 · 5.0208 = 20).

    A zero (or negative) energy gives a zero boundary.
    """
    if e.si <= 0.0:
        # No energy released (zero arc duration): the boundary collapses to the arc
        return Length(0.0, "m")

    k12 = ENERGY_TABLES[v_ref][c.ec].k12
    f = e.to("J/cm2") / c.d.to("mm") ** k12
    afb_mm = (AFB_THRESHOLD.to("J/cm2") / f) ** (1.0 / k12)
    return Length(afb_mm, "mm")


def intermediate_e_at_distance(
    c: Cubicle, v_ref: ReferenceVoltage, e: EnergyDensity, distance: Length
) -> EnergyDensity:
    """Rescale an intermediate energy from the working distance to another distance.

    Uses the same relation as the boundary: E' = E · (D' / D)^k12.
    """
    k12 = ENERGY_TABLES[v_ref][c.ec].k12
    return e * (distance.to("mm") / c.d.to("mm")) ** k12
