"""Incident Energy and Arc Flash Boundary

Estimates the incident energy at the working distance and the arc flash
boundary for a cubicle, an arcing current result and an arc duration.

High voltage:
    E_600, E_2700, E_14300 from Equations 3, 4, 5 with the intermediate
    arcing currents; AFB_600, AFB_2700, AFB_14300 back-calculated from each
    energy; final E and AFB interpolated at V_oc (Equations 19-24).

Low voltage:
    E from Equation 6 with the final arcing current, except that the k3
    term uses the full 0.6 kV intermediate arcing current I_arc_600 (also
    for a reduced calculation, as in Annex D.2); AFB back-calculated from E.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Union

from arcflash.arcing_current import ArcingCurrent, ArcingCurrentHV, ArcingCurrentLV
from arcflash.cubicle import Cubicle
from arcflash.enums import ReferenceVoltage
from arcflash.equations import (
    intermediate_afb_from_e,
    intermediate_e,
    intermediate_e_at_distance,
    interpolate,
)
from arcflash.exceptions import InvariantViolation
from arcflash.units import EnergyDensity, Length, Time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncidentEnergyHV:
    """Incident energy result for a high voltage cubicle.

    Attributes:
        t_arc: Arc duration
        e_600, e_2700, e_14300: Intermediate incident energies
        afb_600, afb_2700, afb_14300: Intermediate arc flash boundaries
        e: Final incident energy at the working distance
        afb: Final arc flash boundary
    """
    t_arc: Time
    e_600: EnergyDensity
    e_2700: EnergyDensity
    e_14300: EnergyDensity
    afb_600: Length
    afb_2700: Length
    afb_14300: Length
    e: EnergyDensity
    afb: Length

    def hv(self) -> "IncidentEnergyHV":
        return self

    def lv(self) -> "IncidentEnergyLV":
        raise InvariantViolation("called lv() on a high voltage incident energy result")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": "HV",
            "t_arc_ms": self.t_arc.to("ms"),
            "e_600_j_cm2": self.e_600.to("J/cm2"),
            "e_2700_j_cm2": self.e_2700.to("J/cm2"),
            "e_14300_j_cm2": self.e_14300.to("J/cm2"),
            "afb_600_mm": self.afb_600.to("mm"),
            "afb_2700_mm": self.afb_2700.to("mm"),
            "afb_14300_mm": self.afb_14300.to("mm"),
            "e_j_cm2": self.e.to("J/cm2"),
            "e_cal_cm2": self.e.to("cal/cm2"),
            "afb_mm": self.afb.to("mm"),
        }

    def __str__(self):
        return (
            f"T_arc = {self.t_arc.format('ms', 1)}, E = {self.e.format('J/cm2')}, "
            f"AFB = {self.afb.format('mm', 0)}"
        )


@dataclass(frozen=True)
class IncidentEnergyLV:
    """Incident energy result for a low voltage cubicle.

    Attributes:
        t_arc: Arc duration
        e: Incident energy at the working distance
        afb: Arc flash boundary
    """
    t_arc: Time
    e: EnergyDensity
    afb: Length

    def hv(self) -> IncidentEnergyHV:
        raise InvariantViolation("called hv() on a low voltage incident energy result")

    def lv(self) -> "IncidentEnergyLV":
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": "LV",
            "t_arc_ms": self.t_arc.to("ms"),
            "e_j_cm2": self.e.to("J/cm2"),
            "e_cal_cm2": self.e.to("cal/cm2"),
            "afb_mm": self.afb.to("mm"),
        }

    def __str__(self):
        return (
            f"T_arc = {self.t_arc.format('ms', 1)}, E = {self.e.format('J/cm2')}, "
            f"AFB = {self.afb.format('mm', 0)}"
        )


IncidentEnergy = Union[IncidentEnergyHV, IncidentEnergyLV]


def estimate_energy_and_boundary(c: Cubicle, i_arc: ArcingCurrent, t_arc: Time) -> IncidentEnergy:
    """Estimate incident energy and arc flash boundary.

    Args:
        c: Cubicle the arcing current was estimated for
        i_arc: Arcing current result (HV or LV, matching the cubicle)
        t_arc: Arc duration

    Returns:
        IncidentEnergyHV or IncidentEnergyLV

    Raises:
        InvariantViolation: If the arcing current variant does not match the cubicle
    """
    if isinstance(i_arc, ArcingCurrentHV):
        if not c.hv:
            raise InvariantViolation("high voltage arcing current passed with a low voltage cubicle")

        e_600 = intermediate_e(c, ReferenceVoltage.V600, i_arc.i_arc_600, i_arc.i_bf, t_arc)
        e_2700 = intermediate_e(c, ReferenceVoltage.V2700, i_arc.i_arc_2700, i_arc.i_bf, t_arc)
        e_14300 = intermediate_e(c, ReferenceVoltage.V14300, i_arc.i_arc_14300, i_arc.i_bf, t_arc)
        afb_600 = intermediate_afb_from_e(c, ReferenceVoltage.V600, e_600)
        afb_2700 = intermediate_afb_from_e(c, ReferenceVoltage.V2700, e_2700)
        afb_14300 = intermediate_afb_from_e(c, ReferenceVoltage.V14300, e_14300)

        v_kv = c.v_oc.to("kV")
        result = IncidentEnergyHV(
            t_arc=t_arc,
            e_600=e_600,
            e_2700=e_2700,
            e_14300=e_14300,
            afb_600=afb_600,
            afb_2700=afb_2700,
            afb_14300=afb_14300,
            e=interpolate(v_kv, e_600, e_2700, e_14300),
            afb=interpolate(v_kv, afb_600, afb_2700, afb_14300),
        )
    elif isinstance(i_arc, ArcingCurrentLV):
        if c.hv:
            raise InvariantViolation("low voltage arcing current passed with a high voltage cubicle")

        # I_arc_600 is the full intermediate value, also in a reduced calculation
        e = intermediate_e(
            c, ReferenceVoltage.V600, i_arc.i_arc, i_arc.i_bf, t_arc, i_arc_600=i_arc.i_arc_600
        )
        result = IncidentEnergyLV(
            t_arc=t_arc,
            e=e,
            afb=intermediate_afb_from_e(c, ReferenceVoltage.V600, e),
        )
    else:
        raise InvariantViolation(f"unexpected arcing current result: {type(i_arc).__name__}")

    logger.debug(f"Incident energy: {result}")
    return result


def energy_at_distance(c: Cubicle, result: IncidentEnergy, distance: Length) -> EnergyDensity:
    """Incident energy at a distance other than the working distance.

    Each intermediate energy is rescaled with its own distance exponent,
    then (HV only) interpolated at V_oc, exactly as the final energy is.

    Args:
        c: Cubicle the result was calculated for
        result: Incident energy result
        distance: Distance from the arc

    Returns:
        Incident energy at ``distance``
    """
    if isinstance(result, IncidentEnergyHV):
        return interpolate(
            c.v_oc.to("kV"),
            intermediate_e_at_distance(c, ReferenceVoltage.V600, result.e_600, distance),
            intermediate_e_at_distance(c, ReferenceVoltage.V2700, result.e_2700, distance),
            intermediate_e_at_distance(c, ReferenceVoltage.V14300, result.e_14300, distance),
        )
    elif isinstance(result, IncidentEnergyLV):
        return intermediate_e_at_distance(c, ReferenceVoltage.V600, result.e, distance)
    raise InvariantViolation(f"unexpected incident energy result: {type(result).__name__}")
