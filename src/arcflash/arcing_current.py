"""Arcing Current Estimation

Estimates the arcing current for a cubicle and a bolted fault current.

High voltage (0.6 kV < V_oc <= 15 kV):
    1. Intermediate arcing currents at 0.6, 2.7 and 14.3 kV (Equation 1)
    2. Reduced case: each intermediate scaled by (1 - 0.5 · VarCf) (Equation 2)
    3. Final arcing current interpolated at V_oc (Equations 16-18)

Low voltage (0.208 kV <= V_oc <= 0.6 kV):
    1. Intermediate arcing current at 0.6 kV (Equation 1)
    2. Final arcing current at V_oc (Equation 25)
    3. Reduced case: final current scaled by (1 - 0.5 · VarCf) (Equation 2)

"Full" and "reduced" are used instead of "maximum" and "minimum", which
usually refer to the maximum/minimum fault operating scenario.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Union

from arcflash.cubicle import Cubicle
from arcflash.enums import ReferenceVoltage
from arcflash.equations import i_arc_final_lv, i_arc_intermediate, i_arc_min, interpolate
from arcflash.exceptions import InvariantViolation, RangeError
from arcflash.units import Current

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcingCurrentHV:
    """Arcing current result for a high voltage cubicle.

    Attributes:
        i_bf: Bolted fault current
        reduced: True if VarCf was applied
        i_arc_600: Intermediate arcing current at 0.6 kV
        i_arc_2700: Intermediate arcing current at 2.7 kV
        i_arc_14300: Intermediate arcing current at 14.3 kV
        i_arc: Final arcing current, interpolated at V_oc
    """
    i_bf: Current
    reduced: bool
    i_arc_600: Current
    i_arc_2700: Current
    i_arc_14300: Current
    i_arc: Current

    def hv(self) -> "ArcingCurrentHV":
        return self

    def lv(self) -> "ArcingCurrentLV":
        raise InvariantViolation("called lv() on a high voltage arcing current")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": "HV",
            "reduced": self.reduced,
            "i_bf_ka": self.i_bf.to("kA"),
            "i_arc_600_ka": self.i_arc_600.to("kA"),
            "i_arc_2700_ka": self.i_arc_2700.to("kA"),
            "i_arc_14300_ka": self.i_arc_14300.to("kA"),
            "i_arc_ka": self.i_arc.to("kA"),
        }

    def __str__(self):
        return (
            f"I_bf = {self.i_bf.format('kA')}, I_arc = {self.i_arc.format('kA')} "
            f"({'reduced' if self.reduced else 'full'})"
        )


@dataclass(frozen=True)
class ArcingCurrentLV:
    """Arcing current result for a low voltage cubicle.

    Attributes:
        i_bf: Bolted fault current
        reduced: True if VarCf was applied to the final current
        i_arc_600: Intermediate arcing current at 0.6 kV (never reduced)
        i_arc: Final arcing current at V_oc
    """
    i_bf: Current
    reduced: bool
    i_arc_600: Current
    i_arc: Current

    def hv(self) -> ArcingCurrentHV:
        raise InvariantViolation("called hv() on a low voltage arcing current")

    def lv(self) -> "ArcingCurrentLV":
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": "LV",
            "reduced": self.reduced,
            "i_bf_ka": self.i_bf.to("kA"),
            "i_arc_600_ka": self.i_arc_600.to("kA"),
            "i_arc_ka": self.i_arc.to("kA"),
        }

    def __str__(self):
        return (
            f"I_bf = {self.i_bf.format('kA')}, I_arc = {self.i_arc.format('kA')} "
            f"({'reduced' if self.reduced else 'full'})"
        )


ArcingCurrent = Union[ArcingCurrentHV, ArcingCurrentLV]


def check_bolted_fault_current(c: Cubicle, i_bf: Current) -> None:
    """Check I_bf against the model range for the cubicle's voltage class.

    Raises:
        RangeError: If I_bf is outside 0.5-106 kA (LV) or 0.2-65 kA (HV)
    """
    mr = c.model_range
    if c.hv:
        low, high, label = mr.i_bf_hv_min, mr.i_bf_hv_max, "HV"
    else:
        low, high, label = mr.i_bf_lv_min, mr.i_bf_lv_max, "LV"
    if not (low <= i_bf <= high):
        raise RangeError(
            "bolted fault current I_bf",
            i_bf.format("kA"),
            f"within the {label} calculation range {low.format('kA', 1)} to {high.format('kA', 1)}",
        )


def estimate_arc_current(c: Cubicle, i_bf: Current, reduced: bool = False) -> ArcingCurrent:
    """Estimate the arcing current.

    Args:
        c: Cubicle
        i_bf: Bolted fault current
        reduced: If True, apply the arcing current variation correction
            factor (I_arc_min); otherwise return the full arcing current

    Returns:
        ArcingCurrentHV or ArcingCurrentLV, matching the cubicle

    Raises:
        RangeError: If the bolted fault current is outside the model range
    """
    check_bolted_fault_current(c, i_bf)

    if c.hv:
        i_arc_600 = i_arc_intermediate(c, ReferenceVoltage.V600, i_bf)
        i_arc_2700 = i_arc_intermediate(c, ReferenceVoltage.V2700, i_bf)
        i_arc_14300 = i_arc_intermediate(c, ReferenceVoltage.V14300, i_bf)
        if reduced:
            i_arc_600 = i_arc_min(c, i_arc_600)
            i_arc_2700 = i_arc_min(c, i_arc_2700)
            i_arc_14300 = i_arc_min(c, i_arc_14300)

        result = ArcingCurrentHV(
            i_bf=i_bf,
            reduced=reduced,
            i_arc_600=i_arc_600,
            i_arc_2700=i_arc_2700,
            i_arc_14300=i_arc_14300,
            i_arc=interpolate(c.v_oc.to("kV"), i_arc_600, i_arc_2700, i_arc_14300),
        )
    else:
        i_arc_600 = i_arc_intermediate(c, ReferenceVoltage.V600, i_bf)
        i_arc = i_arc_final_lv(c, i_arc_600, i_bf)
        if reduced:
            i_arc = i_arc_min(c, i_arc)

        result = ArcingCurrentLV(
            i_bf=i_bf,
            reduced=reduced,
            i_arc_600=i_arc_600,
            i_arc=i_arc,
        )

    logger.debug(f"Arcing current: {result}")
    return result
