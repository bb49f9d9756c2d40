"""Equipment Profile (Cubicle)

Physical parameters of one piece of equipment that do not change with
fault current or arc duration, together with the correction factors
derived from them once at construction:

    VarCf  arcing current variation correction factor (Equation 2)
    CF     enclosure size correction factor (Equations 11-15, Table 6, Table 7)

Enclosure size correction factor:
    1. Classify the enclosure as "typical" or "shallow" (LV only).
    2. Convert height and width to equivalent dimensions (Table 6,
       Equations 11 and 12), in inches.
    3. EES = (height_1 + width_1) / 2                          (Equation 13)
    4. Typical: CF = b1·EES² + b2·EES + b3                      (Equation 14)
       Shallow: CF = 1 / (b1·EES² + b2·EES + b3)                (Equation 15)

Standards:
    IEEE 1584-2018: Guide for Performing Arc-Flash Hazard Calculations
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np

from arcflash.config import (
    ENCLOSURE_CLAMP_MM,
    ENCLOSURE_DIRECT_MAX_MM,
    ENCLOSURE_RESCALE_CONSTANTS,
    ENCLOSURE_SMALL_MM,
    IEEE_1584_2018_RANGE,
    MM_TO_IN,
    SHALLOW_MAX_DEPTH_MM,
    SHALLOW_MAX_HEIGHT_WIDTH_MM,
    TYPICAL_EES_MIN_IN,
    ModelRange,
)
from arcflash.enums import ElectrodeConfiguration, EnclosureType
from arcflash.exceptions import InvariantViolation, RangeError
from arcflash.tables import TABLE_2, TABLE_7, get_equipment_class
from arcflash.units import Length, Voltage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cubicle:
    """Validated, immutable description of one piece of equipment.

    Attributes:
        v_oc: Nominal open-circuit voltage (line-to-line)
        ec: Electrode configuration
        g: Busbar gap
        d: Working distance
        height: Enclosure height
        width: Enclosure width
        depth: Enclosure depth
        model_range: Validated model range used for the bound checks

    Derived attributes:
        enclosure_type: Typical or shallow enclosure
        var_cf: Arcing current variation correction factor
        cf: Enclosure size correction factor
        hv: True for 0.6 kV < V_oc <= 15 kV, False for V_oc <= 0.6 kV
        equivalent_height, equivalent_width, ees: Table 6 equivalent
            dimensions and equivalent enclosure size (None for open air)

    Raises:
        RangeError: If an input, or the derived CF, is outside the model range
    """
    v_oc: Voltage
    ec: ElectrodeConfiguration
    g: Length
    d: Length
    height: Length
    width: Length
    depth: Length
    model_range: ModelRange = field(default=IEEE_1584_2018_RANGE, repr=False, compare=False)

    enclosure_type: EnclosureType = field(init=False)
    var_cf: float = field(init=False)
    cf: float = field(init=False)
    hv: bool = field(init=False)
    equivalent_height: Optional[Length] = field(init=False, default=None, repr=False)
    equivalent_width: Optional[Length] = field(init=False, default=None, repr=False)
    ees: Optional[Length] = field(init=False, default=None, repr=False)

    def __post_init__(self):
        self._check_model_bounds()

        enclosure_type = self._classify_enclosure()
        var_cf = self._calc_var_cf()
        cf, equivalent_height, equivalent_width, ees = self._calc_cf(enclosure_type)

        mr = self.model_range
        if not (mr.cf_min <= cf <= mr.cf_max):
            raise RangeError(
                "enclosure size correction factor CF",
                f"{cf:.4f}",
                f"between {mr.cf_min:g} and {mr.cf_max:g}",
            )

        if mr.v_lv_max < self.v_oc <= mr.v_max:
            hv = True
        elif self.v_oc <= mr.v_lv_max:
            hv = False
        else:
            raise InvariantViolation(f"V_oc = {self.v_oc.format('kV')} is neither LV nor HV")

        object.__setattr__(self, "enclosure_type", enclosure_type)
        object.__setattr__(self, "var_cf", var_cf)
        object.__setattr__(self, "cf", cf)
        object.__setattr__(self, "hv", hv)
        object.__setattr__(self, "equivalent_height", equivalent_height)
        object.__setattr__(self, "equivalent_width", equivalent_width)
        object.__setattr__(self, "ees", ees)

        logger.debug(
            f"Cubicle {self.ec.value} at {self.v_oc.format('kV')}: "
            f"{enclosure_type.value} enclosure, CF={cf:.4f}, VarCf={var_cf:.4f}, "
            f"{'HV' if hv else 'LV'} model"
        )

    @classmethod
    def from_equipment_class(
        cls,
        v_oc: Voltage,
        ec: ElectrodeConfiguration,
        equipment_class: str,
        **overrides: Length,
    ) -> "Cubicle":
        """Create a cubicle from the typical dimensions of an equipment class.

        Args:
            v_oc: Nominal voltage
            ec: Electrode configuration
            equipment_class: Name from Tables 8/10, e.g. "5kV Switchgear"
            **overrides: Any of g, d, height, width, depth to replace the typical value

        Returns:
            Cubicle
        """
        typical = get_equipment_class(equipment_class)
        dims = {
            "g": typical.gap,
            "d": typical.working_distance,
            "height": typical.height,
            "width": typical.width,
            "depth": typical.depth,
        }
        unknown = set(overrides) - set(dims)
        if unknown:
            raise TypeError(f"Unknown dimension override(s): {sorted(unknown)}")
        dims.update(overrides)
        return cls(v_oc, ec, dims["g"], dims["d"], dims["height"], dims["width"], dims["depth"])

    # ref IEEE 1584-2018 s4.2 "Range of model"
    def _check_model_bounds(self) -> None:
        mr = self.model_range

        if not (mr.v_min <= self.v_oc <= mr.v_max):
            raise RangeError(
                "nominal voltage V_oc",
                self.v_oc.format("kV"),
                f"between {mr.v_min.format('kV')} and {mr.v_max.format('kV')}",
            )

        if self.v_oc <= mr.v_lv_max:
            gap_min, gap_max = mr.gap_lv_min, mr.gap_lv_max
        else:
            gap_min, gap_max = mr.gap_hv_min, mr.gap_hv_max
        if self.g < gap_min:
            raise RangeError("busbar gap G", self.g.format("mm", 2), f">= {gap_min.format('mm', 2)}")
        if self.g > gap_max:
            raise RangeError("busbar gap G", self.g.format("mm", 2), f"<= {gap_max.format('mm', 2)}")

        if self.d < mr.working_distance_min:
            raise RangeError(
                "working distance D",
                self.d.format("mm", 1),
                f">= {mr.working_distance_min.format('mm', 0)}",
            )

        min_width = self.g * mr.width_gap_ratio_min
        if self.width < min_width:
            raise RangeError(
                "enclosure width",
                self.width.format("mm", 1),
                f">= {mr.width_gap_ratio_min:g} x busbar gap G = {min_width.format('mm', 1)}",
            )

    def _classify_enclosure(self) -> EnclosureType:
        if (
            self.v_oc < self.model_range.v_lv_max
            and self.height.to("mm") < SHALLOW_MAX_HEIGHT_WIDTH_MM
            and self.width.to("mm") < SHALLOW_MAX_HEIGHT_WIDTH_MM
            and self.depth.to("mm") <= SHALLOW_MAX_DEPTH_MM
        ):
            return EnclosureType.SHALLOW
        return EnclosureType.TYPICAL

    def _calc_var_cf(self) -> float:
        """Arcing current variation correction factor (Equation 2), V_oc in kV."""
        k = TABLE_2[self.ec]
        return float(np.polyval(k.polynomial, self.v_oc.to("kV")))

    def _rescaled_dimension(self, dim_mm: float) -> Length:
        """Equations 11 and 12: equivalent dimension of a large enclosure."""
        a, b = ENCLOSURE_RESCALE_CONSTANTS[self.ec]
        y = (self.v_oc.to("kV") + a) / b
        return Length((ENCLOSURE_DIRECT_MAX_MM + (dim_mm - ENCLOSURE_DIRECT_MAX_MM) * y) / 25.4, "in")

    def _equivalent_width(self, enclosure_type: EnclosureType) -> Length:
        """Table 6, width column."""
        w = self.width.to("mm")
        if w < ENCLOSURE_SMALL_MM:
            if enclosure_type == EnclosureType.TYPICAL:
                return Length(20.0, "in")
            return Length(MM_TO_IN * w, "in")
        elif w <= ENCLOSURE_DIRECT_MAX_MM:
            return Length(MM_TO_IN * w, "in")
        elif w <= ENCLOSURE_CLAMP_MM:
            return self._rescaled_dimension(w)
        else:
            return self._rescaled_dimension(ENCLOSURE_CLAMP_MM)

    def _equivalent_height(self, enclosure_type: EnclosureType) -> Length:
        """Table 6, height column.

        Unlike the width, a VCB height above 660.4 mm is converted directly
        and capped at 49 in instead of being rescaled.
        """
        h = self.height.to("mm")
        if h < ENCLOSURE_SMALL_MM:
            if enclosure_type == EnclosureType.TYPICAL:
                return Length(20.0, "in")
            return Length(MM_TO_IN * h, "in")
        elif h <= ENCLOSURE_DIRECT_MAX_MM:
            return Length(MM_TO_IN * h, "in")
        elif h <= ENCLOSURE_CLAMP_MM:
            if self.ec == ElectrodeConfiguration.VCB:
                return Length(MM_TO_IN * h, "in")
            return self._rescaled_dimension(h)
        else:
            if self.ec == ElectrodeConfiguration.VCB:
                return Length(49.0, "in")
            return self._rescaled_dimension(ENCLOSURE_CLAMP_MM)

    def _calc_cf(
        self, enclosure_type: EnclosureType
    ) -> Tuple[float, Optional[Length], Optional[Length], Optional[Length]]:
        """Enclosure size correction factor.

        Returns:
            Tuple of (cf, equivalent_height, equivalent_width, ees)
        """
        if self.ec.open_air:
            # No enclosure, no box size correction
            return 1.0, None, None, None

        width_1 = self._equivalent_width(enclosure_type)
        height_1 = self._equivalent_height(enclosure_type)

        # Equation 13
        ees = (height_1 + width_1) / 2.0
        ees_in = ees.to("in")
        if enclosure_type == EnclosureType.TYPICAL and ees_in < TYPICAL_EES_MIN_IN:
            raise InvariantViolation(f"EES = {ees_in:.3f} in is below the typical enclosure minimum of 20 in")

        # Equations 14 / 15
        b = TABLE_7[(enclosure_type, self.ec)]
        x = float(np.polyval(b.polynomial, ees_in))
        cf = x if enclosure_type == EnclosureType.TYPICAL else 1.0 / x

        return cf, height_1, width_1, ees

    def summary(self) -> Dict[str, Any]:
        """Inputs and derived factors in engineering units."""
        return {
            "v_oc_kv": self.v_oc.to("kV"),
            "electrode_configuration": self.ec.value,
            "gap_mm": self.g.to("mm"),
            "working_distance_mm": self.d.to("mm"),
            "height_mm": self.height.to("mm"),
            "width_mm": self.width.to("mm"),
            "depth_mm": self.depth.to("mm"),
            "enclosure_type": self.enclosure_type.value,
            "equivalent_height_in": self.equivalent_height.to("in") if self.equivalent_height else None,
            "equivalent_width_in": self.equivalent_width.to("in") if self.equivalent_width else None,
            "ees_in": self.ees.to("in") if self.ees else None,
            "cf": self.cf,
            "var_cf": self.var_cf,
            "model": "HV" if self.hv else "LV",
        }
