"""Model Range and Constants for IEEE 1584-2018

Defines the validated range of the empirical model (IEEE 1584-2018 s4.2)
and the fixed constants used throughout the calculation. Every validation
in the package reads its limits from a ModelRange; the default preset is
IEEE_1584_2018_RANGE.

Range of model (three-phase AC):
    Voltage:                 208 V - 15,000 V
    Bolted fault current:    500 A - 106 kA   (208 V - 600 V)
                             200 A - 65 kA    (601 V - 15,000 V)
    Busbar gap:              6.35 mm - 76.2 mm  (208 V - 600 V)
                             19.05 mm - 254 mm  (601 V - 15,000 V)
    Working distance:        >= 305 mm
    Enclosure width:         >= 4 x busbar gap
"""

from dataclasses import dataclass
from types import MappingProxyType

from arcflash.enums import ElectrodeConfiguration
from arcflash.units import Current, EnergyDensity, Length, Voltage


@dataclass(frozen=True)
class ModelRange:
    """Validated range of the IEEE 1584 empirical model.

    Attributes:
        v_min: Minimum nominal (open-circuit) voltage
        v_lv_max: Upper voltage of the low-voltage model (inclusive)
        v_max: Maximum nominal voltage
        gap_lv_min / gap_lv_max: Busbar gap range, low voltage
        gap_hv_min / gap_hv_max: Busbar gap range, high voltage
        working_distance_min: Minimum working distance
        i_bf_lv_min / i_bf_lv_max: Bolted fault current range, low voltage
        i_bf_hv_min / i_bf_hv_max: Bolted fault current range, high voltage
        width_gap_ratio_min: Minimum enclosure width as a multiple of gap
        cf_min / cf_max: Allowed enclosure size correction factor
    """
    v_min: Voltage
    v_lv_max: Voltage
    v_max: Voltage
    gap_lv_min: Length
    gap_lv_max: Length
    gap_hv_min: Length
    gap_hv_max: Length
    working_distance_min: Length
    i_bf_lv_min: Current
    i_bf_lv_max: Current
    i_bf_hv_min: Current
    i_bf_hv_max: Current
    width_gap_ratio_min: float = 4.0
    cf_min: float = 0.0
    cf_max: float = 3.0


IEEE_1584_2018_RANGE = ModelRange(
    v_min=Voltage(0.208, "kV"),
    v_lv_max=Voltage(0.6, "kV"),
    v_max=Voltage(15.0, "kV"),
    gap_lv_min=Length(6.35, "mm"),
    gap_lv_max=Length(76.2, "mm"),
    gap_hv_min=Length(19.05, "mm"),
    gap_hv_max=Length(254.0, "mm"),
    working_distance_min=Length(305.0, "mm"),
    i_bf_lv_min=Current(0.5, "kA"),
    i_bf_lv_max=Current(106.0, "kA"),
    i_bf_hv_min=Current(0.2, "kA"),
    i_bf_hv_max=Current(65.0, "kA"),
)


# =============================================================================
# Model constants
# =============================================================================

# IEEE 1584-2018 prints 1 mm = 0.03937 in (exact value 5/127). The printed
# factor is required to reproduce the Annex D worked examples.
MM_TO_IN = 0.03937

# Threshold incident energy defining the arc flash boundary: 1.2 cal/cm²
AFB_THRESHOLD = EnergyDensity(1.2, "cal/cm2")  # 5.0208 J/cm²

# Leading coefficient of Equations 3-6 (J/cm² per ms)
ENERGY_COEFFICIENT = 12.552 / 50.0

# Enclosure dimension thresholds for Table 6 / Equations 11-12 (mm)
ENCLOSURE_SMALL_MM = 508.0
ENCLOSURE_DIRECT_MAX_MM = 660.4
ENCLOSURE_CLAMP_MM = 1244.6

# Shallow enclosure criteria (LV only)
SHALLOW_MAX_HEIGHT_WIDTH_MM = 508.0
SHALLOW_MAX_DEPTH_MM = 203.2

# Minimum equivalent enclosure size for typical enclosures (in), relaxed
# from 20 to allow for the printed 0.03937 conversion factor
TYPICAL_EES_MIN_IN = 19.999

# Constants (A, B) of Equations 11 and 12, per boxed electrode configuration
ENCLOSURE_RESCALE_CONSTANTS = MappingProxyType({
    ElectrodeConfiguration.VCB: (4.0, 20.0),
    ElectrodeConfiguration.VCBB: (10.0, 24.0),
    ElectrodeConfiguration.HCB: (10.0, 22.0),
})

# Reduced arcing current multiplier: I_arc_min = I_arc * (1 - 0.5 * VarCf)
VARIATION_WEIGHT = 0.5
