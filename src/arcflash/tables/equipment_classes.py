"""Typical Equipment Classes

Combination of IEEE 1584-2018 Table 8 (typical busbar gaps and enclosure
sizes) and Table 10 (typical working distances), for use when the actual
equipment dimensions are not known.

Low voltage enclosures are split into "shallow" (depth <= 8 in) and deep
variants. Only whether the depth exceeds 203.2 mm matters to the model, so
shallow entries use a nominal 100 mm depth and deep entries 250 mm.
"""

from dataclasses import dataclass
from types import MappingProxyType

from arcflash.units import Length


@dataclass(frozen=True)
class EquipmentClass:
    """Typical dimensions for one equipment class (all dimensions in mm).

    Attributes:
        name: Equipment class name
        gap_mm: Typical busbar gap G
        height_mm: Enclosure height
        width_mm: Enclosure width
        depth_mm: Enclosure depth
        working_distance_mm: Typical working distance D
    """
    name: str
    gap_mm: float
    height_mm: float
    width_mm: float
    depth_mm: float
    working_distance_mm: float

    @property
    def gap(self) -> Length:
        return Length(self.gap_mm, "mm")

    @property
    def height(self) -> Length:
        return Length(self.height_mm, "mm")

    @property
    def width(self) -> Length:
        return Length(self.width_mm, "mm")

    @property
    def depth(self) -> Length:
        return Length(self.depth_mm, "mm")

    @property
    def working_distance(self) -> Length:
        return Length(self.working_distance_mm, "mm")


# =============================================================================
# Medium voltage
# =============================================================================

SWITCHGEAR_15KV = EquipmentClass("15kV Switchgear", 152.0, 1143.0, 762.0, 762.0, 914.4)
MCC_15KV = EquipmentClass("15kV MCC", 152.0, 914.4, 914.4, 914.4, 914.4)
SWITCHGEAR_5KV = EquipmentClass("5kV Switchgear", 104.0, 914.4, 914.4, 914.4, 914.4)
SWITCHGEAR_5KV_ALT = EquipmentClass("5kV Switchgear (2)", 104.0, 1143.0, 762.0, 762.0, 914.4)
MCC_5KV = EquipmentClass("5kV MCC", 104.0, 660.4, 660.4, 660.4, 914.4)

# =============================================================================
# Low voltage
# =============================================================================

SWITCHGEAR_LV = EquipmentClass("LV Switchgear", 32.0, 508.0, 508.0, 508.0, 609.6)
MCC_LV_SHALLOW = EquipmentClass("LV MCC (Shallow)", 25.0, 355.6, 304.8, 100.0, 457.2)
PANELBOARD_LV_SHALLOW = EquipmentClass("LV Panelboard (Shallow)", 25.0, 355.6, 304.8, 100.0, 457.2)
MCC_LV = EquipmentClass("LV MCC", 25.0, 355.6, 304.8, 250.0, 457.2)
PANELBOARD_LV = EquipmentClass("LV Panelboard", 25.0, 355.6, 304.8, 250.0, 457.2)
CABLE_JUNCTION_BOX_SHALLOW = EquipmentClass("Cable Junction Box (Shallow)", 13.0, 355.6, 304.8, 100.0, 457.2)
CABLE_JUNCTION_BOX = EquipmentClass("Cable Junction Box", 13.0, 355.6, 304.8, 250.0, 457.2)


TYPICAL_EQUIPMENT_CLASSES = MappingProxyType({
    eq.name: eq
    for eq in (
        SWITCHGEAR_15KV,
        MCC_15KV,
        SWITCHGEAR_5KV,
        SWITCHGEAR_5KV_ALT,
        MCC_5KV,
        SWITCHGEAR_LV,
        MCC_LV_SHALLOW,
        PANELBOARD_LV_SHALLOW,
        MCC_LV,
        PANELBOARD_LV,
        CABLE_JUNCTION_BOX_SHALLOW,
        CABLE_JUNCTION_BOX,
    )
})


def get_equipment_class(name: str) -> EquipmentClass:
    """Look up a typical equipment class by name.

    Args:
        name: Equipment class name, e.g. "LV Switchgear"

    Returns:
        EquipmentClass

    Raises:
        KeyError: If the name is unknown
    """
    if name not in TYPICAL_EQUIPMENT_CLASSES:
        raise KeyError(
            f"Unknown equipment class: '{name}'. "
            f"Available: {list(TYPICAL_EQUIPMENT_CLASSES.keys())}"
        )
    return TYPICAL_EQUIPMENT_CLASSES[name]
