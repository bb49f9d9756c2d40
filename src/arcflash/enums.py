"""
Enumerations shared by the coefficient tables and the calculation modules.
"""

from enum import Enum


class ElectrodeConfiguration(Enum):
    """Electrode configurations tested for IEEE 1584-2018."""
    VCB = "VCB"    # Vertical conductors inside a metal box/enclosure
    VCBB = "VCBB"  # Vertical conductors terminated in an insulating barrier, inside a box
    HCB = "HCB"    # Horizontal conductors inside a box
    VOA = "VOA"    # Vertical conductors in open air
    HOA = "HOA"    # Horizontal conductors in open air

    @property
    def open_air(self) -> bool:
        return self in (ElectrodeConfiguration.VOA, ElectrodeConfiguration.HOA)


class EnclosureType(Enum):
    """Enclosure type used by the enclosure size correction factor (Table 7)."""
    TYPICAL = "typical"
    SHALLOW = "shallow"


class ReferenceVoltage(Enum):
    """Open-circuit voltages at which the model coefficients are tabulated (kV)."""
    V600 = 0.6
    V2700 = 2.7
    V14300 = 14.3

    @property
    def kv(self) -> float:
        return self.value
