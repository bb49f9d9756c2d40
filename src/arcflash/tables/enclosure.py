"""Enclosure Size Correction Factor Coefficients

IEEE 1584-2018 Table 7, used by Equations 14 and 15:

    Typical enclosure:  CF = b1·EES² + b2·EES + b3
    Shallow enclosure:  CF = 1 / (b1·EES² + b2·EES + b3)

with EES (equivalent enclosure size) in inches. Open air configurations
(VOA, HOA) have no entry; their CF is 1.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from arcflash.enums import ElectrodeConfiguration as EC
from arcflash.enums import EnclosureType as ET


@dataclass(frozen=True)
class Table7Row:
    b1: float
    b2: float
    b3: float

    @property
    def polynomial(self) -> Tuple[float, float, float]:
        return (self.b1, self.b2, self.b3)


TABLE_7 = MappingProxyType({
    (ET.TYPICAL, EC.VCB): Table7Row(-0.000302, 0.03441, 0.4325),
    (ET.TYPICAL, EC.VCBB): Table7Row(-0.0002976, 0.032, 0.479),
    (ET.TYPICAL, EC.HCB): Table7Row(-0.0001923, 0.01935, 0.6899),
    (ET.SHALLOW, EC.VCB): Table7Row(0.002222, -0.02556, 0.6222),
    (ET.SHALLOW, EC.VCBB): Table7Row(-0.002778, 0.1194, -0.2778),
    (ET.SHALLOW, EC.HCB): Table7Row(-0.0005556, 0.03722, 0.4778),
})
