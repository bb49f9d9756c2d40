"""IEEE 1584-2018 coefficient tables.

Read-only mappings transcribed from the standard:
- Table 1: intermediate arcing current coefficients
- Table 2: arcing current variation correction factor coefficients
- Tables 3, 4, 5: intermediate incident energy coefficients
- Table 7: enclosure size correction factor coefficients
- Tables 8 and 10: typical equipment class dimensions
"""

from arcflash.tables.arcing_current import TABLE_1, TABLE_2, Table1Row, Table2Row
from arcflash.tables.incident_energy import (
    TABLE_3,
    TABLE_4,
    TABLE_5,
    ENERGY_TABLES,
    Table3_4_5Row,
)
from arcflash.tables.enclosure import TABLE_7, Table7Row
from arcflash.tables.equipment_classes import (
    EquipmentClass,
    TYPICAL_EQUIPMENT_CLASSES,
    get_equipment_class,
)

__all__ = [
    "TABLE_1",
    "TABLE_2",
    "TABLE_3",
    "TABLE_4",
    "TABLE_5",
    "TABLE_7",
    "ENERGY_TABLES",
    "Table1Row",
    "Table2Row",
    "Table3_4_5Row",
    "Table7Row",
    "EquipmentClass",
    "TYPICAL_EQUIPMENT_CLASSES",
    "get_equipment_class",
]
