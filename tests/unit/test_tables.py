"""
Unit tests for the IEEE 1584-2018 coefficient tables
"""

import pytest

from arcflash.enums import ElectrodeConfiguration, EnclosureType, ReferenceVoltage
from arcflash.tables import (
    TABLE_1,
    TABLE_2,
    TABLE_3,
    TABLE_4,
    TABLE_5,
    TABLE_7,
    ENERGY_TABLES,
    TYPICAL_EQUIPMENT_CLASSES,
    get_equipment_class,
)

BOXED = (ElectrodeConfiguration.VCB, ElectrodeConfiguration.VCBB, ElectrodeConfiguration.HCB)


class TestCoverage:
    """Every configuration has coefficients where the model needs them"""

    def test_table_1_complete(self):
        assert len(TABLE_1) == 15
        for ec in ElectrodeConfiguration:
            for rv in ReferenceVoltage:
                assert (ec, rv) in TABLE_1

    def test_table_2_complete(self):
        assert set(TABLE_2) == set(ElectrodeConfiguration)

    def test_energy_tables_complete(self):
        assert ENERGY_TABLES[ReferenceVoltage.V600] is TABLE_3
        assert ENERGY_TABLES[ReferenceVoltage.V2700] is TABLE_4
        assert ENERGY_TABLES[ReferenceVoltage.V14300] is TABLE_5
        for table in (TABLE_3, TABLE_4, TABLE_5):
            assert set(table) == set(ElectrodeConfiguration)

    def test_table_7_boxed_only(self):
        assert len(TABLE_7) == 6
        for et in EnclosureType:
            for ec in BOXED:
                assert (et, ec) in TABLE_7
        assert (EnclosureType.TYPICAL, ElectrodeConfiguration.VOA) not in TABLE_7


class TestValues:
    """Spot checks against the printed tables"""

    def test_table_1_vcb_600(self):
        row = TABLE_1[(ElectrodeConfiguration.VCB, ReferenceVoltage.V600)]
        assert row.k1 == -0.04287
        assert row.k2 == 1.035
        assert row.k3 == -0.083
        assert row.polynomial == (0.0, 0.0, -4.783e-09, 1.962e-06, -0.000229, 0.003141, 1.092)

    def test_table_2_vcb(self):
        row = TABLE_2[ElectrodeConfiguration.VCB]
        assert row.polynomial[-1] == 0.30226
        assert len(row.polynomial) == 7

    def test_energy_denominator_has_no_constant_term(self):
        for table in ENERGY_TABLES.values():
            for row in table.values():
                assert len(row.denominator_polynomial) == 8
                assert row.denominator_polynomial[-1] == 0.0

    def test_distance_exponent_negative(self):
        for table in ENERGY_TABLES.values():
            for row in table.values():
                assert row.k12 < 0

    def test_table_7_typical_vcb(self):
        row = TABLE_7[(EnclosureType.TYPICAL, ElectrodeConfiguration.VCB)]
        assert row.polynomial == (-0.000302, 0.03441, 0.4325)


class TestReadOnly:
    """Tables cannot be modified at runtime"""

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            TABLE_2[ElectrodeConfiguration.VCB] = None

    def test_rows_are_frozen(self):
        row = TABLE_7[(EnclosureType.SHALLOW, ElectrodeConfiguration.HCB)]
        with pytest.raises(AttributeError):
            row.b1 = 0.0


class TestEquipmentClasses:
    """Typical equipment classes (Tables 8 and 10)"""

    def test_all_classes_present(self):
        assert len(TYPICAL_EQUIPMENT_CLASSES) == 12
        assert "15kV Switchgear" in TYPICAL_EQUIPMENT_CLASSES
        assert "Cable Junction Box (Shallow)" in TYPICAL_EQUIPMENT_CLASSES

    def test_lookup(self):
        swgr = get_equipment_class("LV Switchgear")
        assert swgr.gap.to("mm") == pytest.approx(32.0)
        assert swgr.working_distance.to("in") == pytest.approx(24.0)
        assert swgr.height.to("mm") == pytest.approx(508.0)

    def test_unknown_class(self):
        with pytest.raises(KeyError, match="Available"):
            get_equipment_class("Switchboard")

    def test_shallow_variants(self):
        for name, eq in TYPICAL_EQUIPMENT_CLASSES.items():
            if name.endswith("(Shallow)"):
                assert eq.depth_mm <= 203.2
            elif not name.startswith(("15kV", "5kV")):
                assert eq.depth_mm > 203.2

    def test_gap_matches_voltage_class(self):
        for eq in TYPICAL_EQUIPMENT_CLASSES.values():
            if eq.name.startswith(("15kV", "5kV")):
                assert 19.05 <= eq.gap_mm <= 254.0
            else:
                assert 6.35 <= eq.gap_mm <= 76.2
