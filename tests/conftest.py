"""
Pytest configuration and shared fixtures for arcflash tests.
"""

import sys
import os
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from arcflash import Cubicle, ElectrodeConfiguration, Voltage, Current, Length  # noqa: E402


@pytest.fixture
def d1_cubicle():
    """IEEE 1584-2018 Annex D.1 medium voltage cubicle (4.16 kV VCB switchgear)"""
    return Cubicle(
        Voltage(4.16, "kV"),
        ElectrodeConfiguration.VCB,
        Length(104.0, "mm"),
        Length(914.4, "mm"),
        Length(1143.0, "mm"),
        Length(762.0, "mm"),
        Length(508.0, "mm"),
    )


@pytest.fixture
def d2_cubicle():
    """IEEE 1584-2018 Annex D.2 low voltage cubicle (480 V VCB switchgear)"""
    return Cubicle(
        Voltage(0.48, "kV"),
        ElectrodeConfiguration.VCB,
        Length(32.0, "mm"),
        Length(609.6, "mm"),
        Length(610.0, "mm"),
        Length(610.0, "mm"),
        Length(254.0, "mm"),
    )


@pytest.fixture
def d1_fault_current():
    return Current(15.0, "kA")


@pytest.fixture
def d2_fault_current():
    return Current(45.0, "kA")
