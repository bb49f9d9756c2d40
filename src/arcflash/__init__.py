"""arcflash - IEEE 1584-2018 arc flash calculations.

Arcing current, incident energy and arc flash boundary for three-phase AC
equipment from 208 V to 15 kV, following the empirical model of
IEEE 1584-2018.
"""

__version__ = "0.1.0"

from arcflash.units import Voltage, Current, Length, Time, EnergyDensity
from arcflash.enums import ElectrodeConfiguration, EnclosureType, ReferenceVoltage
from arcflash.exceptions import ArcFlashError, RangeError, InvariantViolation
from arcflash.config import ModelRange, IEEE_1584_2018_RANGE
from arcflash.cubicle import Cubicle
from arcflash.equations import interpolate
from arcflash.arcing_current import (
    ArcingCurrent,
    ArcingCurrentHV,
    ArcingCurrentLV,
    estimate_arc_current,
)
from arcflash.incident_energy import (
    IncidentEnergy,
    IncidentEnergyHV,
    IncidentEnergyLV,
    estimate_energy_and_boundary,
    energy_at_distance,
)
from arcflash.multistep import aggregate

__all__ = [
    # Quantities
    "Voltage",
    "Current",
    "Length",
    "Time",
    "EnergyDensity",
    # Enumerations
    "ElectrodeConfiguration",
    "EnclosureType",
    "ReferenceVoltage",
    # Errors
    "ArcFlashError",
    "RangeError",
    "InvariantViolation",
    # Configuration
    "ModelRange",
    "IEEE_1584_2018_RANGE",
    # Calculation
    "Cubicle",
    "interpolate",
    "ArcingCurrent",
    "ArcingCurrentHV",
    "ArcingCurrentLV",
    "estimate_arc_current",
    "IncidentEnergy",
    "IncidentEnergyHV",
    "IncidentEnergyLV",
    "estimate_energy_and_boundary",
    "energy_at_distance",
    "aggregate",
]
