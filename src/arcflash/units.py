"""Physical Quantities

Scalar physical quantities used by the IEEE 1584-2018 model. Each quantity
stores its magnitude once, in the SI base unit of its dimension, so that
inputs given in volts or kilovolts, metres or millimetres, seconds or
milliseconds all compare and combine identically.

    Voltage        V
    Current        A
    Length         m
    Time           s
    EnergyDensity  J/m²

Conversion factors are taken from scipy.constants. A unit is stored as a
(multiplier, divisor) pair so that decimal sub-units such as mm or ms are
converted by an exact integer division instead of a rounded factor.

Example:
    >>> gap = Length(104.0, "mm")
    >>> gap.to("m")
    0.104
    >>> Length(0.104, "m") == gap
    True
"""

import functools
from typing import Dict, Optional, Tuple

from scipy import constants


@functools.total_ordering
class Quantity:
    """Immutable scalar quantity of a single physical dimension.

    Subclasses define ``units`` (name -> (multiplier, divisor) relative to the
    base unit) and ``base_unit``.
    """

    units: Dict[str, Tuple[float, float]] = {}
    base_unit: str = ""

    __slots__ = ("_si",)

    def __init__(self, value: float, unit: str):
        multiplier, divisor = self._factor(unit)
        object.__setattr__(self, "_si", float(value) * multiplier / divisor)

    @classmethod
    def _factor(cls, unit: str) -> Tuple[float, float]:
        try:
            return cls.units[unit]
        except KeyError:
            raise ValueError(
                f"Unknown {cls.__name__} unit '{unit}'. Available: {list(cls.units)}"
            ) from None

    @classmethod
    def from_si(cls, value: float) -> "Quantity":
        """Create a quantity directly from its base-unit magnitude."""
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_si", float(value))
        return obj

    @property
    def si(self) -> float:
        """Magnitude in the base unit."""
        return self._si

    def to(self, unit: str) -> float:
        """Magnitude expressed in ``unit``."""
        multiplier, divisor = self._factor(unit)
        return self._si * divisor / multiplier

    def format(self, unit: Optional[str] = None, digits: int = 3) -> str:
        """Render as e.g. ``'12.979 kA'``."""
        unit = unit or self.base_unit
        return f"{self.to(unit):.{digits}f} {unit}"

    def _same_dimension(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __add__(self, other):
        self._same_dimension(other)
        return self.from_si(self._si + other._si)

    def __sub__(self, other):
        self._same_dimension(other)
        return self.from_si(self._si - other._si)

    def __neg__(self):
        return self.from_si(-self._si)

    def __mul__(self, factor):
        if isinstance(factor, Quantity):
            raise TypeError(
                f"Cannot multiply {type(self).__name__} by {type(factor).__name__}"
            )
        return self.from_si(self._si * factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            self._same_dimension(other)
            return self._si / other._si
        return self.from_si(self._si / other)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._si == other._si

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._si < other._si

    def __hash__(self):
        return hash((type(self).__name__, self._si))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._si, self.base_unit))

    def __repr__(self):
        return f"{type(self).__name__}({self._si!r}, {self.base_unit!r})"

    def __str__(self):
        return self.format(self.base_unit)


class Voltage(Quantity):
    """Electric potential (base unit V)."""
    __slots__ = ()
    base_unit = "V"
    units = {
        "V": (1.0, 1.0),
        "mV": (1.0, constants.kilo),
        "kV": (constants.kilo, 1.0),
    }


class Current(Quantity):
    """Electric current (base unit A)."""
    __slots__ = ()
    base_unit = "A"
    units = {
        "A": (1.0, 1.0),
        "mA": (1.0, constants.kilo),
        "kA": (constants.kilo, 1.0),
    }


class Length(Quantity):
    """Length (base unit m)."""
    __slots__ = ()
    base_unit = "m"
    units = {
        "m": (1.0, 1.0),
        "cm": (1.0, constants.hecto),
        "mm": (1.0, constants.kilo),
        "um": (1.0, constants.mega),
        "km": (constants.kilo, 1.0),
        "in": (constants.inch, 1.0),
        "ft": (constants.foot, 1.0),
    }


class Time(Quantity):
    """Time (base unit s)."""
    __slots__ = ()
    base_unit = "s"
    units = {
        "s": (1.0, 1.0),
        "ms": (1.0, constants.kilo),
        "us": (1.0, constants.mega),
    }


class EnergyDensity(Quantity):
    """Radiant exposure / incident energy (base unit J/m²)."""
    __slots__ = ()
    base_unit = "J/m2"
    units = {
        "J/m2": (1.0, 1.0),
        "J/cm2": (constants.hecto ** 2, 1.0),
        "cal/cm2": (constants.calorie * constants.hecto ** 2, 1.0),
    }
