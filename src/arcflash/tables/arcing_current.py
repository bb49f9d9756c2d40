"""Arcing Current Coefficients

IEEE 1584-2018 Table 1 (Equation 1, intermediate arcing current) and
Table 2 (arcing current variation correction factor VarCf).

Equation 1:
    I_arc_Voc = 10^(k1 + k2·lg(I_bf) + k3·lg(G))
                × (k4·I_bf⁶ + k5·I_bf⁵ + k6·I_bf⁴ + k7·I_bf³ + k8·I_bf² + k9·I_bf + k10)

Equation 2 (variation correction factor):
    VarCf = k1·V⁶ + k2·V⁵ + k3·V⁴ + k4·V³ + k5·V² + k6·V + k7

with I_bf in kA, G in mm and V in kV.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from arcflash.enums import ElectrodeConfiguration as EC
from arcflash.enums import ReferenceVoltage as RV


@dataclass(frozen=True)
class Table1Row:
    """Equation 1 coefficients for one (electrode configuration, reference voltage)."""
    k1: float
    k2: float
    k3: float
    k4: float
    k5: float
    k6: float
    k7: float
    k8: float
    k9: float
    k10: float

    @property
    def polynomial(self) -> Tuple[float, ...]:
        """k4..k10, highest power of I_bf first."""
        return (self.k4, self.k5, self.k6, self.k7, self.k8, self.k9, self.k10)


@dataclass(frozen=True)
class Table2Row:
    """Equation 2 coefficients (VarCf) for one electrode configuration."""
    k1: float
    k2: float
    k3: float
    k4: float
    k5: float
    k6: float
    k7: float

    @property
    def polynomial(self) -> Tuple[float, ...]:
        """k1..k7, highest power of V_oc first."""
        return (self.k1, self.k2, self.k3, self.k4, self.k5, self.k6, self.k7)


TABLE_1 = MappingProxyType({
    (EC.VCB, RV.V600): Table1Row(
        -0.04287, 1.035, -0.083, 0.0, 0.0, -4.783e-09, 1.962e-06, -0.000229, 0.003141, 1.092,
    ),
    (EC.VCB, RV.V2700): Table1Row(
        0.0065, 1.001, -0.024, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
    ),
    (EC.VCB, RV.V14300): Table1Row(
        0.005795, 1.015, -0.011, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
    ),
    (EC.VCBB, RV.V600): Table1Row(
        -0.017432, 0.98, -0.05, 0.0, 0.0, -5.767e-09, 2.524e-06, -0.00034, 0.01187, 1.013,
    ),
    (EC.VCBB, RV.V2700): Table1Row(
        0.002823, 0.995, -0.0125, 0.0, -9.204e-11, 2.901e-08, -3.262e-06, 0.0001569, -0.004003, 0.9825,
    ),
    (EC.VCBB, RV.V14300): Table1Row(
        0.014827, 1.01, -0.01, 0.0, -9.204e-11, 2.901e-08, -3.262e-06, 0.0001569, -0.004003, 0.9825,
    ),
    (EC.HCB, RV.V600): Table1Row(
        0.054922, 0.988, -0.11, 0.0, 0.0, -5.382e-09, 2.316e-06, -0.000302, 0.0091, 0.9725,
    ),
    (EC.HCB, RV.V2700): Table1Row(
        0.001011, 1.003, -0.0249, 0.0, 0.0, 4.859e-10, -1.814e-07, -9.128e-06, -0.0007, 0.9881,
    ),
    (EC.HCB, RV.V14300): Table1Row(
        0.008693, 0.999, -0.02, 0.0, -5.043e-11, 2.233e-08, -3.046e-06, 0.000116, -0.001145, 0.9839,
    ),
    (EC.VOA, RV.V600): Table1Row(
        0.043785, 1.04, -0.18, 0.0, 0.0, -4.783e-09, 1.962e-06, -0.000229, 0.003141, 1.092,
    ),
    (EC.VOA, RV.V2700): Table1Row(
        -0.02395, 1.006, -0.0188, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
    ),
    (EC.VOA, RV.V14300): Table1Row(
        0.005371, 1.0102, -0.029, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
    ),
    (EC.HOA, RV.V600): Table1Row(
        0.111147, 1.008, -0.24, 0.0, 0.0, -3.895e-09, 1.641e-06, -0.000197, 0.002615, 1.1,
    ),
    (EC.HOA, RV.V2700): Table1Row(
        0.000435, 1.006, -0.038, 0.0, 0.0, 7.859e-10, -1.914e-07, -9.128e-06, -0.0007, 0.9981,
    ),
    (EC.HOA, RV.V14300): Table1Row(
        0.000904, 0.999, -0.02, 0.0, 0.0, 7.859e-10, -1.914e-07, -9.128e-06, -0.0007, 0.9981,
    ),
})


TABLE_2 = MappingProxyType({
    EC.VCB: Table2Row(0.0, -0.0000014269, 0.000083137, -0.0019382, 0.022366, -0.12645, 0.30226),
    EC.VCBB: Table2Row(1.138e-06, -6.0287e-05, 0.0012758, -0.013778, 0.080217, -0.24066, 0.33524),
    EC.HCB: Table2Row(0.0, -3.097e-06, 0.00016405, -0.0033609, 0.033308, -0.16182, 0.34627),
    EC.VOA: Table2Row(9.5606e-07, -5.1543e-05, 0.0011161, -0.01242, 0.075125, -0.23584, 0.33696),
    EC.HOA: Table2Row(0.0, -3.1555e-06, 0.0001682, -0.0034607, 0.034124, -0.1599, 0.34629),
})
