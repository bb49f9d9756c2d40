"""Incident Energy Coefficients

IEEE 1584-2018 Tables 3, 4 and 5: coefficients of Equations 3-6
(intermediate incident energy) and 7-10 (intermediate arc flash boundary)
at V_oc = 600 V, 2700 V and 14,300 V respectively.

Equations 3-6:
    E = 12.552/50 · T · 10^(k1 + k2·lg(G) + k3·I_arc/den
                             + k11·lg(I_bf) + k12·lg(D) + k13·lg(I_arc) + lg(1/CF))

    den = k4·I_bf⁷ + k5·I_bf⁶ + k6·I_bf⁵ + k7·I_bf⁴ + k8·I_bf³ + k9·I_bf² + k10·I_bf

k12 is the distance exponent used by the boundary back-calculation.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from arcflash.enums import ElectrodeConfiguration as EC
from arcflash.enums import ReferenceVoltage as RV


@dataclass(frozen=True)
class Table3_4_5Row:
    """Incident energy coefficients for one electrode configuration at one reference voltage."""
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
    k11: float
    k12: float
    k13: float

    @property
    def denominator_polynomial(self) -> Tuple[float, ...]:
        """k4..k10 and a zero constant term, highest power of I_bf first."""
        return (self.k4, self.k5, self.k6, self.k7, self.k8, self.k9, self.k10, 0.0)


# Table 3 - V_oc = 600 V
TABLE_3 = MappingProxyType({
    EC.VCB: Table3_4_5Row(
        0.753364, 0.566, 1.752636, 0.0, 0.0, -4.783e-09, 0.000001962, -0.000229, 0.003141, 1.092,
        0.0, -1.598, 0.957,
    ),
    EC.VCBB: Table3_4_5Row(
        3.068459, 0.26, -0.098107, 0.0, 0.0, -5.767e-09, 0.000002524, -0.00034, 0.01187, 1.013,
        -0.06, -1.809, 1.19,
    ),
    EC.HCB: Table3_4_5Row(
        4.073745, 0.344, -0.370259, 0.0, 0.0, -5.382e-09, 0.000002316, -0.000302, 0.0091, 0.9725,
        0.0, -2.03, 1.036,
    ),
    EC.VOA: Table3_4_5Row(
        0.679294, 0.746, 1.222636, 0.0, 0.0, -4.783e-09, 0.000001962, -0.000229, 0.003141, 1.092,
        0.0, -1.598, 0.997,
    ),
    EC.HOA: Table3_4_5Row(
        3.470417, 0.465, -0.261863, 0.0, 0.0, -3.895e-09, 0.000001641, -0.000197, 0.002615, 1.1,
        0.0, -1.99, 1.04,
    ),
})

# Table 4 - V_oc = 2700 V
TABLE_4 = MappingProxyType({
    EC.VCB: Table3_4_5Row(
        2.40021, 0.165, 0.354202, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
        0.0, -1.569, 0.9778,
    ),
    EC.VCBB: Table3_4_5Row(
        3.870592, 0.185, -0.736618, 0.0, -9.204e-11, 2.901e-08, -3.262e-06, 0.0001569, -0.004003, 0.9825,
        0.0, -1.742, 1.09,
    ),
    EC.HCB: Table3_4_5Row(
        3.486391, 0.177, -0.193101, 0.0, 0.0, 4.859e-10, -1.814e-07, -9.128e-06, -0.0007, 0.9881,
        0.027, -1.723, 1.055,
    ),
    EC.VOA: Table3_4_5Row(
        3.880724, 0.105, -1.906033, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
        0.0, -1.515, 1.115,
    ),
    EC.HOA: Table3_4_5Row(
        3.616266, 0.149, -0.761561, 0.0, 0.0, 7.859e-10, -1.914e-07, -9.128e-06, -0.0007, 0.9981,
        0.0, -1.639, 1.078,
    ),
})

# Table 5 - V_oc = 14,300 V
TABLE_5 = MappingProxyType({
    EC.VCB: Table3_4_5Row(
        3.825917, 0.11, -0.999749, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
        0.0, -1.568, 0.99,
    ),
    EC.VCBB: Table3_4_5Row(
        3.644309, 0.215, -0.585522, 0.0, -9.204e-11, 2.901e-08, -3.262e-06, 0.0001569, -0.004003, 0.9825,
        0.0, -1.677, 1.06,
    ),
    EC.HCB: Table3_4_5Row(
        3.044516, 0.125, 0.245106, 0.0, -5.043e-11, 2.233e-08, -3.046e-06, 0.000116, -0.001145, 0.9839,
        0.0, -1.655, 1.084,
    ),
    EC.VOA: Table3_4_5Row(
        3.405454, 0.12, -0.93245, -1.557e-12, 4.556e-10, -4.186e-08, 8.346e-07, 5.482e-05, -0.003191, 0.9729,
        0.0, -1.534, 0.979,
    ),
    EC.HOA: Table3_4_5Row(
        2.04049, 0.177, 1.005092, 0.0, 0.0, 7.859e-10, -1.914e-07, -9.128e-06, -0.0007, 0.9981,
        -0.05, -1.633, 1.151,
    ),
})

ENERGY_TABLES = MappingProxyType({
    RV.V600: TABLE_3,
    RV.V2700: TABLE_4,
    RV.V14300: TABLE_5,
})
