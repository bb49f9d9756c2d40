"""Arc Flash Study

Batch evaluation of many equipment / fault scenarios. Each scenario is
calculated for the full and the reduced arcing current, each with its own
arc duration, and the case giving the higher incident energy is reported
as the worst case.

Scenarios are validated with pydantic and results are returned as a
pandas DataFrame, one row per scenario.

Usage:
    scenarios = scenarios_from_records([
        {"name": "SWGR-1", "voltage_kv": 4.16, "electrode_configuration": "VCB",
         "gap_mm": 104, "working_distance_mm": 914.4, "height_mm": 1143,
         "width_mm": 762, "depth_mm": 508, "bolted_fault_current_ka": 15,
         "arc_duration_ms": 197, "reduced_arc_duration_ms": 223},
    ])
    df = run_study(scenarios)
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, Field

from arcflash.arcing_current import estimate_arc_current
from arcflash.cubicle import Cubicle
from arcflash.enums import ElectrodeConfiguration
from arcflash.exceptions import RangeError
from arcflash.incident_energy import estimate_energy_and_boundary
from arcflash.units import Current, Length, Time, Voltage

logger = logging.getLogger(__name__)

# Columns of a study DataFrame, in order ("name" becomes the index)
RESULT_COLUMNS = [
    "name",
    "model",
    "enclosure_type",
    "cf",
    "var_cf",
    "i_arc_full_ka",
    "i_arc_reduced_ka",
    "e_full_j_cm2",
    "afb_full_mm",
    "e_reduced_j_cm2",
    "afb_reduced_mm",
    "worst_case",
    "e_j_cm2",
    "e_cal_cm2",
    "afb_mm",
    "error",
]


class ArcFlashScenario(BaseModel):
    """One equipment / fault scenario of a study."""

    name: str
    voltage_kv: float = Field(gt=0, description="Nominal voltage in kV")
    electrode_configuration: ElectrodeConfiguration
    gap_mm: float = Field(gt=0, description="Busbar gap in mm")
    working_distance_mm: float = Field(gt=0, description="Working distance in mm")
    height_mm: float = Field(gt=0, description="Enclosure height in mm")
    width_mm: float = Field(gt=0, description="Enclosure width in mm")
    depth_mm: float = Field(gt=0, description="Enclosure depth in mm")
    bolted_fault_current_ka: float = Field(gt=0, description="Bolted fault current in kA")
    arc_duration_ms: float = Field(gt=0, description="Arc duration at the full arcing current in ms")
    reduced_arc_duration_ms: Optional[float] = Field(
        default=None, gt=0, description="Arc duration at the reduced arcing current in ms"
    )

    def cubicle(self) -> Cubicle:
        return Cubicle(
            Voltage(self.voltage_kv, "kV"),
            self.electrode_configuration,
            Length(self.gap_mm, "mm"),
            Length(self.working_distance_mm, "mm"),
            Length(self.height_mm, "mm"),
            Length(self.width_mm, "mm"),
            Length(self.depth_mm, "mm"),
        )


def scenarios_from_records(
    records: Union[pd.DataFrame, Iterable[Dict[str, Any]]]
) -> List[ArcFlashScenario]:
    """Validate scenario records (dicts or DataFrame rows)."""
    if isinstance(records, pd.DataFrame):
        records = records.to_dict(orient="records")
    scenarios = []
    for record in records:
        record = {k: v for k, v in record.items() if not (isinstance(v, float) and pd.isna(v))}
        scenarios.append(ArcFlashScenario.model_validate(record))
    return scenarios


def run_scenario(scenario: ArcFlashScenario) -> Dict[str, Any]:
    """Calculate one scenario.

    Returns:
        Dict with cubicle factors, full and reduced results and the worst case

    Raises:
        RangeError: If the scenario is outside the model range
    """
    c = scenario.cubicle()
    i_bf = Current(scenario.bolted_fault_current_ka, "kA")
    t_full = Time(scenario.arc_duration_ms, "ms")
    t_reduced = Time(scenario.reduced_arc_duration_ms or scenario.arc_duration_ms, "ms")

    i_arc_full = estimate_arc_current(c, i_bf, reduced=False)
    i_arc_reduced = estimate_arc_current(c, i_bf, reduced=True)
    e_full = estimate_energy_and_boundary(c, i_arc_full, t_full)
    e_reduced = estimate_energy_and_boundary(c, i_arc_reduced, t_reduced)

    worst = "full" if e_full.e >= e_reduced.e else "reduced"
    worst_result = e_full if worst == "full" else e_reduced

    return {
        "name": scenario.name,
        "model": "HV" if c.hv else "LV",
        "enclosure_type": c.enclosure_type.value,
        "cf": c.cf,
        "var_cf": c.var_cf,
        "i_arc_full_ka": i_arc_full.i_arc.to("kA"),
        "i_arc_reduced_ka": i_arc_reduced.i_arc.to("kA"),
        "e_full_j_cm2": e_full.e.to("J/cm2"),
        "afb_full_mm": e_full.afb.to("mm"),
        "e_reduced_j_cm2": e_reduced.e.to("J/cm2"),
        "afb_reduced_mm": e_reduced.afb.to("mm"),
        "worst_case": worst,
        "e_j_cm2": worst_result.e.to("J/cm2"),
        "e_cal_cm2": worst_result.e.to("cal/cm2"),
        "afb_mm": worst_result.afb.to("mm"),
        "error": None,
    }


def run_study(scenarios: Iterable[ArcFlashScenario], raise_on_error: bool = True) -> pd.DataFrame:
    """Calculate all scenarios of a study.

    Args:
        scenarios: Validated scenarios
        raise_on_error: If False, a scenario outside the model range is
            logged and reported with its message in the "error" column
            instead of aborting the study

    Returns:
        DataFrame indexed by scenario name, always with every result
        column (NaN for scenarios that failed)
    """
    rows = []
    for scenario in scenarios:
        try:
            rows.append(run_scenario(scenario))
        except RangeError as e:
            if raise_on_error:
                raise
            logger.warning(f"Scenario '{scenario.name}' skipped: {e}")
            rows.append({"name": scenario.name, "error": str(e)})

    logger.info(f"Arc flash study completed: {len(rows)} scenarios")
    return pd.DataFrame(rows, columns=RESULT_COLUMNS).set_index("name")
