#!/usr/bin/env python3
"""Example: Arc flash study over typical equipment classes.

Builds one scenario per typical equipment class (IEEE 1584-2018 Tables 8
and 10), runs them as a batch study and plots incident energy against
distance for each piece of equipment.

Key outputs:
- Study table (pandas DataFrame), also written to CSV
- Worst-case incident energy and arc flash boundary per equipment
- Incident energy vs distance plot
"""

import logging
import sys
from pathlib import Path
sys.path.insert(0, 'src')

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from arcflash import (
    Current,
    Length,
    Time,
    estimate_arc_current,
    estimate_energy_and_boundary,
    energy_at_distance,
)
from arcflash.config import AFB_THRESHOLD
from arcflash.study import run_study, scenarios_from_records
from arcflash.tables import TYPICAL_EQUIPMENT_CLASSES

# (equipment class, nominal kV, electrode configuration, I_bf kA, T full ms, T reduced ms)
SITE_EQUIPMENT = [
    ("15kV Switchgear", 13.8, "VCB", 20.0, 150.0, 180.0),
    ("5kV Switchgear", 4.16, "VCB", 15.0, 197.0, 223.0),
    ("5kV MCC", 4.16, "HCB", 12.0, 100.0, 120.0),
    ("LV Switchgear", 0.48, "VCB", 45.0, 61.3, 319.0),
    ("LV MCC", 0.48, "VCBB", 30.0, 50.0, 150.0),
    ("LV Panelboard (Shallow)", 0.208, "VCB", 10.0, 20.0, 30.0),
    ("Cable Junction Box", 0.48, "HCB", 25.0, 300.0, 400.0),
]


def build_records():
    records = []
    for name, kv, ec, i_bf, t_full, t_reduced in SITE_EQUIPMENT:
        eq = TYPICAL_EQUIPMENT_CLASSES[name]
        records.append({
            "name": name,
            "voltage_kv": kv,
            "electrode_configuration": ec,
            "gap_mm": eq.gap_mm,
            "working_distance_mm": eq.working_distance_mm,
            "height_mm": eq.height_mm,
            "width_mm": eq.width_mm,
            "depth_mm": eq.depth_mm,
            "bolted_fault_current_ka": i_bf,
            "arc_duration_ms": t_full,
            "reduced_arc_duration_ms": t_reduced,
        })
    return pd.DataFrame(records)


def energy_curve(scenario, distances_mm):
    """Worst-case incident energy (cal/cm²) at each distance."""
    c = scenario.cubicle()
    i_bf = Current(scenario.bolted_fault_current_ka, "kA")
    cases = (
        (False, scenario.arc_duration_ms),
        (True, scenario.reduced_arc_duration_ms or scenario.arc_duration_ms),
    )
    curves = []
    for reduced, t_ms in cases:
        i_arc = estimate_arc_current(c, i_bf, reduced=reduced)
        result = estimate_energy_and_boundary(c, i_arc, Time(t_ms, "ms"))
        curves.append([
            energy_at_distance(c, result, Length(d, "mm")).to("cal/cm2") for d in distances_mm
        ])
    return np.max(np.array(curves), axis=0)


def main():
    print(f"\n{'='*70}")
    print("Arc Flash Study - Typical Equipment Classes")
    print(f"{'='*70}")

    scenarios = scenarios_from_records(build_records())
    df = run_study(scenarios, raise_on_error=False)

    columns = ["model", "enclosure_type", "cf", "i_arc_full_ka", "worst_case", "e_cal_cm2", "afb_mm"]
    with pd.option_context("display.width", 120, "display.precision", 3):
        print(df[columns])

    output_dir = Path(__file__).parent.parent / 'outputs'
    output_dir.mkdir(exist_ok=True)
    df.to_csv(output_dir / 'equipment_class_study.csv')

    # ===================================================================
    # Incident energy vs distance
    # ===================================================================
    distances_mm = np.linspace(305.0, 3000.0, 200)
    threshold = AFB_THRESHOLD.to("cal/cm2")

    fig, ax = plt.subplots(figsize=(12, 7))
    for scenario in scenarios:
        if pd.notna(df.loc[scenario.name, "error"]):
            continue
        ax.semilogy(distances_mm, energy_curve(scenario, distances_mm), linewidth=2, label=scenario.name)

    ax.axhline(y=threshold, color='r', linestyle='--', label='1.2 cal/cm² (AFB)')
    ax.set_xlabel('Distance from arc (mm)', fontsize=12)
    ax.set_ylabel('Incident energy (cal/cm²)', fontsize=12)
    ax.set_title('Worst-Case Incident Energy vs Distance', fontsize=14, fontweight='bold')
    ax.grid(True, which='both', alpha=0.3)
    ax.legend()
    plt.tight_layout()

    output_path = output_dir / 'equipment_class_study.png'
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    print(f"\nSaved study table and plot to: {output_dir}")

    plt.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
