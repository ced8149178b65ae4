# reporting/excel.py

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from calculators.time_history import TimeHistoryResults


def _summary_row(config: Any, results: TimeHistoryResults) -> Dict[str, Any]:

    row: Dict[str, Any] = {"aircraft": getattr(config, "aircraft_name", "")}

    k = getattr(config, "lift_constants", None)
    if k is not None:
        row.update({
            "lift.bias": k.bias,
            "lift.span_ref": k.span_ref,
            "lift.cl_alpha_dot": k.cl_alpha_dot,
            "lift.cl_q": k.cl_q,
        })

    row.update(results.get_summary())
    return row


def export_time_history_xlsx(
    output_path: Path,
    config: Any,
    results: TimeHistoryResults,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    summary = pd.DataFrame([_summary_row(config, results)])

    # Column ordering
    history = results.frame.copy()
    preferred = ["time", "c_lift", "cl_star", "cm_elev"]
    cols = [c for c in preferred if c in history.columns] \
        + [c for c in history.columns if c not in preferred]
    history = history[cols]

    # Rounding
    round_map = {"time": 3}
    for col in history.columns:
        if col != "time":
            round_map[col] = 5

    for col, nd in round_map.items():
        if col in history.columns:
            history[col] = history[col].round(nd)

    # Units
    unit_map = {
        "time": "s",
        "lift.span_ref": "ft",
        "lift.cl_alpha_dot": "1/rad",
        "lift.cl_q": "1/rad",
        "t_start": "s",
        "t_end": "s",
    }
    for col in history.columns:
        if col != "time":
            unit_map.setdefault(col, "-")

    summary = _insert_units_row(summary, unit_map)
    history = _insert_units_row(history, unit_map)

    with pd.ExcelWriter(output_path) as writer:
        summary.to_excel(writer, index=False, sheet_name="Summary")
        history.to_excel(writer, index=False, sheet_name="TimeHistory")
    return output_path


def _insert_units_row(df: pd.DataFrame, unit_map: dict) -> pd.DataFrame:
    units = {c: unit_map.get(c, "") for c in df.columns}
    return pd.concat([pd.DataFrame([units]), df], ignore_index=True)
