"""
common/flight_history.py
Flight-state time history loading for coefficient evaluation.
"""

import warnings
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from common.flight_state import FlightState, CM_ELEV

# Accepted column names per field (first match wins)
COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    'time': ('time', 't', 'timestamp', 'time_s'),
    'alpha_deg': ('alpha_deg', 'alpha', 'aoa', 'aoa_deg'),
    'alpha_dot_rps': ('alpha_dot_rps', 'alpha_dot', 'aoa_rate'),
    'q_rps': ('q_rps', 'q', 'pitch_rate'),
    'flap_pct': ('flap_pct', 'flap', 'delta_f'),
    'flap_avg_pct': ('flap_avg_pct', 'flap_avg', 'flap_cmd'),
    'tcx': ('tcx', 'thrust_coeff'),
    'tcd': ('tcd', 'thrust_diff'),
    'c_hat': ('c_hat', 'chat'),
    'h_gear': ('h_gear', 'gear_height', 'hgear'),
    'ice_factor': ('ice_factor', 'k_ice', 'kice'),
    CM_ELEV: ('cm_elev', 'cm_elevator'),
}


def pick_col(columns: Sequence[str], candidates: Sequence[str]) -> Optional[str]:
    """Return the first candidate present in columns (case-insensitive)."""
    lookup = {c.lower(): c for c in columns}
    for c in candidates:
        if c.lower() in lookup:
            return lookup[c.lower()]
    return None


class FlightHistory:
    """
    Recorded flight-state time history.

    Parameters:
    -----------
    frame : pd.DataFrame
        One row per step with a 'time' column, FlightState fields and
        externally published values (e.g. 'cm_elev')
    external_inputs : sequence of str
        Columns published into each step context
    """

    def __init__(self, frame: pd.DataFrame, external_inputs: Sequence[str] = (CM_ELEV,)):
        if 'time' not in frame.columns:
            raise ValueError("Flight history must contain a 'time' column")
        self.frame = frame.reset_index(drop=True)
        for name in FlightState.field_names():
            if name not in self.frame.columns:
                self.frame[name] = 0.0
        self.external_inputs = tuple(k for k in external_inputs if k in frame.columns)
        self.source: Optional[Path] = None

    @classmethod
    def from_csv(cls, csv_file_path: Union[str, Path],
                 external_inputs: Sequence[str] = (CM_ELEV,)) -> "FlightHistory":
        """
        Load a flight history from CSV.

        Expected columns: time plus any FlightState fields (aliases accepted).
        Missing state columns default to 0. Lines starting with # are skipped.
        """
        path = Path(csv_file_path)
        raw = pd.read_csv(path, comment='#', skipinitialspace=True)
        raw.columns = [str(col).strip() for col in raw.columns]

        t_col = pick_col(raw.columns, COLUMN_ALIASES['time'])
        if t_col is None:
            raise ValueError(f"{path.name} must contain a time column: time/t/timestamp")

        frame = pd.DataFrame({'time': pd.to_numeric(raw[t_col], errors='coerce')})
        used = ['time']
        for name in FlightState.field_names() + tuple(external_inputs):
            col = pick_col(raw.columns, COLUMN_ALIASES.get(name, (name,)))
            if col is None:
                if name in FlightState.field_names():
                    frame[name] = 0.0
                continue
            frame[name] = pd.to_numeric(raw[col], errors='coerce')
            used.append(name)

        finite = np.isfinite(frame[used].to_numpy(dtype=float)).all(axis=1)
        n_dropped = int((~finite).sum())
        if n_dropped:
            warnings.warn(f"Dropped {n_dropped} rows with missing or non-finite values from {path.name}")
        frame = frame[finite]
        if frame.empty:
            raise ValueError(f"{path.name} contains no valid data rows")

        ice = frame['ice_factor'].to_numpy(dtype=float)
        bad = (ice < 0.0) | (ice > 1.0)
        if bad.any():
            first = int(np.argmax(bad))
            raise ValueError(
                f"{path.name}: ice factor must be within [0, 1], "
                f"got {ice[first]} at time {frame['time'].iloc[first]}"
            )

        history = cls(frame, external_inputs=external_inputs)
        history.source = path
        return history

    def iter_steps(self) -> Iterator[Tuple[float, FlightState, Dict[str, float]]]:
        """Yield (time, state, external published values) per row."""
        state_fields = FlightState.field_names()
        for row in self.frame.itertuples(index=False):
            data = row._asdict()
            state = FlightState.from_mapping({k: data[k] for k in state_fields})
            published = {k: float(data[k]) for k in self.external_inputs}
            yield float(data['time']), state, published

    @property
    def time(self) -> np.ndarray:
        return self.frame['time'].to_numpy(dtype=float)

    def __len__(self) -> int:
        return len(self.frame)

    def __repr__(self) -> str:
        name = self.source.name if self.source else "in-memory"
        return f"FlightHistory({name}, n={len(self)})"
