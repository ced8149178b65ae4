# calculators/time_history.py
"""
Time-History Coefficient Calculator
===================================

Evaluates a coefficient schedule over a recorded flight-state history:
1. Build a step context per recorded row (state + external values)
2. Run the schedule in order
3. Collect aggregates, partial terms and published sub-sums per step
4. Count steps outside the sampled table envelope
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

from common.flight_history import FlightHistory
from common.flight_state import FlightState, StepContext
from common.interpolation import InterpolationTable
from calculators.schedule import CoefficientSchedule

# Maps a flight state to the coordinates of an envelope table
EnvelopeQuery = Tuple[InterpolationTable, Callable[[FlightState], Sequence[float]]]


@dataclass
class TimeHistoryResults:
    """Results from a time-history evaluation."""

    # One row per step: time, published values, '<model>.<term>' partials
    frame: pd.DataFrame

    n_steps: int
    n_out_of_envelope: int = 0

    # min / max / mean per aggregate coefficient
    statistics: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def get_summary(self) -> Dict[str, float]:
        """Flat summary for reporting."""
        summary = {
            'n_steps': self.n_steps,
            'n_out_of_envelope': self.n_out_of_envelope,
        }
        if self.n_steps:
            summary['t_start'] = float(self.frame['time'].iloc[0])
            summary['t_end'] = float(self.frame['time'].iloc[-1])
        for key, stats in self.statistics.items():
            for stat, value in stats.items():
                summary[f"{key}.{stat}"] = value
        return summary

    def __repr__(self) -> str:
        return (f"TimeHistoryResults(n_steps={self.n_steps}, "
                f"out_of_envelope={self.n_out_of_envelope})")


class TimeHistoryCalculator:
    """
    Run a coefficient schedule over every step of a flight history.
    """

    def __init__(self, schedule: CoefficientSchedule,
                 envelope: Optional[Sequence[EnvelopeQuery]] = None):
        """
        Initialize the calculator.

        Parameters:
        -----------
        schedule : CoefficientSchedule
            Models in evaluation order
        envelope : sequence of (table, query) pairs, optional
            Tables whose sampled range defines the data envelope; query maps
            a FlightState to that table's coordinates
        """
        self.schedule = schedule
        self.envelope = list(envelope or [])

    def _in_envelope(self, state: FlightState) -> bool:
        return all(all(table.in_range(query(state))) for table, query in self.envelope)

    def calculate(self, history: FlightHistory) -> TimeHistoryResults:
        """
        Evaluate the schedule for each recorded step.

        Parameters:
        -----------
        history : FlightHistory
            Recorded states and external inputs

        Returns:
        --------
        TimeHistoryResults
        """
        rows = []
        n_out = 0

        for k, (t, state, published) in enumerate(history.iter_steps()):
            ctx = StepContext(state, published=published, step=k, time=t)
            self.schedule.run_step(ctx)

            row = {'time': t}
            row.update(ctx.snapshot())
            for model in self.schedule:
                for term, value in model.partials.items():
                    row[f"{model.get_name()}.{term}"] = value

            if not self._in_envelope(state):
                n_out += 1
            rows.append(row)

        frame = pd.DataFrame(rows)
        statistics = {}
        for model in self.schedule:
            key = model.publish_key
            if key in frame.columns:
                values = frame[key].to_numpy(dtype=float)
                statistics[key] = {
                    'min': float(np.min(values)),
                    'max': float(np.max(values)),
                    'mean': float(np.mean(values)),
                }

        return TimeHistoryResults(
            frame=frame,
            n_steps=len(rows),
            n_out_of_envelope=n_out,
            statistics=statistics,
        )
