"""
Flight history loading and schedule evaluation over a recorded history.
"""

import numpy as np
import pandas as pd
import pytest

from common.flight_history import FlightHistory
from common.flight_state import CM_ELEV
from calculators.lift_coefficient import LiftCoefficientModel
from calculators.schedule import CoefficientSchedule
from calculators.time_history import TimeHistoryCalculator

SAMPLE_CSV = """# recorded approach
Time, Alpha, q, flap, flap_avg, tcx, tcd, c_hat, gear_height, k_ice, cm_elev
0.0, 2.0, 0.00, 0, 0, 0.1, 0.0, 0.014, 100.0, 0.0, -0.01
0.5, 4.0, 0.01, 50, 50, 0.1, 0.1, 0.014, 50.0, 0.0, -0.02
1.0, 8.0, 0.02, 100, 100, 0.2, 0.0, 0.015, 10.0, 0.5, -0.03
1.5, 25.0, 0.00, 100, 100, 0.2, 0.0, 0.015, 0.0, 1.0, -0.04
"""


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "history.csv"
    path.write_text(SAMPLE_CSV)
    return path


@pytest.fixture
def calculator():
    lift = LiftCoefficientModel()
    schedule = CoefficientSchedule([lift], external_inputs=[CM_ELEV])
    return TimeHistoryCalculator(schedule, envelope=lift.envelope())


def test_csv_aliases_and_defaults(csv_path):
    history = FlightHistory.from_csv(csv_path)

    assert len(history) == 4
    assert history.external_inputs == (CM_ELEV,)
    np.testing.assert_allclose(history.time, [0.0, 0.5, 1.0, 1.5])

    t, state, published = list(history.iter_steps())[2]
    assert t == 1.0
    assert state.alpha_deg == 8.0
    assert state.h_gear == 10.0
    assert state.ice_factor == 0.5
    assert state.alpha_dot_rps == 0.0
    assert published == {CM_ELEV: -0.03}


def test_csv_without_time_column_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("alpha,q\n1,2\n")
    with pytest.raises(ValueError, match="time"):
        FlightHistory.from_csv(path)


def test_non_finite_rows_dropped_with_warning(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text("time,alpha,cm_elev\n0.0,1.0,-0.01\n0.1,,-0.01\n0.2,2.0,-0.02\n")
    with pytest.warns(UserWarning, match="Dropped 1 rows"):
        history = FlightHistory.from_csv(path)
    assert len(history) == 2


def test_ice_factor_out_of_range_rejected_at_load(tmp_path):
    path = tmp_path / "iced.csv"
    path.write_text("time,alpha,ice_factor,cm_elev\n0.0,1.0,0.2,-0.01\n0.1,2.0,1.5,-0.01\n")
    with pytest.raises(ValueError, match="ice factor"):
        FlightHistory.from_csv(path)


def test_header_only_csv_rejected(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("time,alpha,cm_elev\n")
    with pytest.raises(ValueError, match="no valid data rows"):
        FlightHistory.from_csv(path)


def test_in_memory_history_fills_missing_fields():
    history = FlightHistory(pd.DataFrame({'time': [0.0, 1.0], 'alpha_deg': [1.0, 2.0]}))
    assert history.external_inputs == ()
    _, state, published = next(history.iter_steps())
    assert state.tcx == 0.0
    assert published == {}


def test_calculate_collects_every_step(csv_path, calculator):
    results = calculator.calculate(FlightHistory.from_csv(csv_path))
    frame = results.frame

    assert results.n_steps == 4
    for col in ('time', 'c_lift', 'cl_star', 'cm_elev', 'lift.basic', 'lift.icing', 'lift.bias'):
        assert col in frame.columns

    partial_cols = [f"lift.{term}" for term in LiftCoefficientModel.TERMS] + ['lift.bias']
    np.testing.assert_allclose(frame[partial_cols].sum(axis=1), frame['c_lift'], atol=1e-12)
    np.testing.assert_allclose(frame['cl_star'], frame['lift.basic'] + frame['lift.dynamic'], atol=1e-12)


def test_out_of_envelope_steps_counted(csv_path, calculator):
    results = calculator.calculate(FlightHistory.from_csv(csv_path))
    # alpha 25 deg lies beyond both tables
    assert results.n_out_of_envelope == 1


def test_statistics_and_summary(csv_path, calculator):
    results = calculator.calculate(FlightHistory.from_csv(csv_path))
    stats = results.statistics['c_lift']

    assert stats['min'] == pytest.approx(results.frame['c_lift'].min())
    assert stats['max'] == pytest.approx(results.frame['c_lift'].max())

    summary = results.get_summary()
    assert summary['n_steps'] == 4
    assert summary['t_end'] == 1.5
    assert summary['c_lift.mean'] == pytest.approx(results.frame['c_lift'].mean())
