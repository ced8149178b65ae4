import pytest

from common.flight_state import FlightState, StepContext, CM_ELEV
from calculators.lift_coefficient import LiftCoefficientModel


@pytest.fixture
def cruise_state():
    """Mid-envelope state with every correction term active."""
    return FlightState(
        alpha_deg=6.0,
        alpha_dot_rps=0.02,
        q_rps=0.03,
        flap_pct=40.0,
        flap_avg_pct=50.0,
        tcx=0.15,
        tcd=-0.2,
        c_hat=0.015,
        h_gear=10.0,
        ice_factor=0.5,
    )


@pytest.fixture
def make_ctx():
    def _make(state, cm_elev=-0.03):
        return StepContext(state, published={CM_ELEV: cm_elev})
    return _make


@pytest.fixture
def lift_model():
    return LiftCoefficientModel()
