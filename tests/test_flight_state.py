import pytest

from common.flight_state import (
    FlightState,
    StepContext,
    MissingUpstreamValue,
    OwnershipViolation,
    EXTERNAL_OWNER,
)


@pytest.mark.parametrize("ice", [-0.1, 1.5])
def test_ice_factor_must_be_fraction(ice):
    with pytest.raises(ValueError):
        FlightState(ice_factor=ice)


def test_state_is_frozen():
    state = FlightState(alpha_deg=2.0)
    with pytest.raises(AttributeError):
        state.alpha_deg = 3.0
    assert state.replace(alpha_deg=3.0).alpha_deg == 3.0
    assert state.alpha_deg == 2.0


def test_from_mapping_ignores_unknown_keys():
    state = FlightState.from_mapping({'alpha_deg': 4, 'q_rps': 0.1, 'cm_elev': -0.02, 'time': 1.0})
    assert state.alpha_deg == 4.0
    assert state.q_rps == 0.1
    assert state.flap_pct == 0.0


def test_external_values_owned_by_external():
    ctx = StepContext(FlightState(), published={'cm_elev': -0.02}, step=3)
    assert ctx.read('cm_elev') == -0.02
    assert ctx.owner_of('cm_elev') == EXTERNAL_OWNER


def test_read_unpublished_raises_key_error():
    ctx = StepContext(FlightState(), step=7)
    with pytest.raises(MissingUpstreamValue, match="step 7"):
        ctx.read('cm_elev')
    with pytest.raises(KeyError):
        ctx.read('cm_elev')


def test_single_owner_per_key():
    ctx = StepContext(FlightState())
    ctx.publish('c_lift', 0.5, owner='lift')
    ctx.publish('c_lift', 0.6, owner='lift')
    assert ctx.read('c_lift') == 0.6

    with pytest.raises(OwnershipViolation):
        ctx.publish('c_lift', 0.7, owner='drag')


def test_snapshot_is_a_copy():
    ctx = StepContext(FlightState(), published={'cm_elev': -0.02})
    snap = ctx.snapshot()
    snap['cm_elev'] = 1.0
    assert ctx.read('cm_elev') == -0.02
    assert ctx.has('cm_elev')
    assert not ctx.has('c_lift')
