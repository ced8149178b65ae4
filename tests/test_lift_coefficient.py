"""
Lift coefficient composition: each correction term, the aggregate and the
published CL* sub-sum.
"""

import pytest

from common.flight_state import FlightState, StepContext, MissingUpstreamValue, CM_ELEV, C_LIFT, CL_STAR
from config.aerodynamic_parameters import LiftConstants, DEFAULT_LIFT_TABLES
from calculators.lift_coefficient import LiftCoefficientModel


def test_aggregate_is_sum_of_partials(lift_model, cruise_state, make_ctx):
    total = lift_model.compute(make_ctx(cruise_state))

    assert list(lift_model.partials) == list(LiftCoefficientModel.TERMS) + ['bias']
    assert total == pytest.approx(sum(lift_model.partials.values()), abs=1e-12)
    assert lift_model.coefficient == total


def test_terms_match_formulas(lift_model, cruise_state, make_ctx):
    k = LiftConstants()
    s = cruise_state
    lift_model.compute(make_ctx(s, cm_elev=-0.03))
    p = lift_model.partials

    assert p['basic'] == pytest.approx(DEFAULT_LIFT_TABLES.basic.interpolate([6.0, 0.15, 40.0]))
    assert p['dynamic'] == pytest.approx((k.cl_alpha_dot * 0.02 + k.cl_q * 0.03) * 0.015)
    assert p['elevator'] == pytest.approx(0.03 * k.elevator_arm_ratio)
    assert p['asymmetric_thrust'] == pytest.approx(
        (k.cl_at0 + k.cl_at_alpha * 6.0 + k.cl_at_flap * 0.40) * (0.2 / 0.4)
    )
    assert p['ground_effect'] == pytest.approx(k.cl_ground_effect * (1.0 - 20.0 / k.span_ref))
    assert p['flap_failure'] == pytest.approx((k.cl_ff0 + k.cl_ff_alpha * 6.0) * 10.0 * 0.04)
    assert p['icing'] == pytest.approx(-0.12 * 0.5)
    assert p['bias'] == 0.0


def test_asymmetric_thrust_uses_magnitude(lift_model, cruise_state, make_ctx):
    lift_model.compute(make_ctx(cruise_state.replace(tcd=0.2)))
    positive = lift_model.partials['asymmetric_thrust']
    lift_model.compute(make_ctx(cruise_state.replace(tcd=-0.2)))
    assert lift_model.partials['asymmetric_thrust'] == positive


def test_ice_factor_changes_only_icing_term(lift_model, cruise_state, make_ctx):
    clean = lift_model.compute(make_ctx(cruise_state.replace(ice_factor=0.0)))
    assert lift_model.partials['icing'] == 0.0
    clean_partials = lift_model.get_partials()

    iced = lift_model.compute(make_ctx(cruise_state.replace(ice_factor=1.0)))
    icing = lift_model.partials['icing']

    assert icing == pytest.approx(-0.12)
    assert iced - clean == pytest.approx(icing, abs=1e-12)
    for term, value in clean_partials.items():
        if term != 'icing':
            assert lift_model.partials[term] == value


def test_ground_effect_vanishes_at_half_span(lift_model, cruise_state, make_ctx):
    span = LiftConstants().span_ref

    lift_model.compute(make_ctx(cruise_state.replace(h_gear=span / 2.0)))
    assert lift_model.partials['ground_effect'] == 0.0

    for h in (span / 2.0 + 1e-6, span, 1000.0):
        lift_model.compute(make_ctx(cruise_state.replace(h_gear=h)))
        assert lift_model.partials['ground_effect'] == 0.0

    lift_model.compute(make_ctx(cruise_state.replace(h_gear=0.0)))
    assert lift_model.partials['ground_effect'] == pytest.approx(LiftConstants().cl_ground_effect)


def test_flap_failure_zero_when_flaps_follow_command(lift_model, cruise_state, make_ctx):
    lift_model.compute(make_ctx(cruise_state.replace(flap_avg_pct=40.0)))
    assert lift_model.partials['flap_failure'] == 0.0


def test_basic_lift_clamped_beyond_table(lift_model, make_ctx):
    lift_model.compute(make_ctx(FlightState(alpha_deg=35.0, tcx=0.9, flap_pct=120.0)))
    assert lift_model.partials['basic'] == 1.61

    lift_model.compute(make_ctx(FlightState(alpha_deg=-20.0)))
    assert lift_model.partials['basic'] == -0.52


def test_cl_star_published_and_retained(lift_model, cruise_state, make_ctx):
    ctx = make_ctx(cruise_state)
    total = lift_model.compute(ctx)
    p = lift_model.partials

    assert lift_model.get_cl_star() == p['basic'] + p['dynamic']
    assert ctx.read(CL_STAR) == lift_model.get_cl_star()
    assert ctx.read(C_LIFT) == total
    assert ctx.owner_of(C_LIFT) == 'lift'
    assert ctx.owner_of(CL_STAR) == 'lift'


def test_bias_added_to_aggregate(cruise_state, make_ctx):
    plain = LiftCoefficientModel().compute(make_ctx(cruise_state))
    biased = LiftCoefficientModel(constants=LiftConstants(bias=0.05)).compute(make_ctx(cruise_state))
    override = LiftCoefficientModel(bias=-0.02).compute(make_ctx(cruise_state))

    assert biased - plain == pytest.approx(0.05, abs=1e-12)
    assert override - plain == pytest.approx(-0.02, abs=1e-12)


def test_missing_elevator_moment_raises(lift_model, cruise_state):
    with pytest.raises(MissingUpstreamValue):
        lift_model.compute(StepContext(cruise_state))


def test_requires_and_provides():
    model = LiftCoefficientModel()
    assert model.requires == (CM_ELEV,)
    assert model.provides() == (C_LIFT, CL_STAR)


def test_reset_clears_last_values(lift_model, cruise_state, make_ctx):
    lift_model.compute(make_ctx(cruise_state))
    lift_model.reset()
    assert lift_model.coefficient == 0.0
    assert lift_model.get_cl_star() == 0.0
    assert all(v == 0.0 for v in lift_model.partials.values())


def test_envelope_queries(lift_model, cruise_state):
    (basic, basic_query), (icing, icing_query) = lift_model.envelope()
    assert basic_query(cruise_state) == (6.0, 0.15, 40.0)
    assert icing_query(cruise_state) == (6.0,)
    assert basic is DEFAULT_LIFT_TABLES.basic
    assert icing is DEFAULT_LIFT_TABLES.icing
