# calculators/lift_coefficient.py
"""
Lift Coefficient Model
======================

Total lift coefficient as the sum of:
1. Basic rigid-airplane lift, CL(alpha, Tcx, flap) from the 3-D table
2. Dynamic lift from alpha rate and pitch rate
3. Elevator lift, from the published pitching moment due to elevator
4. Asymmetric thrust lift
5. Ground effect
6. Flap failure (commanded vs. actual flap)
7. Ice accretion lift loss, dCL_ice(alpha) from the 1-D table
plus a constant bias for data matching.

CL* (basic + dynamic) is published for the models that need the lift
without the correction set.
"""

from typing import Callable, Dict, List, Optional, Tuple

from common.flight_state import FlightState, StepContext, CM_ELEV, C_LIFT, CL_STAR
from common.interpolation import InterpolationTable
from config.aerodynamic_parameters import LiftConstants, LiftTables, get_lift_tables
from calculators.base_calculator import CoefficientModel


class LiftCoefficientModel(CoefficientModel):
    """Lift coefficient from tabulated basic lift plus analytic corrections."""

    publish_key = C_LIFT
    requires = (CM_ELEV,)

    TERMS = (
        'basic',
        'dynamic',
        'elevator',
        'asymmetric_thrust',
        'ground_effect',
        'flap_failure',
        'icing',
    )

    def __init__(self, constants: Optional[LiftConstants] = None,
                 tables: Optional[LiftTables] = None,
                 bias: Optional[float] = None):
        """
        Initialize the lift model.

        Parameters:
        -----------
        constants : LiftConstants, optional
            Correction constants. Defaults to LiftConstants().
        tables : LiftTables, optional
            Lookup tables. Defaults to the shared default tables.
        bias : float, optional
            Overrides constants.bias
        """
        self.constants = constants or LiftConstants()
        self.tables = tables or get_lift_tables()
        super().__init__(bias=self.constants.bias if bias is None else bias)
        self.cl_star = 0.0

    def get_name(self) -> str:
        return 'lift'

    def provides(self) -> Tuple[str, ...]:
        return (C_LIFT, CL_STAR)

    def compute_partials(self, ctx: StepContext) -> Dict[str, float]:
        s = ctx.state
        k = self.constants
        alpha = s.alpha_deg

        # Basic rigid-airplane lift, clamped on all axes
        basic = self.tables.basic.interpolate((alpha, s.tcx, s.flap_pct), extrapolate=False)

        dynamic = (k.cl_alpha_dot * s.alpha_dot_rps + k.cl_q * s.q_rps) * s.c_hat

        elevator = -ctx.read(CM_ELEV) * k.elevator_arm_ratio

        asymmetric_thrust = ((k.cl_at0 + k.cl_at_alpha * alpha)
                             + k.cl_at_flap * s.flap_pct / 100.0) * (abs(s.tcd) / k.tcd_ref)

        ground_effect = k.cl_ground_effect * max(0.0, 1.0 - 2.0 * s.h_gear / k.span_ref)

        flap_deviation = (s.flap_avg_pct - s.flap_pct) * k.flap_failure_gain
        flap_failure = (k.cl_ff0 + k.cl_ff_alpha * alpha) * flap_deviation

        icing = self.tables.icing.interpolate((alpha,), extrapolate=False) * s.ice_factor

        return {
            'basic': basic,
            'dynamic': dynamic,
            'elevator': elevator,
            'asymmetric_thrust': asymmetric_thrust,
            'ground_effect': ground_effect,
            'flap_failure': flap_failure,
            'icing': icing,
        }

    def _publish_extra(self, ctx: StepContext) -> None:
        self.cl_star = self.partials['basic'] + self.partials['dynamic']
        ctx.publish(CL_STAR, self.cl_star, owner=self.get_name())

    def envelope(self) -> List[Tuple[InterpolationTable, Callable[[FlightState], Tuple[float, ...]]]]:
        """Lookup tables with the state coordinates this model queries them at."""
        return [
            (self.tables.basic, lambda s: (s.alpha_deg, s.tcx, s.flap_pct)),
            (self.tables.icing, lambda s: (s.alpha_deg,)),
        ]

    def get_cl_star(self) -> float:
        """Basic + dynamic lift from the last compute."""
        return self.cl_star

    def reset(self) -> None:
        super().reset()
        self.cl_star = 0.0
