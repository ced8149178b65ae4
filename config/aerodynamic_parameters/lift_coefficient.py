# config/aerodynamic_parameters/lift_coefficient.py
"""
Lift Coefficient Constants
==========================

Stability derivatives and correction constants used by the lift model.

The defaults describe a light twin turboprop and are placeholders for
vehicle data; supply measured values through LiftConstants(...) for a
specific airframe.
"""

from dataclasses import dataclass


@dataclass
class LiftConstants:
    """
    Constants for the lift coefficient correction terms.

    Dynamic lift:      (cl_alpha_dot * alpha_dot + cl_q * q) * c_hat
    Elevator:          -Cm_elev * elevator_arm_ratio
    Asymmetric thrust: (cl_at0 + cl_at_alpha * alpha + cl_at_flap * flap/100) * |Tcd| / tcd_ref
    Ground effect:     cl_ground_effect * max(0, 1 - 2 * h_gear / span_ref)
    Flap failure:      (cl_ff0 + cl_ff_alpha * alpha) * (flap_avg - flap) * flap_failure_gain
    """
    cl_alpha_dot: float = 1.70          # Lift due to alpha rate [1/rad]
    cl_q: float = 4.80                  # Lift due to pitch rate [1/rad]
    elevator_arm_ratio: float = 0.32    # Mean chord over tail moment arm [-]

    cl_at0: float = 0.05                # Asymmetric thrust lift, base [-]
    cl_at_alpha: float = 0.004          # Asymmetric thrust lift, alpha slope [1/deg]
    cl_at_flap: float = 0.06            # Asymmetric thrust lift, flap slope [-]
    tcd_ref: float = 0.4                # Reference differential thrust coefficient [-]

    cl_ground_effect: float = 0.12      # Ground effect lift at touchdown [-]
    span_ref: float = 50.25             # Reference wing span [ft]

    cl_ff0: float = 0.004               # Flap failure lift, base [1/%]
    cl_ff_alpha: float = 0.0002         # Flap failure lift, alpha slope [1/(deg %)]
    flap_failure_gain: float = 0.04     # Flap deviation scaling [-]

    bias: float = 0.0                   # Constant for data matching [-]

    def __post_init__(self):
        if self.span_ref <= 0:
            raise ValueError("Reference span must be positive")
        if self.tcd_ref <= 0:
            raise ValueError("Reference differential thrust coefficient must be positive")

    def get_name(self) -> str:
        return "Lift constants"


# Factory functions
def create_default_lift_constants(bias: float = 0.0) -> LiftConstants:
    """Create lift constants with default airframe values."""
    return LiftConstants(bias=bias)
