# config/analysis_config.py
"""
Master Aerodynamic Model Configuration
======================================

Combines all configuration aspects into a single configuration class.
This is the main interface the runner uses to set up the coefficient models.
"""

from dataclasses import dataclass, field
from typing import Tuple

from common.flight_state import CM_ELEV
from .aerodynamic_parameters import (
    LiftConstants,
    LiftTables,
    create_default_lift_constants,
    get_lift_tables,
)


@dataclass
class AeroModelConfig:
    """
    Master configuration for the aerodynamic coefficient models.

    Users create instances of this class to define the airframe data and the
    values provided from outside the coefficient schedule.
    """

    # Aircraft name (for reference)
    aircraft_name: str = "Aircraft"

    lift_constants: LiftConstants = field(
        default_factory=create_default_lift_constants
    )

    lift_tables: LiftTables = field(
        default_factory=get_lift_tables
    )

    # Values published by collaborators outside the schedule
    external_inputs: Tuple[str, ...] = (CM_ELEV,)

    def __post_init__(self):
        """Normalize external inputs."""
        self.external_inputs = tuple(self.external_inputs)

    def get_analysis_description(self) -> str:
        """
        Get human-readable description of the configuration.

        Returns:
        --------
        str
            Multi-line description of the configuration
        """
        k = self.lift_constants
        lines = [
            f"Aerodynamic Model Configuration: {self.aircraft_name}",
            "=" * 70,
            "",
            "Lift Tables:",
            f"  Basic:              {self.lift_tables.basic}",
            f"  Icing:              {self.lift_tables.icing}",
            "",
            "Lift Constants:",
            f"  CL_alpha_dot:       {k.cl_alpha_dot:.4f} 1/rad",
            f"  CL_q:               {k.cl_q:.4f} 1/rad",
            f"  Elevator arm ratio: {k.elevator_arm_ratio:.4f}",
            f"  Reference span:     {k.span_ref:.2f} ft",
            f"  Bias:               {k.bias:+.4f}",
            "",
            f"External Inputs:      {', '.join(self.external_inputs) or 'none'}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        """Compact representation."""
        return (f"AeroModelConfig(name='{self.aircraft_name}', "
                f"bias={self.lift_constants.bias:+.4f}, "
                f"external={list(self.external_inputs)})")
