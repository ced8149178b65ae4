# config/aerodynamic_parameters/lift_tables.py
"""
Lift Coefficient Tables
=======================

Wind-tunnel derived lookup tables for the lift model:
- Basic rigid-airplane lift CL(alpha, Tcx, flap), 10 x 4 x 2
- Lift loss due to ice accretion dCL_ice(alpha), 5 points

Tables are built once at import and never modified.
"""

from dataclasses import dataclass
import numpy as np

from common.interpolation import Axis, InterpolationTable

# Basic lift
BASIC_ALPHA_DEG = (-8.0, -4.0, 0.0, 4.0, 8.0, 10.0, 12.0, 14.0, 16.0, 20.0)
BASIC_TCX = (0.0, 0.1, 0.2, 0.6)
BASIC_FLAP_PCT = (0.0, 100.0)

# Published layout: one block per flap setting, one row per Tcx, alpha along the row
_BASIC_CL_PUBLISHED = (
    # flap 0 %
    -0.52, -0.08, 0.35, 0.70, 1.06, 1.14, 1.20, 1.21, 1.12, 1.04,
    -0.49, -0.04, 0.40, 0.76, 1.13, 1.27, 1.38, 1.39, 1.34, 1.24,
    -0.47, -0.03, 0.42, 0.80, 1.19, 1.35, 1.47, 1.48, 1.44, 1.33,
    -0.46,  0.00, 0.44, 0.86, 1.26, 1.44, 1.58, 1.62, 1.60, 1.50,
    # flap 100 %
     0.07,  0.46, 0.85, 1.24, 1.50, 1.55, 1.53, 1.40, 1.22, 1.05,
     0.14,  0.54, 0.95, 1.34, 1.60, 1.66, 1.67, 1.54, 1.38, 1.24,
     0.17,  0.60, 1.02, 1.42, 1.71, 1.77, 1.80, 1.70, 1.57, 1.38,
     0.32,  0.78, 1.23, 1.62, 1.93, 1.99, 2.02, 1.96, 1.84, 1.61,
)

# Ice accretion
ICE_ALPHA_DEG = (0.0, 4.0, 8.0, 10.0, 12.0)
ICE_DCL = (0.0, -0.03, -0.21, -0.37, -0.39)


@dataclass(frozen=True)
class LiftTables:
    """Lookup tables used by the lift model."""
    basic: InterpolationTable   # CL(alpha [deg], Tcx [-], flap [%])
    icing: InterpolationTable   # dCL_ice(alpha [deg]) at full ice accretion

    def __post_init__(self):
        if self.basic.ndim != 3:
            raise ValueError(f"Basic lift table must be 3-D, got {self.basic.ndim}-D")
        if self.icing.ndim != 1:
            raise ValueError(f"Icing table must be 1-D, got {self.icing.ndim}-D")


def _build_basic_table() -> InterpolationTable:
    published = np.array(_BASIC_CL_PUBLISHED).reshape(
        len(BASIC_FLAP_PCT), len(BASIC_TCX), len(BASIC_ALPHA_DEG)
    )
    return InterpolationTable.from_grid(
        (Axis(BASIC_ALPHA_DEG, 'alpha_deg'), Axis(BASIC_TCX, 'tcx'), Axis(BASIC_FLAP_PCT, 'flap_pct')),
        published.transpose(),
        name='CL_basic'
    )


def _build_icing_table() -> InterpolationTable:
    return InterpolationTable((Axis(ICE_ALPHA_DEG, 'alpha_deg'),), ICE_DCL, name='CL_ice')


DEFAULT_LIFT_TABLES = LiftTables(basic=_build_basic_table(), icing=_build_icing_table())


def get_lift_tables() -> LiftTables:
    """Shared default lift tables."""
    return DEFAULT_LIFT_TABLES
