# config/aerodynamic_parameters/__init__.py
"""
Aerodynamic Parameters Configuration Package
=============================================

Provides the configuration data for the coefficient models:
- Lift correction constants (stability derivatives, reference geometry)
- Lift lookup tables (basic lift, ice accretion loss)

Constants are tunable per airframe; tables are built once at import.
"""

# Lift constants
from .lift_coefficient import (
    LiftConstants,
    create_default_lift_constants,
)

# Lift tables
from .lift_tables import (
    LiftTables,
    DEFAULT_LIFT_TABLES,
    get_lift_tables,
)

__all__ = [
    # Lift constants
    'LiftConstants',
    'create_default_lift_constants',

    # Lift tables
    'LiftTables',
    'DEFAULT_LIFT_TABLES',
    'get_lift_tables',
]
