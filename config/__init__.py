# config/__init__.py
"""
Aerodynamic Model Configuration Package
=======================================

Configuration for the aerodynamic coefficient models.

This package provides:
- Lift correction constants (stability derivatives, reference geometry)
- Lift lookup tables (basic lift, ice accretion)
- Master configuration class combining all aspects

Usage:
------
    from config import AeroModelConfig, LiftConstants

    config = AeroModelConfig(
        aircraft_name="Twin_Turboprop",
        lift_constants=LiftConstants(bias=0.01),
    )
"""

# Master configuration
from .analysis_config import AeroModelConfig

# Aerodynamic parameters
from .aerodynamic_parameters import (
    LiftConstants,
    LiftTables,
    DEFAULT_LIFT_TABLES,
    create_default_lift_constants,
    get_lift_tables,
)

__all__ = [
    # Master configuration
    'AeroModelConfig',

    # Aerodynamic parameters
    'LiftConstants',
    'LiftTables',
    'DEFAULT_LIFT_TABLES',
    'create_default_lift_constants',
    'get_lift_tables',
]

__version__ = '1.0.0'
