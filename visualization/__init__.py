# visualization/__init__.py
"""
Visualization Module
====================
"""

from .lift_breakdown_plotter import plot_lift_breakdown

__all__ = [
    'plot_lift_breakdown',
]
