# calculators/__init__.py
"""
Calculators Module
==================

Coefficient models and their evaluation schedule.
"""
