# common/__init__.py
"""
Common Module
=============

Interpolation engine, per-step flight state and shared utilities.
"""
