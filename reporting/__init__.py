# reporting/__init__.py
"""
Reporting Module
================
"""
