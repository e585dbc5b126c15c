"""Workforce backend: roles, users, crews, equipment, attendance, leave and trips."""

__version__ = "1.0.0"
