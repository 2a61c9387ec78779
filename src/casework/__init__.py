"""Parametric cabinet design: cut lists, sheet estimates and edit history."""

__version__ = "1.0.0"
