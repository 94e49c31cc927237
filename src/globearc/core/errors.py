"""
Error types raised by the geometry core.

All of them subclass `ValueError` so API/CLI layers can map "bad input" to a single
validation path (HTTP 400 / non-zero exit) without importing each class.
"""

from __future__ import annotations


class InvalidStepCountError(ValueError):
    """An arc was requested with fewer than one step."""


class InvalidCoordinateError(ValueError):
    """A longitude/latitude input is outside [-180, 180] / [-90, 90] or not finite."""


class AntipodalPointsError(ValueError):
    """Two points are antipodal, so their great-circle midpoint is not unique."""
