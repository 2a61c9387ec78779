"""Value objects for the cabinet domain.

This module provides immutable data types used throughout the design
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._construction import (
    ConstructionType,
    FrontStyle,
    GrainDirection,
    HandleSide,
    MeasurementFormat,
)
from ._hardware import HardwareSelection, HingeType, PullType, SlideType

__all__ = [
    "ConstructionType",
    "FrontStyle",
    "GrainDirection",
    "HandleSide",
    "HardwareSelection",
    "HingeType",
    "MeasurementFormat",
    "PullType",
    "SlideType",
]
