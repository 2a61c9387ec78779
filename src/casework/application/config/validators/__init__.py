"""Validators subpackage - advisory checks for cabinet designs.

- CabinetDesignValidator: Dimensions, drawer layout, door space
"""

from .base import (
    ValidationError,
    ValidationResult,
    ValidationSuggestion,
    ValidationWarning,
)
from .cabinet import CabinetDesignValidator, validate_cabinet, validate_design

__all__ = [
    # Base classes
    "ValidationError",
    "ValidationSuggestion",
    "ValidationWarning",
    "ValidationResult",
    # Validators
    "CabinetDesignValidator",
    "validate_cabinet",
    "validate_design",
]
