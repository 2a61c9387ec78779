"""Project file schema, loading and validation.

This package provides JSON-based project loading and saving. It includes
Pydantic models for schema validation, a loader with comprehensive error
handling, adapters to and from domain objects, and advisory checks.

Public API:
    - ProjectConfiguration: Root project file model
    - CabinetConfig: Cabinet model
    - DrawerConfig: Drawer model
    - HardwareConfig: Hardware selection model
    - load_project: Load a project from a JSON file
    - load_project_from_dict: Load a project from a dictionary
    - save_project: Write a design state to a JSON file
    - project_to_dict: Serialize a design state
    - config_to_state / state_to_config: Convert to and from domain state
    - ConfigError: Exception for project file errors
    - ValidationResult: Container for validation results
    - validate_cabinet / validate_design: Advisory checks

Example:
    >>> from pathlib import Path
    >>> from casework.application.config import load_project, ConfigError
    >>>
    >>> try:
    ...     config = load_project(Path("kitchen.json"))
    ...     print(f"{config.name}: {len(config.cabinets)} cabinets")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from casework.application.config.adapter import (
    cabinet_to_config,
    config_to_cabinet,
    config_to_state,
    state_to_config,
)
from casework.application.config.loader import (
    ConfigError,
    load_project,
    load_project_from_dict,
    load_state,
    project_to_dict,
    save_project,
)
from casework.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    DrawerConfig,
    HardwareConfig,
    PricingConfig,
    ProjectConfiguration,
)
from casework.application.config.validators import (
    CabinetDesignValidator,
    ValidationError,
    ValidationResult,
    ValidationSuggestion,
    ValidationWarning,
    validate_cabinet,
    validate_design,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "CabinetConfig",
    "DrawerConfig",
    "HardwareConfig",
    "PricingConfig",
    "ProjectConfiguration",
    # Loading
    "ConfigError",
    "load_project",
    "load_project_from_dict",
    "load_state",
    "project_to_dict",
    "save_project",
    # Adapters
    "cabinet_to_config",
    "config_to_cabinet",
    "config_to_state",
    "state_to_config",
    # Validation
    "CabinetDesignValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationSuggestion",
    "ValidationWarning",
    "validate_cabinet",
    "validate_design",
]
