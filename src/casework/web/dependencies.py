"""FastAPI dependency injection for casework services."""

from typing import Annotated

from fastapi import Depends

from casework.application import DesignSession
from casework.application.config import config_to_state, load_project_from_dict
from casework.domain import DEFAULT_STANDARDS, ConstructionStandards, DesignState
from casework.web.exceptions import CabinetNotFoundError


def get_standards() -> ConstructionStandards:
    """Dependency for the construction standards."""
    return DEFAULT_STANDARDS


StandardsDep = Annotated[ConstructionStandards, Depends(get_standards)]


def open_session(
    project: dict,
    standards: ConstructionStandards,
    cabinet_id: str | None = None,
) -> DesignSession:
    """Validate a project snapshot and open a session on it.

    When ``cabinet_id`` is given the session holds only that cabinet.

    Raises:
        ConfigError: If the snapshot fails validation.
        CabinetNotFoundError: If ``cabinet_id`` is not in the project.
    """
    state = config_to_state(load_project_from_dict(project))
    if cabinet_id is not None:
        cabinet = state.cabinet(cabinet_id)
        if cabinet is None:
            raise CabinetNotFoundError(cabinet_id)
        state = DesignState(
            cabinets=(cabinet,),
            project_name=state.project_name,
            material_costs=state.material_costs,
            labor_rate=state.labor_rate,
        )
    return DesignSession(state, standards)
