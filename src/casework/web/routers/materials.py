"""Material estimate endpoints."""

from fastapi import APIRouter

from casework.infrastructure import JsonExporter
from casework.web.dependencies import StandardsDep, open_session
from casework.web.schemas.requests import ProjectRequest
from casework.web.schemas.responses import MaterialsResponse

router = APIRouter(prefix="/materials", tags=["materials"])


@router.post("", response_model=MaterialsResponse)
async def estimate_materials(
    request: ProjectRequest, standards: StandardsDep
) -> MaterialsResponse:
    """Aggregate sheet materials, sheet groups and the project cost."""
    session = open_session(request.project, standards, request.cabinet_id)
    exporter = JsonExporter()
    return MaterialsResponse.model_validate(
        {
            "materials": exporter.materials(session.materials()),
            "sheet_optimization": exporter.sheet_optimization(
                session.sheet_optimization()
            ),
            "estimate": exporter.estimate(session.estimate()),
        }
    )
