"""Cut list endpoints."""

from fastapi import APIRouter

from casework.domain import format_measurement
from casework.infrastructure import JsonExporter
from casework.web.dependencies import StandardsDep, open_session
from casework.web.schemas.requests import CutListRequest
from casework.web.schemas.responses import CutListEntrySchema, CutListResponse

router = APIRouter(prefix="/cut-list", tags=["cut-list"])


@router.post("", response_model=CutListResponse)
async def generate_cut_list(
    request: CutListRequest, standards: StandardsDep
) -> CutListResponse:
    """Generate the cut list of a project, or of one of its cabinets."""
    session = open_session(request.project, standards, request.cabinet_id)
    cut_list = session.cut_list()

    entries = []
    for entry, data in zip(cut_list, JsonExporter().cut_list(cut_list)):
        if entry.width > 0 and entry.height > 0:
            data["size"] = (
                f"{format_measurement(entry.width, request.display)} x "
                f"{format_measurement(entry.height, request.display)}"
            )
        entries.append(CutListEntrySchema(**data))

    return CutListResponse(
        project=session.state.project_name,
        entries=entries,
        total_parts=sum(
            e.quantity for e in cut_list if e.width > 0 and e.height > 0
        ),
    )
