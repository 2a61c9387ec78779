"""Design validation endpoints."""

from fastapi import APIRouter

from casework.web.dependencies import StandardsDep, open_session
from casework.web.schemas.requests import ProjectRequest
from casework.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_project(
    request: ProjectRequest, standards: StandardsDep
) -> ValidationResultSchema:
    """Run the advisory design checks on a project.

    Schema errors are reported as 422 responses; design problems come back
    in the body of a 200 response.
    """
    session = open_session(request.project, standards, request.cabinet_id)
    result = session.validate()
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[ValidationIssueSchema(path=e.path, message=e.message) for e in result.errors],
        warnings=[
            ValidationIssueSchema(path=w.path, message=w.message, suggestion=w.suggestion)
            for w in result.warnings
        ],
        suggestions=[
            ValidationIssueSchema(path=s.path, message=s.message) for s in result.suggestions
        ],
    )
