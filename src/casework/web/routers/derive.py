"""Smart default endpoints for doors and drawers."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from casework.domain import Cabinet, format_measurement
from casework.domain.services import (
    door_limit,
    max_doors,
    optimal_drawer_heights,
    place_drawers,
    suggested_door_count,
)
from casework.web.dependencies import StandardsDep
from casework.web.schemas.responses import (
    DoorSuggestionSchema,
    DrawerLayoutSchema,
    DrawerPlacementSchema,
)

router = APIRouter(prefix="/derive", tags=["derive"])


@router.get("/doors", response_model=DoorSuggestionSchema)
async def derive_doors(
    standards: StandardsDep,
    width: Annotated[
        float, Query(gt=0, allow_inf_nan=False, description="Cabinet width in inches")
    ],
    double_door: Annotated[bool, Query(description="Double-door mode")] = False,
) -> DoorSuggestionSchema:
    """Door counts that fit a cabinet width."""
    cabinet = Cabinet(width=width, double_door=double_door)
    return DoorSuggestionSchema(
        width=width,
        max_doors=max_doors(width, standards),
        suggested_doors=suggested_door_count(width, standards),
        door_limit=door_limit(cabinet, standards),
    )


@router.get("/drawers", response_model=DrawerLayoutSchema)
async def derive_drawers(
    standards: StandardsDep,
    height: Annotated[
        float, Query(gt=0, allow_inf_nan=False, description="Cabinet height in inches")
    ],
    toekick_height: Annotated[
        float, Query(ge=0, allow_inf_nan=False, description="Toekick height in inches")
    ] = 4.0,
) -> DrawerLayoutSchema:
    """Tiered drawer layout stacked from the toekick up."""
    heights = optimal_drawer_heights(height, toekick_height, standards)
    min_height = standards.smart_defaults.min_drawer_height
    if any(h < min_height for h in heights):
        raise HTTPException(
            status_code=422,
            detail={
                "error": f"Cabinet is too short for a drawer layout; drawers must be at least {min_height:g} inches",
                "error_type": "too_short",
            },
        )
    drawers = place_drawers(heights, toekick_height, standards)
    return DrawerLayoutSchema(
        height=height,
        toekick_height=toekick_height,
        drawers=[
            DrawerPlacementSchema(
                height=d.height,
                start_y=d.start_y,
                size=format_measurement(d.height),
            )
            for d in drawers
        ],
    )
