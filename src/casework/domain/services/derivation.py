"""Geometry derived from cabinet parameters.

Door counts, opening sizes and drawer layouts are never stored; they are
recomputed from the cabinet whenever the cut list, the validators or the
renderer ask for them.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Sequence

from ..entities import Door, Drawer, new_id
from ..standards import DEFAULT_STANDARDS, ConstructionStandards
from ..value_objects import HandleSide

if TYPE_CHECKING:
    from ..entities import Cabinet

logger = logging.getLogger(__name__)

__all__ = [
    "door_limit",
    "door_opening_height",
    "door_opening_width",
    "doors_for",
    "drawer_box_height",
    "drawer_front_height",
    "drawer_front_width",
    "max_doors",
    "optimal_drawer_heights",
    "place_drawers",
    "suggested_door_count",
    "toekick_top",
    "top_of_drawer_stack",
]


def max_doors(width: float, standards: ConstructionStandards = DEFAULT_STANDARDS) -> int:
    """Maximum number of doors that fit across a cabinet width.

    Each door needs the minimum door width plus the spacing between doors,
    except that the last door does not need trailing spacing.

    Examples:
        >>> max_doors(18)
        1
        >>> max_doors(24)
        2
    """
    defaults = standards.smart_defaults
    return max(
        0,
        math.floor(
            (width - defaults.door_spacing)
            / (defaults.min_door_width + defaults.door_spacing)
        ),
    )


def door_limit(cabinet: Cabinet, standards: ConstructionStandards = DEFAULT_STANDARDS) -> int:
    """Door limit for a cabinet, honoring double-door mode."""
    if cabinet.double_door:
        return standards.smart_defaults.double_door_limit
    return max_doors(cabinet.width, standards)


def suggested_door_count(
    width: float, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> int:
    """Suggest a comfortable door count for a cabinet width.

    Examples:
        >>> suggested_door_count(24)
        1
        >>> suggested_door_count(48)
        2
        >>> suggested_door_count(60)
        3
    """
    optimal_max = standards.smart_defaults.optimal_max_door_width
    if width <= optimal_max:
        return 1
    if width <= optimal_max * 2:
        return 2
    return math.ceil(width / optimal_max)


def toekick_top(cabinet: Cabinet) -> float:
    """Height of the cabinet's internal floor above its bottom."""
    return cabinet.toekick_height if cabinet.toekick else 0.0


def top_of_drawer_stack(cabinet: Cabinet) -> float:
    """Top of the highest drawer, or the internal floor when there are none.

    Drawers are stored in no particular order; the drawer reaching highest
    defines the stack top regardless of its position in the list.
    """
    return max((d.top for d in cabinet.drawers), default=toekick_top(cabinet))


def door_opening_height(
    cabinet: Cabinet, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> float:
    """Vertical space left for doors above the toekick and drawer stack.

    May be zero or negative for a cabinet whose drawers fill it; callers
    treat a non-positive opening as "no door parts".
    """
    base = max(toekick_top(cabinet), top_of_drawer_stack(cabinet))
    return cabinet.height - base - standards.smart_defaults.door_clearance


def door_opening_width(
    cabinet: Cabinet, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> float:
    """Width of each door when the opening is shared by ``cabinet.doors`` doors."""
    if cabinet.doors <= 0:
        return 0.0
    return cabinet.width / cabinet.doors - standards.smart_defaults.door_width_clearance


def doors_for(
    cabinet: Cabinet, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> tuple[Door, ...]:
    """Logical doors of a cabinet, with their handle sides."""
    width = door_opening_width(cabinet, standards)
    height = door_opening_height(cabinet, standards)
    return tuple(
        Door(
            index=i,
            width=width,
            height=height,
            handle_side=cabinet.door_handles.get(i, HandleSide.LEFT),
        )
        for i in range(cabinet.doors)
    )


def drawer_front_width(
    cabinet: Cabinet, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> float:
    """Width of a drawer-front opening."""
    return cabinet.width - standards.drawer_box.opening_inset


def drawer_front_height(
    drawer: Drawer, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> float:
    """Height of a drawer front."""
    return drawer.height - standards.drawer_box.front_height_reduction


def drawer_box_height(
    drawer: Drawer, standards: ConstructionStandards = DEFAULT_STANDARDS
) -> float:
    """Height of the drawer box sides, front and back."""
    box = standards.drawer_box
    return min(box.front_back_height, drawer.height - box.height_clearance)


def optimal_drawer_heights(
    cabinet_height: float,
    toekick_height: float = 0.0,
    standards: ConstructionStandards = DEFAULT_STANDARDS,
) -> list[float]:
    """Tiered drawer layout filling the height above the toekick.

    Heights are returned top-down in the order they are stacked from the
    floor by ``place_drawers``. The sum of the heights plus one reveal
    between each pair of drawers equals the available height.

    Example:
        >>> optimal_drawer_heights(30, 4.5)
        [4.0, 10.625, 10.625]
    """
    defaults = standards.smart_defaults
    available = cabinet_height - toekick_height
    reveal = defaults.drawer_reveal

    if available < 18:
        height = (available - reveal) / 2
        heights = [height, height]
    elif available < 24:
        height = (available - reveal * 2) / 3
        heights = [height, height, height]
    elif available < 36:
        medium = (available - defaults.small_drawer - reveal * 2) / 2
        heights = [defaults.small_drawer, medium, medium]
    else:
        remaining = (
            available - defaults.small_drawer - defaults.medium_drawer - reveal * 3
        )
        if remaining < 16:
            heights = [defaults.small_drawer, defaults.medium_drawer, remaining]
        else:
            large = remaining / 2
            heights = [defaults.small_drawer, defaults.medium_drawer, large, large]

    logger.debug(f"Optimal drawer heights for {available:.3f} in available: {heights}")
    return heights


def place_drawers(
    heights: Sequence[float],
    base_y: float,
    standards: ConstructionStandards = DEFAULT_STANDARDS,
    id_factory: Callable[[], str] = new_id,
) -> tuple[Drawer, ...]:
    """Stack drawers upward from ``base_y`` separated by one reveal each."""
    reveal = standards.smart_defaults.drawer_reveal
    drawers: list[Drawer] = []
    current_y = base_y
    for height in heights:
        drawers.append(Drawer(id=id_factory(), height=height, start_y=current_y))
        current_y += height + reveal
    return tuple(drawers)
