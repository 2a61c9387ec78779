"""Conversion between project file models and domain objects.

Bridges the pydantic schema models and the frozen domain entities. Ids
missing from a file are generated on load so every cabinet and drawer of
a loaded design is addressable.
"""

from __future__ import annotations

from casework.application.config.schema import (
    CabinetConfig,
    DrawerConfig,
    HardwareConfig,
    ProjectConfiguration,
)
from casework.domain import (
    Cabinet,
    DesignState,
    Drawer,
    HardwareSelection,
    new_id,
)

__all__ = [
    "cabinet_to_config",
    "config_to_cabinet",
    "config_to_state",
    "state_to_config",
]


def config_to_cabinet(config: CabinetConfig) -> Cabinet:
    """Convert a cabinet model into a ``Cabinet`` entity."""
    return Cabinet(
        id=config.id or new_id(),
        name=config.name,
        width=config.width,
        height=config.height,
        depth=config.depth,
        thickness=config.thickness,
        construction=config.construction,
        material=config.material,
        cabinet_type=config.cabinet_type,
        x_position=config.x_position,
        z_position=config.z_position,
        doors=config.doors,
        door_style=config.door_style,
        double_door=config.double_door,
        door_drawer_gap=config.door_drawer_gap,
        door_overhang=config.door_overhang,
        door_handles=dict(config.door_handles),
        drawers=tuple(
            Drawer(id=d.id or new_id(), height=d.height, start_y=d.start_y)
            for d in config.drawers
        ),
        drawer_style=config.drawer_style,
        shelves=config.shelves,
        back_panel=config.back_panel,
        toekick=config.toekick,
        toekick_height=config.toekick_height,
        toekick_depth=config.toekick_depth,
        countertop=config.countertop,
        countertop_material=config.countertop_material,
        countertop_thickness=config.countertop_thickness,
        crown=config.crown,
        crown_height=config.crown_height,
        edgebanding=config.edgebanding,
        color=config.color,
        edgeband_color=config.edgeband_color,
        hardware=HardwareSelection(
            hinges=config.hardware.hinges,
            slides=config.hardware.slides,
            pulls=config.hardware.pulls,
        ),
    )


def cabinet_to_config(cabinet: Cabinet) -> CabinetConfig:
    """Convert a ``Cabinet`` entity into its project file model."""
    return CabinetConfig(
        id=cabinet.id,
        name=cabinet.name,
        cabinet_type=cabinet.cabinet_type,
        construction=cabinet.construction,
        x_position=cabinet.x_position,
        z_position=cabinet.z_position,
        width=cabinet.width,
        height=cabinet.height,
        depth=cabinet.depth,
        material=cabinet.material,
        thickness=cabinet.thickness,
        doors=cabinet.doors,
        door_style=cabinet.door_style,
        double_door=cabinet.double_door,
        door_drawer_gap=cabinet.door_drawer_gap,
        door_overhang=cabinet.door_overhang,
        door_handles=dict(cabinet.door_handles),
        drawers=[
            DrawerConfig(id=d.id, height=d.height, start_y=d.start_y)
            for d in cabinet.drawers
        ],
        drawer_style=cabinet.drawer_style,
        shelves=cabinet.shelves,
        back_panel=cabinet.back_panel,
        toekick=cabinet.toekick,
        toekick_height=cabinet.toekick_height,
        toekick_depth=cabinet.toekick_depth,
        color=cabinet.color,
        edgebanding=cabinet.edgebanding,
        edgeband_color=cabinet.edgeband_color,
        hardware=HardwareConfig(
            hinges=cabinet.hardware.hinges,
            slides=cabinet.hardware.slides,
            pulls=cabinet.hardware.pulls,
        ),
        countertop=cabinet.countertop,
        countertop_material=cabinet.countertop_material,
        countertop_thickness=cabinet.countertop_thickness,
        crown=cabinet.crown,
        crown_height=cabinet.crown_height,
    )


def config_to_state(config: ProjectConfiguration) -> DesignState:
    """Build a design state from a validated project file.

    Nothing is selected and nothing is hidden in a freshly loaded design.
    """
    return DesignState(
        cabinets=tuple(config_to_cabinet(c) for c in config.cabinets),
        project_name=config.name,
        material_costs=dict(config.material_costs),
        labor_rate=config.labor_rate,
    )


def state_to_config(state: DesignState) -> ProjectConfiguration:
    """Build the project file model of a design state."""
    return ProjectConfiguration(
        name=state.project_name,
        cabinets=[cabinet_to_config(c) for c in state.cabinets],
        material_costs=dict(state.material_costs),
        labor_rate=state.labor_rate,
    )
