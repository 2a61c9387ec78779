"""Cut list generation service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from ..standards import DEFAULT_STANDARDS, ConstructionStandards, FrontStyleSpec
from ..value_objects import ConstructionType, FrontStyle, GrainDirection
from .derivation import (
    door_opening_height,
    door_opening_width,
    drawer_box_height,
    drawer_front_height,
    drawer_front_width,
)

if TYPE_CHECKING:
    from ..entities import Cabinet

logger = logging.getLogger(__name__)

__all__ = ["CutListEntry", "CutListGenerator"]


@dataclass(frozen=True)
class CutListEntry:
    """One line of the cut list.

    Hardware lines carry zero dimensions and the hardware material key.

    Attributes:
        cabinet: Name of the owning cabinet.
        part: Part name.
        quantity: Number of identical parts.
        width: Part width in inches.
        height: Part height in inches.
        thickness: Material thickness in inches.
        material: Material key.
        notes: Free-text note for the shop.
        grain_direction: Grain orientation.
        edgebanding: Edgebanding policy for the part.
        hardware: Hardware installed on or with the part.
        assembly_sequence: Build order hint, unique within one generation pass.
    """

    cabinet: str
    part: str
    quantity: int
    width: float
    height: float
    thickness: float
    material: str
    notes: str
    grain_direction: GrainDirection
    edgebanding: str
    hardware: str
    assembly_sequence: int

    @property
    def area(self) -> float:
        """Total area for all parts of this line in square inches."""
        return self.width * self.height * self.quantity


@dataclass(frozen=True)
class _Part:
    """A cut-list line before it is numbered."""

    part: str
    quantity: int
    width: float
    height: float
    thickness: float
    material: str
    notes: str
    grain_direction: GrainDirection
    edgebanding: str
    hardware: str


_FrontDecomposer = Callable[
    [str, int, float, float, str, str, FrontStyleSpec], list[_Part]
]


class CutListGenerator:
    """Expands cabinets into an ordered list of manufacturable parts.

    Generation is a pure function of the cabinet list: the same cabinets
    always yield the same entries, sequence numbers included.
    """

    def __init__(self, standards: ConstructionStandards = DEFAULT_STANDARDS) -> None:
        self.standards = standards
        self._front_decomposers: dict[FrontStyle, _FrontDecomposer] = {
            FrontStyle.SHAKER: self._framed_front,
            FrontStyle.FLAT: self._slab_front,
            FrontStyle.RAISED: self._slab_front,
            FrontStyle.GLASS: self._slab_front,
        }

    def generate(self, cabinets: Iterable[Cabinet]) -> list[CutListEntry]:
        """Generate the cut list for cabinets in layout order.

        Assembly sequence numbers start at 1 and continue across cabinets.
        """
        entries: list[CutListEntry] = []
        sequence = 1
        for cabinet in cabinets:
            for part in self._cabinet_parts(cabinet):
                entries.append(
                    CutListEntry(
                        cabinet=cabinet.name,
                        part=part.part,
                        quantity=part.quantity,
                        width=part.width,
                        height=part.height,
                        thickness=part.thickness,
                        material=part.material,
                        notes=part.notes,
                        grain_direction=part.grain_direction,
                        edgebanding=part.edgebanding,
                        hardware=part.hardware,
                        assembly_sequence=sequence,
                    )
                )
                sequence += 1
        logger.debug(f"Generated {len(entries)} cut list entries")
        return entries

    def generate_for_cabinet(self, cabinet: Cabinet) -> list[CutListEntry]:
        """Generate the cut list of a single cabinet, numbered from 1."""
        return self.generate([cabinet])

    def sort_by_size(self, cut_list: list[CutListEntry]) -> list[CutListEntry]:
        """Sort cut list by area (largest first) for efficient cutting."""
        return sorted(cut_list, key=lambda e: e.area, reverse=True)

    # ------------------------------------------------------------------
    # Per-cabinet decomposition
    # ------------------------------------------------------------------

    def _cabinet_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        yield from self._box_parts(cabinet)
        yield from self._face_frame_parts(cabinet)
        yield from self._drawer_parts(cabinet)
        yield from self._door_parts(cabinet)
        yield from self._hardware_parts(cabinet)

    def _box_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        t = cabinet.thickness
        inner_width = cabinet.width - 2 * t

        yield _Part(
            part="Side Panel",
            quantity=2,
            width=cabinet.depth,
            height=cabinet.height,
            thickness=t,
            material=cabinet.material,
            notes="Full height sides",
            grain_direction=GrainDirection.VERTICAL,
            edgebanding="front edge",
            hardware="Shelf pins if adjustable",
        )

        if cabinet.back_panel:
            yield _Part(
                part="Back Panel",
                quantity=1,
                width=inner_width,
                height=cabinet.height,
                thickness=self.standards.back_panel_thickness,
                material=cabinet.material,
                notes='1/4" back',
                grain_direction=GrainDirection.VERTICAL,
                edgebanding="none",
                hardware="Brad nails or staples",
            )

        yield _Part(
            part="Top/Bottom",
            quantity=2,
            width=inner_width,
            height=cabinet.depth,
            thickness=t,
            material=cabinet.material,
            notes="Between sides",
            grain_direction=GrainDirection.HORIZONTAL,
            edgebanding="front edge",
            hardware="None",
        )

        if cabinet.shelves > 0:
            yield _Part(
                part="Shelf",
                quantity=cabinet.shelves,
                width=inner_width,
                height=cabinet.depth - self.standards.shelf_depth_reduction,
                thickness=t,
                material=cabinet.material,
                notes="Adjustable",
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="front edge",
                hardware="Shelf pins (4 per shelf)",
            )

    def _face_frame_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        if cabinet.construction is not ConstructionType.FACE_FRAME:
            return
        frame = self.standards.face_frame
        stile_height = cabinet.height - 2 * frame.frame_width
        rail_width = cabinet.width - 2 * cabinet.thickness

        if stile_height > 0:
            yield _Part(
                part="Face Frame Stiles",
                quantity=2,
                width=frame.frame_width,
                height=stile_height,
                thickness=frame.frame_thickness,
                material=cabinet.material,
                notes="Left/right",
                grain_direction=GrainDirection.VERTICAL,
                edgebanding="all edges",
                hardware="Pocket screws",
            )
        if rail_width > 0:
            yield _Part(
                part="Face Frame Rails",
                quantity=2,
                width=rail_width,
                height=frame.frame_width,
                thickness=frame.frame_thickness,
                material=cabinet.material,
                notes="Top/bottom",
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="all edges",
                hardware="Pocket screws",
            )

    def _drawer_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        box = self.standards.drawer_box
        front_width = drawer_front_width(cabinet, self.standards)
        box_inner_width = front_width - box.side_thickness * 2
        box_depth = cabinet.depth - box.depth_clearance
        style_spec = self.standards.drawer_styles[cabinet.drawer_style]
        decompose = self._front_decomposers[cabinet.drawer_style]

        for i, drawer in enumerate(cabinet.drawers, start=1):
            label = f"Drawer {i}"
            front_height = drawer_front_height(drawer, self.standards)
            if front_height > 0 and front_width > 0:
                yield from decompose(
                    label,
                    1,
                    front_width,
                    front_height,
                    cabinet.material,
                    cabinet.drawer_style.value,
                    style_spec,
                )
            else:
                logger.debug(
                    f"{cabinet.name}: omitting {label} front, opening "
                    f"{front_width:.3f} x {front_height:.3f}"
                )

            box_height = drawer_box_height(drawer, self.standards)
            if box_height <= 0 or box_depth <= 0 or box_inner_width <= 0:
                logger.debug(f"{cabinet.name}: omitting {label} box")
                continue

            yield _Part(
                part=f"{label} Box Sides",
                quantity=2,
                width=box_depth,
                height=box_height,
                thickness=box.side_thickness,
                material=box.material,
                notes='1/2" sides',
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="top edge only",
                hardware="Drawer slides mount here",
            )
            yield _Part(
                part=f"{label} Box Front/Back",
                quantity=2,
                width=box_inner_width,
                height=box_height,
                thickness=box.side_thickness,
                material=box.material,
                notes='1/2" F/B',
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="top edge only",
                hardware="Pocket screws or dados",
            )
            yield _Part(
                part=f"{label} Bottom",
                quantity=1,
                width=box_inner_width,
                height=box_depth,
                thickness=box.bottom_thickness,
                material=box.material,
                notes='1/4" bottom',
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="none",
                hardware="Slides in groove",
            )

    def _door_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        if cabinet.doors <= 0:
            return
        width = door_opening_width(cabinet, self.standards)
        height = door_opening_height(cabinet, self.standards)
        if width <= 0 or height <= 0:
            logger.debug(
                f"{cabinet.name}: omitting door parts, opening "
                f"{width:.3f} x {height:.3f}"
            )
            return
        decompose = self._front_decomposers[cabinet.door_style]
        yield from decompose(
            "Door",
            cabinet.doors,
            width,
            height,
            cabinet.material,
            cabinet.door_style.value,
            self.standards.door_styles[cabinet.door_style],
        )

    def _hardware_parts(self, cabinet: Cabinet) -> Iterator[_Part]:
        material = self.standards.hardware_material
        hardware = cabinet.hardware

        def line(part: str, quantity: int, notes: str, install: str) -> _Part:
            return _Part(
                part=part,
                quantity=quantity,
                width=0.0,
                height=0.0,
                thickness=0.0,
                material=material,
                notes=notes,
                grain_direction=GrainDirection.NOT_APPLICABLE,
                edgebanding="n/a",
                hardware=install,
            )

        if cabinet.doors > 0:
            yield line(
                f"Hinges ({hardware.hinges.value})",
                cabinet.doors * 2,
                "2 per door",
                'Install 2-3" from top/bottom',
            )
            yield line(
                f"Door Pulls ({hardware.pulls.value})",
                cabinet.doors,
                "1 per door",
                "Center or offset per design",
            )

        drawer_count = len(cabinet.drawers)
        if drawer_count:
            yield line(
                f"Drawer Slides ({hardware.slides.value})",
                drawer_count * 2,
                f'{cabinet.depth:g}" pair/drawer',
                "Mount flush with drawer bottom",
            )
            yield line(
                f"Drawer Pulls ({hardware.pulls.value})",
                drawer_count,
                "1 per drawer",
                "Center horizontally, upper 1/3",
            )

    # ------------------------------------------------------------------
    # Front styles
    # ------------------------------------------------------------------

    def _framed_front(
        self,
        label: str,
        count: int,
        width: float,
        height: float,
        material: str,
        style: str,
        spec: FrontStyleSpec,
    ) -> list[_Part]:
        """Rails, stiles and a center panel captured in the frame groove."""
        thickness = self.standards.front_thickness
        is_door = label == "Door"
        # Door lines are pluralized ("Door Panels"); drawer lines read "Drawer 1 Panel".
        panel_name = "Panels" if is_door else "Panel"
        prefix = style.title()
        parts = [
            _Part(
                part=f"{label} Rails",
                quantity=2 * count,
                width=width,
                height=spec.rail_width,
                thickness=thickness,
                material=material,
                notes=f"{prefix} T/B" if is_door else "Top/bottom",
                grain_direction=GrainDirection.HORIZONTAL,
                edgebanding="all edges",
                hardware="Cope & stick joints",
            ),
            _Part(
                part=f"{label} Stiles",
                quantity=2 * count,
                width=spec.stile_width,
                height=height,
                thickness=thickness,
                material=material,
                notes=f"{prefix} L/R" if is_door else "Left/right",
                grain_direction=GrainDirection.VERTICAL,
                edgebanding="all edges",
                hardware="Cope & stick joints",
            ),
        ]
        panel_width = width - spec.stile_width * 2
        panel_height = height - spec.rail_width * 2
        if panel_width > 0 and panel_height > 0:
            parts.append(
                _Part(
                    part=f"{label} {panel_name}",
                    quantity=count,
                    width=panel_width,
                    height=panel_height,
                    thickness=spec.panel_thickness,
                    material=material,
                    notes="Center" if is_door else "Center panel",
                    grain_direction=GrainDirection.VERTICAL,
                    edgebanding="none (fits in groove)",
                    hardware="None",
                )
            )
        return parts

    def _slab_front(
        self,
        label: str,
        count: int,
        width: float,
        height: float,
        material: str,
        style: str,
        spec: FrontStyleSpec,
    ) -> list[_Part]:
        """A single front blank cut at opening size."""
        is_door = label == "Door"
        return [
            _Part(
                part=label if is_door else f"{label} Front",
                quantity=count,
                width=width,
                height=height,
                thickness=self.standards.front_thickness,
                material=material,
                notes=style,
                grain_direction=GrainDirection.VERTICAL,
                edgebanding="all edges",
                hardware="Hinges (2 per door) + pull" if is_door else "Drawer pull",
            )
        ]
