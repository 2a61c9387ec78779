"""Construction, style and display enums."""

from __future__ import annotations

from enum import Enum


class ConstructionType(str, Enum):
    """Methods of building the cabinet box.

    Attributes:
        FRAMELESS: European style, doors hang directly on the sides.
        FACE_FRAME: Traditional American style with a frame of rails and
            stiles overlaid on the front of the box.
    """

    FRAMELESS = "frameless"
    FACE_FRAME = "faceFrame"


class FrontStyle(str, Enum):
    """Door and drawer front styles.

    GLASS is only valid for doors.
    """

    FLAT = "flat"
    SHAKER = "shaker"
    RAISED = "raised"
    GLASS = "glass"


class HandleSide(str, Enum):
    """Side of a door that carries the pull."""

    LEFT = "left"
    RIGHT = "right"


class GrainDirection(str, Enum):
    """Grain direction recorded on a cut-list entry.

    Attributes:
        HORIZONTAL: Grain runs along the entry's width.
        VERTICAL: Grain runs along the entry's height.
        NOT_APPLICABLE: Hardware and other non-sheet lines.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    NOT_APPLICABLE = "n/a"


class MeasurementFormat(str, Enum):
    """How measurements are rendered for display."""

    BOTH = "both"
    FRACTION = "fraction"
    DECIMAL = "decimal"
