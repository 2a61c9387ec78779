"""Hardware catalog enums and the per-cabinet hardware selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HingeType(str, Enum):
    """Available cabinet hinges."""

    CONCEALED_BLUM = "Concealed (Blum)"
    CONCEALED_GRASS = "Concealed (Grass)"
    EUROPEAN = "European"
    BUTT = "Butt Hinge"


class SlideType(str, Enum):
    """Available drawer slides."""

    UNDERMOUNT_BLUM = "Undermount (Blum)"
    SIDE_MOUNT = "Side Mount"
    CENTER_MOUNT = "Center Mount"
    SOFT_CLOSE = "Soft-Close"


class PullType(str, Enum):
    """Available door and drawer pulls."""

    BAR = "Bar Pull"
    CUP = "Cup Pull"
    KNOB = "Knob"
    EDGE = "Edge Pull"
    RECESSED = "Recessed"


@dataclass(frozen=True)
class HardwareSelection:
    """Hardware chosen for one cabinet.

    Attributes:
        hinges: Hinge used for every door of the cabinet.
        slides: Slide pair used for every drawer.
        pulls: Pull used on doors and drawer fronts alike.
    """

    hinges: HingeType = HingeType.CONCEALED_BLUM
    slides: SlideType = SlideType.UNDERMOUNT_BLUM
    pulls: PullType = PullType.BAR
