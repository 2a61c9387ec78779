"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from casework.domain import DesignState


@dataclass
class EditResult:
    """Outcome of an editing operation.

    A rejected edit carries the unchanged input state and a human-readable
    reason; presenting that reason is up to the caller.

    Attributes:
        state: The resulting design state.
        accepted: Whether the edit was applied.
        reason: Why the edit was rejected, if it was.
        adjustments: Values changed on the caller's behalf (e.g. a clamped
            door count) when the edit was accepted.
        description: History label for an accepted edit.
        record_history: Whether the edit belongs in the undo history.
            Selection and visibility changes do not.
    """

    state: DesignState
    accepted: bool = True
    reason: str | None = None
    adjustments: list[str] = field(default_factory=list)
    description: str = ""
    record_history: bool = True

    @classmethod
    def applied(
        cls,
        state: DesignState,
        description: str,
        adjustments: list[str] | None = None,
        record_history: bool = True,
    ) -> EditResult:
        return cls(
            state=state,
            description=description,
            adjustments=list(adjustments or []),
            record_history=record_history,
        )

    @classmethod
    def rejected(cls, state: DesignState, reason: str) -> EditResult:
        return cls(state=state, accepted=False, reason=reason, record_history=False)

    @property
    def is_valid(self) -> bool:
        """Check if the edit was applied."""
        return self.accepted
