"""Bounded undo/redo history of design states."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

__all__ = ["HistoryEntry", "HistoryManager", "MAX_HISTORY_SIZE", "TimelineItem"]

MAX_HISTORY_SIZE = 50

T = TypeVar("T")


@dataclass(frozen=True)
class HistoryEntry(Generic[T]):
    """A recorded snapshot.

    Attributes:
        state: Deep copy of the state at the time it was pushed.
        description: Human-readable label of the action that produced it.
        timestamp: When the snapshot was pushed.
    """

    state: T
    description: str
    timestamp: datetime


@dataclass(frozen=True)
class TimelineItem:
    """One row of the history timeline."""

    index: int
    description: str
    timestamp: datetime
    is_current: bool


class HistoryManager(Generic[T]):
    """Linear undo/redo history with a fixed capacity.

    ``current_index`` is -1 while the history is empty. Undo never moves
    before index 0, so the first recorded state acts as the baseline.

    Every state handed in is deep-copied, and every state handed out is a
    fresh deep copy, so callers can never alter a stored entry. Operations
    that cannot be performed return ``None`` instead of raising.
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("History size must be at least 1")
        self.max_size = max_size
        self._entries: list[HistoryEntry[T]] = []
        self._current_index = -1

    @property
    def current_index(self) -> int:
        return self._current_index

    def __len__(self) -> int:
        return len(self._entries)

    def push_state(self, state: T, description: str = "Action") -> None:
        """Record a new state, discarding any redo tail."""
        if self._current_index < len(self._entries) - 1:
            dropped = len(self._entries) - self._current_index - 1
            del self._entries[self._current_index + 1 :]
            logger.debug(f"Discarded {dropped} redo entries")

        self._entries.append(
            HistoryEntry(
                state=copy.deepcopy(state),
                description=description,
                timestamp=datetime.now(),
            )
        )
        self._current_index += 1

        if len(self._entries) > self.max_size:
            self._entries.pop(0)
            self._current_index -= 1
        logger.debug(f"History push '{description}' at index {self._current_index}")

    def can_undo(self) -> bool:
        return self._current_index > 0

    def can_redo(self) -> bool:
        return self._current_index < len(self._entries) - 1

    def undo(self) -> T | None:
        """Step back one entry and return its state."""
        if not self.can_undo():
            return None
        self._current_index -= 1
        return self.current_state()

    def redo(self) -> T | None:
        """Step forward one entry and return its state."""
        if not self.can_redo():
            return None
        self._current_index += 1
        return self.current_state()

    def jump_to(self, index: int) -> T | None:
        """Move to an arbitrary entry; out-of-range indices are ignored."""
        if not 0 <= index < len(self._entries):
            return None
        self._current_index = index
        return self.current_state()

    def current_state(self) -> T | None:
        entry = self._current_entry()
        return copy.deepcopy(entry.state) if entry else None

    def current_description(self) -> str:
        entry = self._current_entry()
        return entry.description if entry else ""

    def undo_description(self) -> str | None:
        """Label of the entry an undo would land on."""
        if not self.can_undo():
            return None
        return self._entries[self._current_index - 1].description

    def redo_description(self) -> str | None:
        """Label of the entry a redo would land on."""
        if not self.can_redo():
            return None
        return self._entries[self._current_index + 1].description

    def timeline(self) -> list[TimelineItem]:
        return [
            TimelineItem(
                index=i,
                description=entry.description,
                timestamp=entry.timestamp,
                is_current=i == self._current_index,
            )
            for i, entry in enumerate(self._entries)
        ]

    def clear(self) -> None:
        self._entries = []
        self._current_index = -1

    def _current_entry(self) -> HistoryEntry[Any] | None:
        if 0 <= self._current_index < len(self._entries):
            return self._entries[self._current_index]
        return None
