"""Application layer - use cases and orchestration."""

from .commands import DesignEditor
from .dtos import EditResult
from .history import HistoryEntry, HistoryManager, TimelineItem
from .session import DesignSession

__all__ = [
    "DesignEditor",
    "DesignSession",
    "EditResult",
    "HistoryEntry",
    "HistoryManager",
    "TimelineItem",
]
