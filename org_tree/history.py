"""
Org Tree Kernel: History Records v1.0

Undo/redo records are pure data. They reference employees by id only,
never by node, so they stay valid while the tree is mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class UndoRecord:
    """Position an employee held immediately before a move or redo."""

    employee_id: int
    previous_supervisor_id: int
    previous_index: int


@dataclass(frozen=True)
class RedoRecord:
    """Position an employee held immediately before an undo."""

    employee_id: int
    supervisor_id_to_restore: int
    index_to_restore: int


class HistoryStack(Generic[R]):
    """
    LIFO stack of history records with an optional depth cap.

    When the cap is exceeded the oldest record is discarded.
    """

    def __init__(self, max_depth: int = 0) -> None:
        self._records: List[R] = []
        self._max_depth = max_depth

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def push(self, record: R) -> None:
        self._records.append(record)
        if self._max_depth and len(self._records) > self._max_depth:
            del self._records[0]

    def peek(self) -> Optional[R]:
        return self._records[-1] if self._records else None

    def pop(self) -> R:
        return self._records.pop()

    def clear(self) -> None:
        self._records.clear()

    def snapshot(self) -> List[R]:
        """Copy of the records, oldest first."""
        return list(self._records)
