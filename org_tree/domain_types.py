"""
Org Tree Kernel: Core Domain Types v1.0

Pure data. No behaviour, no mutation logic.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Employee:
    A tree node holding a unique integer id, a display name and the ordered
    list of subordinates it exclusively owns.

Supervisor:
    The employee whose subordinates list currently contains a node.
    The CEO has none.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import (
    DEFAULT_CLEAR_REDO_ON_MOVE,
    DEFAULT_MAX_HISTORY_DEPTH,
    DEFAULT_STRICT,
)


def validate_employee_id(employee_id: int) -> None:
    """Employee ids must be plain ints (bool rejected). Hard fail."""
    if isinstance(employee_id, bool) or not isinstance(employee_id, int):
        raise TypeError(
            f"Invalid employee ID {employee_id!r}: must be an int"
        )


# ── Core Domain Types ─────────────────────────────────────────

@dataclass
class Employee:
    """A single node of the organization chart."""

    id: int
    name: str
    subordinates: List["Employee"] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Nested plain-dict view, children in stored order. Not recursive."""
        out: dict = {"id": self.id, "name": self.name, "subordinates": []}
        stack: List[Tuple["Employee", dict]] = [(self, out)]
        while stack:
            node, target = stack.pop()
            for sub in node.subordinates:
                child = {"id": sub.id, "name": sub.name, "subordinates": []}
                target["subordinates"].append(child)
                stack.append((sub, child))
        return out


@dataclass(frozen=True)
class TreeConstants:
    """
    Engine configuration, injected at OrgTree construction.

    max_history_depth: cap per history stack, 0 = unbounded.
    clear_redo_on_move: a fresh move discards pending redos.
    strict: raise operation errors instead of logging them.
    """

    max_history_depth: int = DEFAULT_MAX_HISTORY_DEPTH
    clear_redo_on_move: bool = DEFAULT_CLEAR_REDO_ON_MOVE
    strict: bool = DEFAULT_STRICT

    def __post_init__(self) -> None:
        if self.max_history_depth < 0:
            raise ValueError(
                f"max_history_depth must be >= 0, got {self.max_history_depth}"
            )


@dataclass(frozen=True)
class OperationResult:
    """
    Structured, immutable outcome of move / undo / redo.

    On failure the tree is untouched and ``reason`` carries the
    diagnostic that was logged.
    """

    operation: str = ""
    success: bool = True
    employee_id: Optional[int] = None
    from_supervisor_id: Optional[int] = None
    to_supervisor_id: Optional[int] = None
    reason: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "operation": self.operation,
            "success": self.success,
            "employee_id": self.employee_id,
            "from_supervisor_id": self.from_supervisor_id,
            "to_supervisor_id": self.to_supervisor_id,
            "reason": self.reason,
        }
