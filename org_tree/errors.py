"""
Org Tree Kernel: Operation Errors

Raised (strict mode) or logged (default) when move / undo / redo cannot
run. In both cases the tree and its history are left untouched.
"""

from __future__ import annotations


class OrgTreeError(Exception):
    """Base exception for all org tree operations."""

    kind: str = "OrgTreeError"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"[{self.kind}] {detail}")


class EmployeeNotFoundError(OrgTreeError):
    """An employee or supervisor id did not resolve in the tree."""

    kind = "NotFound"

    def __init__(self, employee_id: int, role: str = "employee") -> None:
        self.employee_id = employee_id
        self.role = role
        super().__init__(f"{role.capitalize()} {employee_id!r} not found")


class EmptyHistoryError(OrgTreeError):
    """Undo or redo requested with nothing on the corresponding stack."""

    kind = "EmptyHistory"

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"No action to {operation}")


class InvalidMoveError(OrgTreeError):
    """The requested reparenting would break the rooted-tree structure."""

    kind = "InvalidMove"

    def __init__(self, employee_id: int, supervisor_id: int, detail: str) -> None:
        self.employee_id = employee_id
        self.supervisor_id = supervisor_id
        super().__init__(detail)
