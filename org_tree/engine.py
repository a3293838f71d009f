"""
Org Tree Kernel: Engine v1.0

Top-level orchestrator. Resolves ids via locator.py, delegates mutation
to transitions.py, records reversals in history.py.

Failure contract: every failed move / undo / redo leaves the tree and
both history stacks untouched. Failures are logged on this module's
logger and returned as an unsuccessful OperationResult, or raised when
TreeConstants.strict is set.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .diagnostics import compute_diagnostics
from .domain_types import Employee, OperationResult, TreeConstants
from .errors import (
    EmployeeNotFoundError,
    EmptyHistoryError,
    InvalidMoveError,
    OrgTreeError,
)
from .history import HistoryStack, RedoRecord, UndoRecord
from .invariants import (
    InvariantViolationError,
    validate_supervisor_index,
    validate_tree,
)
from .locator import (
    build_supervisor_index,
    find_employee,
    is_in_subtree,
    position_of,
)
from .transitions import relocate

logger = logging.getLogger(__name__)


class OrgTree:
    """
    Stateful engine owning one employee tree and its undo/redo stacks.

    The tree is validated once at construction (hard fail). Supervisors
    are tracked in an id -> supervisor id index kept in step with every
    mutation; nodes themselves carry no parent reference.
    """

    def __init__(
        self,
        ceo: Employee,
        constants: Optional[TreeConstants] = None,
    ) -> None:
        validate_tree(ceo)
        self._ceo = ceo
        self._constants = constants or TreeConstants()
        self._supervisor_of: Dict[int, int] = build_supervisor_index(ceo)
        self._undo_stack: HistoryStack[UndoRecord] = HistoryStack(
            self._constants.max_history_depth
        )
        self._redo_stack: HistoryStack[RedoRecord] = HistoryStack(
            self._constants.max_history_depth
        )

    # -- State access -------------------------------------------------------

    @property
    def ceo(self) -> Employee:
        return self._ceo

    @property
    def constants(self) -> TreeConstants:
        return self._constants

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def undo_history(self) -> List[UndoRecord]:
        return self._undo_stack.snapshot()

    def redo_history(self) -> List[RedoRecord]:
        return self._redo_stack.snapshot()

    def find(self, employee_id: int) -> Optional[Employee]:
        return find_employee(self._ceo, employee_id)

    def supervisor_of(self, employee_id: int) -> Optional[int]:
        """Id of the direct supervisor, None for the CEO or unknown ids."""
        return self._supervisor_of.get(employee_id)

    # -- Public API ---------------------------------------------------------

    def move(self, employee_id: int, supervisor_id: int) -> OperationResult:
        """
        Reparent ``employee_id`` (with its whole subtree) under
        ``supervisor_id``, appended as the last subordinate.
        """
        employee = self.find(employee_id)
        if employee is None:
            return self._fail("move", EmployeeNotFoundError(employee_id))
        supervisor = self.find(supervisor_id)
        if supervisor is None:
            return self._fail(
                "move", EmployeeNotFoundError(supervisor_id, "supervisor"),
                employee_id,
            )
        if employee is self._ceo:
            return self._fail(
                "move",
                InvalidMoveError(
                    employee_id, supervisor_id,
                    f"Employee {employee_id!r} is the CEO and cannot be moved",
                ),
                employee_id,
            )
        if is_in_subtree(employee, supervisor_id):
            return self._fail(
                "move",
                InvalidMoveError(
                    employee_id, supervisor_id,
                    f"Cannot move employee {employee_id!r} under "
                    f"{supervisor_id!r}: target is inside its own subtree",
                ),
                employee_id,
            )

        current = self._current_supervisor(employee_id)
        self._undo_stack.push(UndoRecord(
            employee_id=employee_id,
            previous_supervisor_id=current.id,
            previous_index=position_of(current, employee_id),
        ))
        if self._constants.clear_redo_on_move:
            self._redo_stack.clear()

        relocate(employee, current, supervisor, self._supervisor_of)
        logger.debug(
            "move: employee %s %s -> %s", employee_id, current.id, supervisor_id
        )
        return OperationResult(
            operation="move",
            employee_id=employee_id,
            from_supervisor_id=current.id,
            to_supervisor_id=supervisor_id,
        )

    def undo(self) -> OperationResult:
        """Reverse the most recent move or redo."""
        record = self._undo_stack.peek()
        if record is None:
            return self._fail("undo", EmptyHistoryError("undo"))

        employee, target = self._resolve_record(
            record.employee_id, record.previous_supervisor_id,
        )
        if is_in_subtree(employee, target.id):
            return self._fail(
                "undo",
                InvalidMoveError(
                    employee.id, target.id,
                    f"Cannot restore employee {employee.id!r} under "
                    f"{target.id!r}: target is inside its own subtree",
                ),
                employee.id,
            )

        self._undo_stack.pop()
        current = self._current_supervisor(employee.id)
        self._redo_stack.push(RedoRecord(
            employee_id=employee.id,
            supervisor_id_to_restore=current.id,
            index_to_restore=position_of(current, employee.id),
        ))
        relocate(
            employee, current, target, self._supervisor_of,
            record.previous_index,
        )
        logger.debug(
            "undo: employee %s %s -> %s", employee.id, current.id, target.id
        )
        return OperationResult(
            operation="undo",
            employee_id=employee.id,
            from_supervisor_id=current.id,
            to_supervisor_id=target.id,
        )

    def redo(self) -> OperationResult:
        """Reverse the most recent undo."""
        record = self._redo_stack.peek()
        if record is None:
            return self._fail("redo", EmptyHistoryError("redo"))

        employee, target = self._resolve_record(
            record.employee_id, record.supervisor_id_to_restore,
        )
        if is_in_subtree(employee, target.id):
            return self._fail(
                "redo",
                InvalidMoveError(
                    employee.id, target.id,
                    f"Cannot restore employee {employee.id!r} under "
                    f"{target.id!r}: target is inside its own subtree",
                ),
                employee.id,
            )

        self._redo_stack.pop()
        current = self._current_supervisor(employee.id)
        self._undo_stack.push(UndoRecord(
            employee_id=employee.id,
            previous_supervisor_id=current.id,
            previous_index=position_of(current, employee.id),
        ))
        relocate(
            employee, current, target, self._supervisor_of,
            record.index_to_restore,
        )
        logger.debug(
            "redo: employee %s %s -> %s", employee.id, current.id, target.id
        )
        return OperationResult(
            operation="redo",
            employee_id=employee.id,
            from_supervisor_id=current.id,
            to_supervisor_id=target.id,
        )

    def validate(self) -> None:
        """Re-run structural invariants and the supervisor index check."""
        validate_tree(self._ceo)
        validate_supervisor_index(self._ceo, self._supervisor_of)

    def to_dict(self) -> dict:
        return self._ceo.to_dict()

    def get_diagnostics(self) -> dict:
        """Return diagnostic snapshot of the tree and its history."""
        return compute_diagnostics(
            self._ceo,
            undo_depth=self.undo_depth,
            redo_depth=self.redo_depth,
            max_history_depth=self._constants.max_history_depth,
        )

    # -- Internals ----------------------------------------------------------

    def _current_supervisor(self, employee_id: int) -> Employee:
        supervisor_id = self._supervisor_of.get(employee_id)
        supervisor = (
            None if supervisor_id is None else self.find(supervisor_id)
        )
        if supervisor is None:
            raise InvariantViolationError(
                "supervisor_index",
                f"No supervisor recorded for employee {employee_id!r}"
            )
        return supervisor

    def _resolve_record(
        self, employee_id: int, supervisor_id: int,
    ) -> "tuple[Employee, Employee]":
        # Nodes are never destroyed, so history ids must always resolve.
        employee = self.find(employee_id)
        supervisor = self.find(supervisor_id)
        if employee is None or supervisor is None:
            raise InvariantViolationError(
                "history_refs",
                f"History references employee {employee_id!r} / supervisor "
                f"{supervisor_id!r} that no longer exist in the tree"
            )
        return employee, supervisor

    def _fail(
        self,
        operation: str,
        error: OrgTreeError,
        employee_id: Optional[int] = None,
    ) -> OperationResult:
        if self._constants.strict:
            raise error
        logger.error("%s failed: %s", operation, error)
        return OperationResult(
            operation=operation,
            success=False,
            employee_id=employee_id,
            reason=str(error),
        )
