"""
Org Tree Kernel v1.0
Deterministic, in-memory organization chart with reversible reparenting.
"""

import logging

from .domain_types import (
    Employee, OperationResult, TreeConstants, validate_employee_id,
)
from .employees import create_employee
from .errors import (
    OrgTreeError,
    EmployeeNotFoundError,
    EmptyHistoryError,
    InvalidMoveError,
)
from .history import UndoRecord, RedoRecord, HistoryStack
from .invariants import InvariantViolationError, validate_tree
from .locator import find_employee, iter_employees, build_supervisor_index
from .engine import OrgTree
from .hashing import canonical_serialize, canonical_hash
from .diagnostics import compute_diagnostics
from .schema import EmployeeModel, build_employee_tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Employee",
    "OperationResult",
    "TreeConstants",
    "validate_employee_id",
    "create_employee",
    "OrgTreeError",
    "EmployeeNotFoundError",
    "EmptyHistoryError",
    "InvalidMoveError",
    "UndoRecord",
    "RedoRecord",
    "HistoryStack",
    "InvariantViolationError",
    "validate_tree",
    "find_employee",
    "iter_employees",
    "build_supervisor_index",
    "OrgTree",
    "canonical_serialize",
    "canonical_hash",
    "compute_diagnostics",
    "EmployeeModel",
    "build_employee_tree",
]
