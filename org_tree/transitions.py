"""
Org Tree Kernel: Centralized Mutation Primitives v1.0

ALL tree-mutation logic lives here. The engine decides *what* moves;
these helpers rewire subordinate lists and keep the supervisor index in
step with them.
"""

from __future__ import annotations

from typing import Dict

from .domain_types import Employee
from .locator import position_of


def detach(
    supervisor: Employee,
    employee_id: int,
    supervisor_index: Dict[int, int],
) -> int:
    """
    Remove ``employee_id`` from supervisor.subordinates.
    Returns the index it occupied, or -1 if it was not there.
    """
    idx = position_of(supervisor, employee_id)
    if idx != -1:
        del supervisor.subordinates[idx]
        supervisor_index.pop(employee_id, None)
    return idx


def attach(
    supervisor: Employee,
    employee: Employee,
    supervisor_index: Dict[int, int],
    index: int | None = None,
) -> int:
    """
    Insert ``employee`` into supervisor.subordinates at ``index``
    (clamped to the list bounds) or append when ``index`` is None.
    Returns the index actually used.
    """
    subs = supervisor.subordinates
    if index is None or index >= len(subs):
        subs.append(employee)
        used = len(subs) - 1
    else:
        used = max(index, 0)
        subs.insert(used, employee)
    supervisor_index[employee.id] = supervisor.id
    return used


def relocate(
    employee: Employee,
    old_supervisor: Employee,
    new_supervisor: Employee,
    supervisor_index: Dict[int, int],
    index: int | None = None,
) -> int:
    """Detach from ``old_supervisor`` and attach under ``new_supervisor``."""
    detach(old_supervisor, employee.id, supervisor_index)
    return attach(new_supervisor, employee, supervisor_index, index)
