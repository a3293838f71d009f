"""
Org Tree Kernel: Invariant Checks v1.0

Hard-fail validation. Every check raises InvariantViolationError on failure.
"""

from __future__ import annotations

from typing import Dict, List, Set

from .domain_types import Employee
from .locator import build_supervisor_index


class InvariantViolationError(Exception):
    """Raised when a structural tree invariant is violated."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_tree(root: Employee) -> None:
    """
    Run the structural checks on the tree rooted at ``root``.
    Raises InvariantViolationError on the first failure.
    """
    nodes = _collect_nodes(root)
    _check_id_types(nodes)
    _check_unique_ids(nodes)


def validate_supervisor_index(
    root: Employee, supervisor_index: Dict[int, int],
) -> None:
    """The incrementally maintained index must match the live tree."""
    actual = build_supervisor_index(root)
    if actual != supervisor_index:
        stale = sorted(
            set(actual.items()).symmetric_difference(supervisor_index.items())
        )
        raise InvariantViolationError(
            "supervisor_index",
            f"Supervisor index out of sync with tree: {stale}"
        )


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _collect_nodes(root: Employee) -> List[Employee]:
    """
    Preorder walk that fails on any node object reached twice, which
    covers both shared ownership and cycles.
    """
    seen: Set[int] = set()
    nodes: List[Employee] = []
    stack: List[Employee] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise InvariantViolationError(
                "single_owner",
                f"Employee {node.id!r} is reachable through more than one "
                f"supervisor (shared node or cycle)"
            )
        seen.add(id(node))
        nodes.append(node)
        stack.extend(reversed(node.subordinates))
    return nodes


def _check_id_types(nodes: List[Employee]) -> None:
    for node in nodes:
        if isinstance(node.id, bool) or not isinstance(node.id, int):
            raise InvariantViolationError(
                "employee_id_type",
                f"Employee id {node.id!r} is not an int"
            )


def _check_unique_ids(nodes: List[Employee]) -> None:
    seen: Set[int] = set()
    for node in nodes:
        if node.id in seen:
            raise InvariantViolationError(
                "duplicate_employee_ids",
                f"Employee id {node.id!r} appears more than once"
            )
        seen.add(node.id)
