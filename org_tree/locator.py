"""
Org Tree Kernel: Node Locator and Traversal Utilities v1.0

Pure functions over an Employee tree. No mutation.
All traversals are iterative (explicit stack) so tree depth is not
limited by the interpreter recursion limit.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .domain_types import Employee


# ---------------------------------------------------------------------------
# Preorder traversal
# ---------------------------------------------------------------------------

def iter_employees(root: Employee) -> Iterator[Employee]:
    """
    Depth-first preorder: root first, then each subordinate's subtree in
    stored order.
    """
    stack: List[Employee] = [root]
    while stack:
        node = stack.pop()
        yield node
        # reversed so the first subordinate is visited first
        stack.extend(reversed(node.subordinates))


def find_employee(root: Employee, employee_id: int) -> Optional[Employee]:
    """
    Return the first node with ``employee_id`` in preorder, or None.

    Ids are assumed unique; with duplicates the first one in traversal
    order wins.
    """
    for node in iter_employees(root):
        if node.id == employee_id:
            return node
    return None


# ---------------------------------------------------------------------------
# Supervisor index
# ---------------------------------------------------------------------------

def build_supervisor_index(root: Employee) -> Dict[int, int]:
    """Map every non-root employee id to the id of its direct supervisor."""
    index: Dict[int, int] = {}
    for node in iter_employees(root):
        for sub in node.subordinates:
            index[sub.id] = node.id
    return index


def position_of(supervisor: Employee, employee_id: int) -> int:
    """Index of ``employee_id`` in supervisor.subordinates, or -1."""
    for i, sub in enumerate(supervisor.subordinates):
        if sub.id == employee_id:
            return i
    return -1


def is_in_subtree(node: Employee, employee_id: int) -> bool:
    """True if ``employee_id`` is ``node`` itself or one of its descendants."""
    return find_employee(node, employee_id) is not None


# ---------------------------------------------------------------------------
# Shape metrics
# ---------------------------------------------------------------------------

def tree_depth(root: Employee) -> int:
    """Number of levels in the tree (a lone root has depth 1)."""
    deepest = 0
    stack: List[Tuple[Employee, int]] = [(root, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        for sub in node.subordinates:
            stack.append((sub, level + 1))
    return deepest


def count_employees(root: Employee) -> int:
    return sum(1 for _ in iter_employees(root))


def find_leaves(root: Employee) -> List[int]:
    """Ids of employees with no subordinates, sorted."""
    return sorted(n.id for n in iter_employees(root) if not n.subordinates)
